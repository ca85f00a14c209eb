"""
Debuget Integrations
Process hooks and web framework adapters. The FastAPI handler is imported
from debuget.integrations.fastapi_handler.
"""

from .hooks import install_hooks, uninstall_hooks, install_loop_handler

__all__ = [
    "install_hooks",
    "uninstall_hooks",
    "install_loop_handler",
]
