"""
Debuget Process Hooks
Report uncaught exceptions and unhandled asyncio failures, then exit
"""

import asyncio
import logging
import os
import sys
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Dict, Optional

from debuget.core import Reporter
from debuget.core.composer import raw_fallback

logger = logging.getLogger(__name__)

_previous_excepthook: Optional[Callable] = None


def report_blocking(reporter: Reporter, error: BaseException) -> None:
    """
    Write a report for `error` before returning, whatever state the
    current event loop is in (running, closing, closed or absent).
    """
    try:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            asyncio.run(reporter.report(error))
            return
        # this thread's loop is busy; report from a worker with its own loop
        with ThreadPoolExecutor(max_workers=1) as pool:
            pool.submit(asyncio.run, reporter.report(error)).result()
    except Exception:
        logger.exception("Error reporting error")
        reporter.sink.write("\n" + raw_fallback(error) + "\n", "error")


def _exit_after(reporter: Reporter, error: BaseException, exit_code: int,
                exit_func: Callable[[int], Any]) -> None:
    try:
        report_blocking(reporter, error)
    finally:
        sys.stderr.flush()
        exit_func(exit_code)


def install_hooks(
    reporter: Optional[Reporter] = None,
    exit_code: int = 1,
    exit_func: Callable[[int], Any] = os._exit,
) -> Callable:
    """
    Replace sys.excepthook with one that reports and terminates.

    KeyboardInterrupt goes to the previous hook untouched.

    Returns:
        The installed hook
    """
    global _previous_excepthook
    reporter = reporter or Reporter()
    previous = sys.excepthook

    def hook(exc_type, exc_value, exc_tb):
        if issubclass(exc_type, KeyboardInterrupt):
            previous(exc_type, exc_value, exc_tb)
            return
        if exc_value is None:
            exc_value = exc_type()
        if exc_value.__traceback__ is None:
            exc_value = exc_value.with_traceback(exc_tb)
        _exit_after(reporter, exc_value, exit_code, exit_func)

    if _previous_excepthook is None:
        _previous_excepthook = previous
    sys.excepthook = hook
    return hook


def uninstall_hooks() -> None:
    """Restore the excepthook that was active before install_hooks()"""
    global _previous_excepthook
    if _previous_excepthook is not None:
        sys.excepthook = _previous_excepthook
        _previous_excepthook = None


def install_loop_handler(
    loop: asyncio.AbstractEventLoop,
    reporter: Optional[Reporter] = None,
    exit_code: int = 1,
    exit_func: Callable[[int], Any] = os._exit,
) -> Callable:
    """
    Report exceptions nobody retrieved from tasks/futures on `loop`.

    A context without an exception (e.g. a bare message) is wrapped in a
    RuntimeError so it still produces a report. The report is written before
    the handler returns: the handler may run while the loop is shutting down
    or after it closed, when scheduled tasks would never execute.
    """
    reporter = reporter or Reporter()

    def handler(loop: asyncio.AbstractEventLoop, context: Dict[str, Any]) -> None:
        error = context.get("exception")
        if not isinstance(error, BaseException):
            error = RuntimeError(context.get("message", "Unhandled error in event loop"))
        logger.debug("Unhandled loop error: %s", context.get("message"))
        _exit_after(reporter, error, exit_code, exit_func)

    loop.set_exception_handler(handler)
    return handler
