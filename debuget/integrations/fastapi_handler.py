"""
Debuget FastAPI Integration
Report unhandled request errors and answer with a JSON error body
"""

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from debuget.core import Reporter
from debuget.errors import describe


def response_status(error: Any) -> int:
    descriptor = describe(error)
    return descriptor.status_code or descriptor.status or 500


def install_exception_handler(app: FastAPI, reporter: Optional[Reporter] = None) -> None:
    """Register a catch-all handler on `app`"""
    reporter = reporter or Reporter()

    @app.exception_handler(Exception)
    async def report_exception(request: Request, exc: Exception) -> JSONResponse:
        await reporter.report(exc)
        return JSONResponse(
            status_code=response_status(exc),
            content={"error": str(exc)},
        )
