"""Exception handlers and error pages."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from flashembed.web import render

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register application-wide exception handlers."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> HTMLResponse | JSONResponse:
        """Handle HTTP exceptions."""

        if exc.status_code == 404:
            return render(request, "errors/404.html", {"title": "Page Not Found"}, status_code=404)

        if "application/json" in request.headers.get("Accept", ""):
            return JSONResponse(
                {"detail": exc.detail, "status_code": exc.status_code}, status_code=exc.status_code
            )

        return render(
            request,
            "errors/500.html",
            {"title": "Error", "code": exc.status_code},
            status_code=exc.status_code,
        )

    @app.exception_handler(Exception)
    async def server_exception(request: Request, exc: Exception) -> HTMLResponse:
        """Handle uncaught server exceptions."""
        logger.error("Unhandled exception", exc_info=exc)
        return render(request, "errors/500.html", {"title": "Server Error"}, status_code=500)
