"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class FotmobError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class MissingParameterError(FotmobError):
    def __init__(self, name: str):
        super().__init__(f"Missing required parameter: {name}", status_code=400)
        self.name = name


class InvalidParameterError(FotmobError):
    def __init__(self, name: str):
        super().__init__(f"Invalid value for parameter: {name}", status_code=400)
        self.name = name


class UpstreamError(FotmobError):
    """FotMob call failed. The cache is left as it was."""

    def __init__(self, key: str, cause: Exception):
        super().__init__(
            f"Failed to fetch {key} from FotMob",
            status_code=502,
            details=str(cause) or type(cause).__name__,
        )
        self.key = key
        self.cause = cause


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(FotmobError)
    async def handle_fotmob_error(_request: Request, exc: FotmobError):
        body = {"error": str(exc)}
        if exc.details:
            body["details"] = exc.details
        return JSONResponse(body, status_code=exc.status_code)

    @app.exception_handler(ValueError)
    async def handle_value_error(_request: Request, exc: ValueError):
        return JSONResponse({"error": str(exc)}, status_code=400)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
        )
