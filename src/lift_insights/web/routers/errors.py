"""Error responses shared by the routers."""

from fastapi.responses import JSONResponse


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    """Build a JSON ``{"error": ...}`` response."""
    return JSONResponse(status_code=status_code, content={"error": message})


def not_found(message: str) -> JSONResponse:
    return error_response(message, status_code=404)
