"""Domain errors raised by the catalog services.

Each error carries the HTTP status it maps to; ``register_error_handlers``
turns them into ``{"error": message}`` JSON responses.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(CatalogError):
    """Missing field or value outside the allowed set."""
    status_code = 400


class DuplicateKey(CatalogError):
    """Unique constraint violated."""
    status_code = 400


class NotFound(CatalogError):
    status_code = 404


class StoreError(CatalogError):
    """Any other persistence failure."""
    status_code = 500


def store_message(exc: SQLAlchemyError) -> str:
    """Driver message without SQLAlchemy's statement and help-link decoration."""
    return str(getattr(exc, "orig", None) or exc)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _format_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        # loc looks like ("body", "type") or ("path", "category_id")
        field = ".".join(str(p) for p in err.get("loc", ())[1:]) or "body"
        parts.append(f"{field}: {err.get('msg', 'invalid value')}")
    return "Некорректные данные запроса: " + "; ".join(parts)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error_response(400, _format_validation_error(exc))

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Store failure on %s %s: %s", request.method, request.url.path, exc)
        return _error_response(StoreError.status_code, store_message(exc))
