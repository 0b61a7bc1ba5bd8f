"""Exception handlers translating query failures into HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from pagewise.core.exceptions import QueryError
from pagewise.core.logging import get_logger, log_event

logger = get_logger(__name__)


async def query_error_handler(request: Request, exc: QueryError) -> JSONResponse:
    log_event(
        logger,
        "error",
        "query_failed",
        path=request.url.path,
        code=exc.code,
        error=exc.message,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "message": exc.message,
                "code": exc.code,
                "details": exc.details,
            }
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the pagewise exception handlers on ``app``."""
    app.add_exception_handler(QueryError, query_error_handler)
