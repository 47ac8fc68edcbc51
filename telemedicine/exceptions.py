import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    correlation_id = getattr(request.state, "correlation_id", None)
    logger.exception("Unhandled error on %s %s [%s]", request.method, request.url.path, correlation_id, exc_info=exc)
    body = {"detail": "Internal server error"}
    if correlation_id:
        body["requestId"] = correlation_id
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=body)
