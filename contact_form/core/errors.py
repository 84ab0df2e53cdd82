import logging

from fastapi import Request
from fastapi.responses import PlainTextResponse


logger = logging.getLogger(__name__)


async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception in {request.method} {request.url.path}: {str(exc)}", exc_info=True)
    return PlainTextResponse("Internal Server Error", status_code=500)
