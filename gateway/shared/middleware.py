import time
import uuid
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from gateway.shared.config import logger

UPLOAD_PATHS = {"/transcribe_speech"}
BODY_METHODS = {"POST", "PUT", "PATCH"}


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Injects a unique request ID into every incoming request for tracing.
    """
    async def dispatch(
        self, request: Request, call_next
    ) -> Response:
        request.state.request_id = request.headers.get('X-Request-ID', str(uuid.uuid4()))
        response = await call_next(request)
        response.headers["X-Request-ID"] = request.state.request_id
        return response


async def limit_body_size(
    request: Request, call_next
) -> Response:
    """
    Rejects requests whose declared Content-Length exceeds the configured limit.
    Bodies without a Content-Length cannot be bounded up front and get 411.
    """
    server_config = request.app.state.config["server"]
    limit = (
        server_config["max_upload_bytes"]
        if request.url.path in UPLOAD_PATHS
        else server_config["max_body_bytes"]
    )
    content_length = request.headers.get("content-length")
    if content_length is None and request.method in BODY_METHODS:
        logger.warning("Rejected %s %s: no Content-Length header", request.method, request.url.path)
        return JSONResponse(status_code=411, content={"detail": "Content-Length header required"})
    if content_length is not None:
        try:
            declared = int(content_length)
        except ValueError:
            return JSONResponse(status_code=400, content={"detail": "Invalid Content-Length header"})
        if declared > limit:
            logger.warning(
                "Rejected %s %s: body of %d bytes exceeds limit of %d",
                request.method, request.url.path, declared, limit,
            )
            return JSONResponse(
                status_code=413,
                content={"detail": f"Request body exceeds {limit} bytes"},
            )
    return await call_next(request)


async def add_process_time_header(
    request: Request, call_next
) -> Response:
    """
    Adds a custom X-Process-Time header and logs request completion details.
    """
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    logger.info(
        "Request completed",
        extra={
            "req_id": getattr(request.state, 'request_id', 'N/A'),
            "method": request.method,
            "path": request.url.path,
            "status": response.status_code,
            "duration_sec": round(process_time, 4)
        }
    )
    return response
