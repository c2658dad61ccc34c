# py
import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

class RequestLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        logger.debug("-> {} {}", request.method, request.url.path)
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Request failed: {} {}", request.method, request.url.path)
            raise
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("{} {} -> {} ({:.1f} ms)", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

def register_middleware(app: FastAPI):
    app.add_middleware(RequestLoggingMiddleware)

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        logger.warning("Rejected {} {}: {}", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={"error": "bad_request", "details": str(exc)})

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error in request")
        return JSONResponse(status_code=500, content={"error": "internal_server_error", "details": str(exc)})
