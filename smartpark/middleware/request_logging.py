"""
Request logging middleware.
"""
import time

from fastapi import FastAPI, Request
from loguru import logger

EXCLUDED_PATHS = {"/health", "/favicon.ico"}


def setup_request_logging(app: FastAPI) -> None:
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        if request.url.path in EXCLUDED_PATHS:
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        log = logger.warning if response.status_code >= 400 else logger.info
        log(
            "{} {} -> {} ({:.1f} ms)",
            request.method, request.url.path, response.status_code, elapsed_ms,
        )
        return response
