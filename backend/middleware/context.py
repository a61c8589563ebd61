import uuid
import time
from contextvars import ContextVar
from typing import Optional
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from config import logger

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        token = request_id_var.set(request_id)

        start_time = time.time()

        logger.info(
            "Request started %s %s (request_id=%s)",
            request.method,
            request.url.path,
            request_id,
        )

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request failed %s %s (request_id=%s)",
                request.method,
                request.url.path,
                request_id,
            )
            raise
        finally:
            request_id_var.reset(token)

        duration = time.time() - start_time

        logger.info(
            "Request completed %s %s -> %s in %.2f ms (request_id=%s)",
            request.method,
            request.url.path,
            response.status_code,
            duration * 1000,
            request_id,
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration:.3f}s"

        return response

def get_request_id() -> Optional[str]:
    return request_id_var.get()
