import logging
import time
from datetime import datetime, timezone

from fastapi import FastAPI, Request

access_log = logging.getLogger("inventory.access")


def install_middleware(app: FastAPI):
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        t0 = time.perf_counter()
        status = 500
        try:
            resp = await call_next(request)
            status = resp.status_code
            return resp
        finally:
            dt = (time.perf_counter() - t0) * 1000
            # One line per request: timestamp, method, path, status, latency
            access_log.info(
                "%s %s %s %s %.3f ms",
                datetime.now(timezone.utc).isoformat(),
                request.method,
                request.url.path,
                status,
                dt,
            )
