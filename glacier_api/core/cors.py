from typing import Iterable

import structlog
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger(__name__)


class OriginAllowListMiddleware(BaseHTTPMiddleware):
    """
    Rejects cross-origin requests from origins outside the allow-list before
    they reach any route. Requests without an Origin header (server-to-server,
    curl, health probes) are let through.
    """

    def __init__(self, app, allowed_origins: Iterable[str]):
        super().__init__(app)
        self.allowed_origins = set(allowed_origins)
        self.allow_all = "*" in self.allowed_origins

    def is_allowed(self, origin: str) -> bool:
        return self.allow_all or origin in self.allowed_origins

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        if origin and not self.is_allowed(origin):
            logger.warning("Rejected request from disallowed origin", origin=origin, path=request.url.path)
            return JSONResponse(status_code=403, content={"error": "Not allowed by CORS"})

        return await call_next(request)
