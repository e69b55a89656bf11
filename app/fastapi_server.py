"""FastAPI dispatcher serving the same endpoint as the socket server"""
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .base import NOT_FOUND_BODY, BaseDispatcher
from metrics.exposition import CONTENT_TYPE, render_text
from metrics.registry import MetricsRegistry
from logging_config import get_logger


logger = get_logger(__name__)


class FastAPIMetricsServer(BaseDispatcher):
    """Dispatcher backed by FastAPI and uvicorn.

    Connections are handled concurrently by uvicorn, but the metrics route is
    a coroutine that scrapes synchronously on the event loop, so scrapes
    still never overlap.
    """

    def __init__(self, config, registry: MetricsRegistry):
        super().__init__(config, registry)
        self.app = FastAPI(
            title="Host Metrics Exporter",
            version=config.service_version,
            docs_url=None,
            redoc_url=None,
            openapi_url=None
        )
        self._server: Optional[uvicorn.Server] = None
        self._setup_routes()

    def _headers(self, content_type: str) -> dict:
        return {
            "Server": self.server_name,
            "Content-Type": content_type,
            "Connection": "close",
        }

    def _setup_routes(self):
        """Setup FastAPI routes"""

        @self.app.get("/metrics{suffix:path}")
        async def get_metrics(suffix: str):
            """Serve a fresh scrape in Prometheus text format"""
            content = render_text(self.registry)
            return Response(content, headers=self._headers(CONTENT_TYPE))

        @self.app.exception_handler(StarletteHTTPException)
        async def not_found(request: Request, exc: StarletteHTTPException):
            """Every other path or method gets the fixed 404 body"""
            logger.debug(
                "Unknown request",
                method=request.method,
                path=request.url.path,
                event_type="http_not_found"
            )
            return PlainTextResponse(
                NOT_FOUND_BODY,
                status_code=404,
                headers=self._headers("text/plain"),
            )

    def get_app(self) -> FastAPI:
        """Get the FastAPI application"""
        return self.app

    def serve_forever(self) -> None:
        """Run uvicorn until shutdown() is called"""
        uvicorn_config = uvicorn.Config(
            self.app,
            host=self.config.metrics_host,
            port=self.config.metrics_port,
            timeout_keep_alive=0,
            server_header=False,
            log_config=None  # We handle logging ourselves
        )
        self._server = uvicorn.Server(uvicorn_config)
        self._server.run()

    def shutdown(self) -> None:
        if self._server is not None:
            self._server.should_exit = True
