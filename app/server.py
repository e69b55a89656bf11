"""Sequential socket server for the metrics endpoint"""
import contextlib
import socket
import time
from typing import Optional, Tuple

from .base import BaseDispatcher
from metrics.registry import MetricsRegistry
from logging_config import get_logger, log_error


logger = get_logger(__name__)

MAX_REQUEST_LINE = 8192


class SocketMetricsServer(BaseDispatcher):
    """One connection at a time: accept, read a line, respond, close.

    The scrape, render and write for a request all finish before the next
    accept, so the cumulative scrape stats are only ever touched from this
    loop.
    """

    def __init__(self, config, registry: MetricsRegistry):
        super().__init__(config, registry)
        self._listener: Optional[socket.socket] = None
        self._running = False

    @property
    def address(self) -> Optional[Tuple[str, int]]:
        """Bound (host, port), once listening"""
        if self._listener is None:
            return None
        return self._listener.getsockname()[:2]

    def bind(self) -> None:
        """Create the listening socket"""
        self._listener = socket.create_server(
            (self.config.metrics_host, self.config.metrics_port),
            backlog=self.config.listen_backlog,
        )
        logger.info("Listening for scrapes", address=self.address, event_type="server_listening")

    def serve_forever(self) -> None:
        """Accept and answer connections until shutdown() is called"""
        if self._listener is None:
            self.bind()
        listener = self._listener
        self._running = True

        while self._running:
            try:
                conn, client_address = listener.accept()
            except OSError as e:
                if not self._running:
                    break
                logger.warning("Accept failed", error=str(e), event_type="accept_error")
                continue
            self.handle_connection(conn, client_address)

    def shutdown(self) -> None:
        """Stop the accept loop and close the listener"""
        self._running = False
        if self._listener is not None:
            with contextlib.suppress(OSError):
                self._listener.shutdown(socket.SHUT_RDWR)
            self._listener.close()
            self._listener = None
            logger.info("Server stopped", event_type="server_shutdown")

    def handle_connection(self, conn: socket.socket, client_address=None) -> Optional[int]:
        """Serve a single connection; returns the status code, or None if dropped"""
        start_time = time.time()
        status_code = None

        with conn:
            conn.settimeout(self.config.read_timeout)

            request_line = self._read_request_line(conn, client_address)
            if request_line is None:
                return None

            try:
                with conn.makefile("w", encoding="utf-8", newline="") as stream:
                    status_code = self.handle_request_line(request_line, stream.write)
            except OSError as e:
                logger.debug(
                    "Client went away during response",
                    client_ip=self._client_ip(client_address),
                    error=str(e),
                    event_type="connection_dropped"
                )
                return None
            except Exception as e:
                log_error(logger, e, {"component": "dispatcher", "request": request_line})
                return None

        logger.debug(
            "HTTP request completed",
            request=request_line,
            status_code=status_code,
            process_time_seconds=round(time.time() - start_time, 3),
            client_ip=self._client_ip(client_address),
            event_type="http_request_complete"
        )
        return status_code

    def _read_request_line(self, conn: socket.socket, client_address) -> Optional[str]:
        """Read the request line; None when the read times out or fails"""
        try:
            with conn.makefile("rb") as stream:
                raw = stream.readline(MAX_REQUEST_LINE)
        except OSError as e:
            logger.debug(
                "Dropping connection",
                client_ip=self._client_ip(client_address),
                error=str(e),
                event_type="connection_dropped"
            )
            return None

        if not raw.endswith(b"\n"):
            logger.debug(
                "Dropping connection without a complete request line",
                client_ip=self._client_ip(client_address),
                event_type="connection_dropped"
            )
            return None

        return raw.decode("latin-1").rstrip("\r\n")

    @staticmethod
    def _client_ip(client_address) -> Optional[str]:
        if isinstance(client_address, tuple) and client_address:
            return client_address[0]
        return None
