"""Request dispatcher interface and HTTP response framing"""
import abc
from typing import Callable

from metrics.exposition import CONTENT_TYPE, MetricWriter
from metrics.registry import MetricsRegistry


METRICS_REQUEST_PREFIX = "GET /metrics"
NOT_FOUND_BODY = "ERROR: File Not Found."


def is_metrics_request(request_line: str) -> bool:
    """Check if a request line asks for the metrics page"""
    return request_line.startswith(METRICS_REQUEST_PREFIX)


def ok_header(server_name: str) -> str:
    """Status line and headers for a metrics response"""
    return (
        "HTTP/1.1 200 OK\r\n"
        f"Server: {server_name}\r\n"
        f"Content-Type: {CONTENT_TYPE}\r\n"
        "\r\n"
    )


def not_found_response(server_name: str) -> str:
    """Complete response for any request other than GET /metrics"""
    return (
        "HTTP/1.1 404 Not Found\r\n"
        f"Server: {server_name}\r\n"
        "Content-Type: text/plain\r\n"
        "\r\n"
        f"{NOT_FOUND_BODY}"
    )


class BaseDispatcher(abc.ABC):
    """Abstract base class for metric request dispatchers"""

    def __init__(self, config, registry: MetricsRegistry):
        self.config = config
        self.registry = registry

    @property
    def server_name(self) -> str:
        return self.config.service_name

    def handle_request_line(self, request_line: str, output: Callable[[str], object]) -> int:
        """Write the full response for one request line and return its status code"""
        if not is_metrics_request(request_line):
            output(not_found_response(self.server_name))
            return 404

        output(ok_header(self.server_name))
        self.registry.collect_all(MetricWriter(output))
        return 200

    @abc.abstractmethod
    def serve_forever(self) -> None:
        """Accept and answer requests until shut down"""
        pass

    @abc.abstractmethod
    def shutdown(self) -> None:
        """Stop serving and release the listener"""
        pass
