"""Wall-clock time metric"""
import time
from typing import Callable

from .base import BaseCollector
from metrics.exposition import MetricWriter
from metrics.models import MetricType


class TimeCollector(BaseCollector):
    """Report the current time, read fresh on every scrape"""

    def __init__(self, config=None, clock: Callable[[], float] = time.time):
        super().__init__(config, "time", "System time in seconds since epoch")
        self._clock = clock

    def collect(self, writer: MetricWriter) -> None:
        writer.metric("node_time", MetricType.COUNTER, None, int(self._clock()))
