"""Load average metrics from /proc/loadavg"""
from typing import Dict

from .base import BaseCollector
from metrics.exposition import MetricWriter
from metrics.models import MetricType
from utils.procfs import split_whitespace


LOAD_METRICS = ("node_load1", "node_load5", "node_load15")


def parse_loadavg(text: str) -> Dict[str, str]:
    """Map the 1, 5 and 15 minute averages to their metric names.

    Format: "0.08 0.03 0.01 1/234 5678". Values are kept as read.
    """
    tokens = split_whitespace(text)
    return {name: value for name, value in zip(LOAD_METRICS, tokens)}


class LoadAverageCollector(BaseCollector):
    """Collect system load averages"""

    def __init__(self, config=None):
        super().__init__(config, "load_averages", "1, 5 and 15 minute load averages")

    def collect(self, writer: MetricWriter) -> None:
        loads = parse_loadavg(self.read_proc("loadavg"))
        for name in LOAD_METRICS:
            writer.metric(name, MetricType.GAUGE, None, loads.get(name))
