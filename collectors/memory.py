"""Memory metrics collector"""
from typing import List, Tuple, Union

from .base import BaseCollector
from metrics.exposition import MetricWriter
from metrics.models import MetricType
from utils.procfs import is_number, split_lines, split_whitespace


def parse_meminfo(text: str) -> List[Tuple[str, Union[int, float, str]]]:
    """Parse /proc/meminfo into (name, value) pairs with kB values in bytes.

    Parenthesized sub-names become part of the name, so "Active(anon):"
    turns into "Active_anon". Lines without a numeric size are skipped.
    """
    cleaned = text.replace(")", "").replace(":", "").replace("(", "_")
    entries = []

    for line in split_lines(cleaned):
        tokens = split_whitespace(line)
        if len(tokens) < 2 or not is_number(tokens[1]):
            continue
        name, size = tokens[0], tokens[1]
        unit = tokens[2] if len(tokens) > 2 else None

        value: Union[int, float, str]
        if unit == "kB":
            value = int(size) * 1024 if size.isdigit() else float(size) * 1024
        else:
            value = size
        entries.append((name, value))

    return entries


class MemoryCollector(BaseCollector):
    """Collect memory usage metrics from /proc/meminfo"""

    def __init__(self, config=None):
        super().__init__(config, "memory", "Memory statistics from /proc/meminfo")

    def collect(self, writer: MetricWriter) -> None:
        """Collect memory metrics"""
        for name, value in parse_meminfo(self.read_proc("meminfo")):
            writer.metric(f"node_memory_{name}", MetricType.GAUGE, None, value)
