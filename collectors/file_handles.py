"""File descriptor metrics from /proc/sys/fs/file-nr"""
from typing import Dict

from .base import BaseCollector
from metrics.exposition import MetricWriter
from metrics.models import MetricType
from utils.procfs import split_whitespace


def parse_file_nr(text: str) -> Dict[str, str]:
    """Return the allocated and maximum handle counts.

    The middle field (free allocated handles) is always 0 on modern kernels
    and is ignored.
    """
    tokens = split_whitespace(text)
    result = {}
    if len(tokens) > 0:
        result["allocated"] = tokens[0]
    if len(tokens) > 2:
        result["maximum"] = tokens[2]
    return result


class FileHandlesCollector(BaseCollector):
    """Collect allocated and maximum file handle counts"""

    def __init__(self, config=None):
        super().__init__(config, "file_handles", "Kernel file handle usage")

    def collect(self, writer: MetricWriter) -> None:
        file_nr = parse_file_nr(self.read_proc("sys", "fs", "file-nr"))
        writer.metric("node_filefd_allocated", MetricType.GAUGE, None, file_nr.get("allocated"))
        writer.metric("node_filefd_maximum", MetricType.GAUGE, None, file_nr.get("maximum"))
