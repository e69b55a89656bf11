"""Collectors for kernel metric sources, in scrape order"""
from typing import List

from .base import BaseCollector
from .cpu import CPUCollector
from .load_averages import LoadAverageCollector
from .memory import MemoryCollector
from .file_handles import FileHandlesCollector
from .network import NetstatCollector
from .network_devices import NetworkDevicesCollector
from .clock import TimeCollector
from .uname import UnameCollector


# Fixed scrape order; the summary family reports collectors in this order too
DEFAULT_COLLECTORS = (
    CPUCollector,
    LoadAverageCollector,
    MemoryCollector,
    FileHandlesCollector,
    NetstatCollector,
    NetworkDevicesCollector,
    TimeCollector,
    UnameCollector,
)


def build_default_collectors(config=None) -> List[BaseCollector]:
    """Instantiate every built-in collector in scrape order"""
    return [collector_class(config) for collector_class in DEFAULT_COLLECTORS]


__all__ = [
    "BaseCollector",
    "DEFAULT_COLLECTORS",
    "build_default_collectors",
]
