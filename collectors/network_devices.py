"""Per-interface network counters from /proc/net/dev"""
from typing import Dict, List, Tuple

from .base import BaseCollector
from metrics.exposition import MetricWriter
from metrics.models import MetricType
from utils.procfs import split_lines, split_whitespace


# Column order of /proc/net/dev after the "<device>:" prefix
NET_DEV_FIELDS = (
    "receive_bytes", "receive_packets", "receive_errs", "receive_drop",
    "receive_fifo", "receive_frame", "receive_compressed", "receive_multicast",
    "transmit_bytes", "transmit_packets", "transmit_errs", "transmit_drop",
    "transmit_fifo", "transmit_colls", "transmit_carrier", "transmit_compressed",
)


def parse_net_dev(text: str) -> List[Tuple[str, Dict[str, str]]]:
    """Parse /proc/net/dev into (device, {field: value}) in file order"""
    devices = []

    for line in split_lines(text)[2:]:  # Skip header lines
        device, sep, stats = line.partition(":")
        device = device.strip()
        if not sep or not device:
            continue
        values = split_whitespace(stats)
        if len(values) < len(NET_DEV_FIELDS):
            continue
        devices.append((device, dict(zip(NET_DEV_FIELDS, values))))

    return devices


class NetworkDevicesCollector(BaseCollector):
    """Collect receive and transmit counters for every network interface"""

    def __init__(self, config=None):
        super().__init__(config, "network_devices", "Network interface statistics from /proc/net/dev")

    def collect(self, writer: MetricWriter) -> None:
        devices = parse_net_dev(self.read_proc("net", "dev"))

        for field_name in NET_DEV_FIELDS:
            device_metric = writer.begin_family(f"node_network_{field_name}", MetricType.GAUGE)
            for device, stats in devices:
                device_metric({"device": device}, stats[field_name])
