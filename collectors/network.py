"""Network protocol counters from /proc/net/netstat and /proc/net/snmp"""
from typing import List, Optional, Tuple

from .base import BaseCollector
from metrics.exposition import MetricWriter
from metrics.models import MetricType
from utils.procfs import split_lines, split_whitespace
from logging_config import get_logger

logger = get_logger(__name__)


NETSTAT_BLOCKS = ("IcmpMsg", "Icmp", "IpExt", "Ip", "TcpExt", "Tcp", "UdpLite", "Udp")


def _is_integer(token: str) -> bool:
    return token.lstrip("-").isdigit()


def _find_block(lines: List[str], block: str) -> Tuple[Optional[List[str]], Optional[List[str]]]:
    """Locate the field-name line and the value line for one protocol block"""
    header = None
    values = None

    for line in lines:
        prefix, sep, rest = line.partition(":")
        if not sep or prefix != block:
            continue
        tokens = split_whitespace(rest)
        if not tokens:
            continue
        if header is None and tokens[0][0].isupper():
            header = tokens
        elif values is None and all(_is_integer(token) for token in tokens):
            values = tokens
        if header is not None and values is not None:
            break

    return header, values


def parse_netstat(text: str) -> List[Tuple[str, List[Tuple[str, str]]]]:
    """Pair each protocol block's field names with its values.

    Returns ``(block, [(field, value), ...])`` in block order. Blocks missing
    from the text (common on older or stripped-down kernels) are left out, as
    are blocks whose name and value lines disagree in length.
    """
    lines = split_lines(text)
    blocks = []

    for block in NETSTAT_BLOCKS:
        header, values = _find_block(lines, block)
        if header is None or values is None:
            continue
        if len(header) != len(values):
            logger.debug(
                "Skipping malformed netstat block",
                block=block,
                fields=len(header),
                values=len(values),
                event_type="parse_skip"
            )
            continue
        blocks.append((block, list(zip(header, values))))

    return blocks


class NetstatCollector(BaseCollector):
    """Collect per-protocol network statistics"""

    def __init__(self, config=None):
        super().__init__(config, "network", "Network protocol counters from netstat and snmp")

    def collect(self, writer: MetricWriter) -> None:
        """Collect protocol counters"""
        text = "\n".join((self.read_proc("net", "netstat"), self.read_proc("net", "snmp")))
        for block, pairs in parse_netstat(text):
            for field_name, value in pairs:
                writer.metric(f"node_netstat_{block}_{field_name}", MetricType.GAUGE, None, value)
