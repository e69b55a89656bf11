"""CPU and kernel activity metrics from /proc/stat"""
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .base import BaseCollector
from metrics.exposition import MetricWriter
from metrics.models import MetricType
from utils.procfs import split_lines, split_whitespace


# Assumed USER_HZ; /proc/stat reports CPU time in jiffies
JIFFIES_PER_SECOND = 100

CPU_MODES = (
    "user", "nice", "system", "idle", "iowait",
    "irq", "softirq", "steal", "guest", "guest_nice",
)

_SCALAR_KEYS = ("btime", "ctxt", "intr", "processes", "procs_running", "procs_blocked")


@dataclass
class StatInfo:
    """Parsed contents of /proc/stat"""
    scalars: Dict[str, str] = field(default_factory=dict)
    cpus: List[Tuple[str, List[int]]] = field(default_factory=list)


def parse_stat(text: str) -> StatInfo:
    """Parse /proc/stat into its scalar counters and per-CPU jiffy counts.

    CPUs are discovered by probing ``cpu0``, ``cpu1``, ... until an index is
    missing (or its line is malformed), which is how the CPU count is learned.
    """
    info = StatInfo()
    cpu_lines: Dict[str, List[str]] = {}

    for line in split_lines(text):
        tokens = split_whitespace(line)
        if not tokens:
            continue
        key = tokens[0]
        if key in _SCALAR_KEYS:
            # intr is followed by per-IRQ counts; the first number is the total
            if len(tokens) > 1 and tokens[1].isdigit() and key not in info.scalars:
                info.scalars[key] = tokens[1]
        elif key.startswith("cpu") and key != "cpu":
            cpu_lines.setdefault(key, tokens[1:])

    index = 0
    while f"cpu{index}" in cpu_lines:
        counts = cpu_lines[f"cpu{index}"][:len(CPU_MODES)]
        if not counts or not all(count.isdigit() for count in counts):
            break
        info.cpus.append((f"cpu{index}", [int(count) for count in counts]))
        index += 1

    return info


class CPUCollector(BaseCollector):
    """Collect per-CPU time, context switches, interrupts and process counts"""

    def __init__(self, config=None):
        super().__init__(config, "cpu", "CPU time and kernel activity from /proc/stat")

    def collect(self, writer: MetricWriter) -> None:
        """Collect CPU metrics"""
        info = parse_stat(self.read_proc("stat"))
        scalars = info.scalars

        # System boot time, seconds since epoch
        writer.metric("node_boot_time", MetricType.GAUGE, None, scalars.get("btime"))
        writer.metric("node_context_switches", MetricType.COUNTER, None, scalars.get("ctxt"))

        cpu_metric = writer.begin_family("node_cpu", MetricType.COUNTER)
        for cpu, counts in info.cpus:
            for mode, jiffies in zip(CPU_MODES, counts):
                cpu_metric({"cpu": cpu, "mode": mode}, jiffies / JIFFIES_PER_SECOND)

        writer.metric("node_intr", MetricType.COUNTER, None, scalars.get("intr"))
        writer.metric("node_forks", MetricType.COUNTER, None, scalars.get("processes"))
        writer.metric("node_procs_running", MetricType.GAUGE, None, scalars.get("procs_running"))
        writer.metric("node_procs_blocked", MetricType.GAUGE, None, scalars.get("procs_blocked"))
