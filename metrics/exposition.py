"""Streaming Prometheus text exposition writer"""
from typing import Callable, Dict, List, Optional, Set

from .models import MetricSample, MetricType, MetricValueType


CONTENT_TYPE = "text/plain; version=0.0.4"

Emitter = Callable[[Optional[Dict[str, str]], Optional[MetricValueType]], None]


class MetricWriter:
    """Write metric families to an output sink one line at a time.

    Nothing is buffered here: every header and sample is handed to
    ``output`` as soon as it is produced, so memory stays flat no matter
    how many CPUs, devices or protocol counters a host exposes.
    """

    def __init__(self, output: Callable[[str], object]):
        self._output = output
        self._families: Set[str] = set()
        self.sample_count = 0

    @property
    def family_count(self) -> int:
        return len(self._families)

    def _write_line(self, line: str) -> None:
        self._output(line + "\n")

    def begin_family(self, name: str, metric_type: MetricType) -> Emitter:
        """Write the TYPE header for a family and return an emitter bound to it"""
        if name not in self._families:
            self._families.add(name)
            self._write_line(f"# TYPE {name} {metric_type.value}")

        def emit(labels: Optional[Dict[str, str]], value: Optional[MetricValueType]) -> None:
            self.sample(name, labels, value, metric_type)

        return emit

    def sample(
        self,
        name: str,
        labels: Optional[Dict[str, str]],
        value: Optional[MetricValueType],
        metric_type: MetricType = MetricType.GAUGE,
    ) -> None:
        """Write one sample line; absent values are skipped"""
        if value is None:
            return
        sample = MetricSample(name=name, value=value, labels=dict(labels or {}), metric_type=metric_type)
        self._write_line(sample.to_prometheus_line())
        self.sample_count += 1

    def metric(
        self,
        name: str,
        metric_type: MetricType,
        labels: Optional[Dict[str, str]] = None,
        value: Optional[MetricValueType] = None,
    ) -> Emitter:
        """Begin a family and write its single sample when a value is present"""
        emit = self.begin_family(name, metric_type)
        emit(labels, value)
        return emit


def render_text(registry) -> str:
    """Run a full scrape through the registry and return the exposition text"""
    chunks: List[str] = []
    registry.collect_all(MetricWriter(chunks.append))
    return "".join(chunks)
