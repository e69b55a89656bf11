"""Metric data models"""
from dataclasses import dataclass, field
from typing import Dict, Union
from enum import Enum


MetricValueType = Union[str, int, float]


class MetricType(Enum):
    """Prometheus metric types"""
    COUNTER = "counter"
    GAUGE = "gauge"
    SUMMARY = "summary"


def format_value(value: MetricValueType) -> str:
    """Render a sample value verbatim; numbers keep their Python repr"""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(int(value))
    return repr(value)


def format_labels(labels: Dict[str, str]) -> str:
    """Render a label set as {k="v",...}, or an empty string when there are none"""
    if not labels:
        return ""
    label_pairs = [f'{k}="{v}"' for k, v in labels.items()]
    return "{" + ",".join(label_pairs) + "}"


@dataclass
class MetricSample:
    """Represents a single metric sample"""
    name: str
    value: MetricValueType
    labels: Dict[str, str] = field(default_factory=dict)
    metric_type: MetricType = MetricType.GAUGE

    def __post_init__(self):
        # Ensure labels is never None
        if self.labels is None:
            self.labels = {}

    def to_prometheus_line(self) -> str:
        """Convert to Prometheus exposition format"""
        return f"{self.name}{format_labels(self.labels)} {format_value(self.value)}"
