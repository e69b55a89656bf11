"""Kernel identification metric"""
import os
from typing import Callable, Dict

from .base import BaseCollector
from metrics.exposition import MetricWriter
from metrics.models import MetricType


def uname_labels(uname_result) -> Dict[str, str]:
    """Build node_uname_info labels from an os.uname()-style result.

    The kernel version is taken as a whole field, so builds such as
    "#1 SMP PREEMPT_DYNAMIC Debian 6.1.0" keep their embedded spaces.
    """
    return {
        "domainname": "(none)",
        "machine": uname_result.machine,
        "nodename": uname_result.nodename,
        "release": uname_result.release,
        "sysname": uname_result.sysname,
        "version": uname_result.version,
    }


class UnameCollector(BaseCollector):
    """Expose kernel identity as an info metric"""

    def __init__(self, config=None, uname: Callable = os.uname):
        super().__init__(config, "uname", "Kernel name, release, version and machine")
        self._uname = uname

    def collect(self, writer: MetricWriter) -> None:
        writer.metric("node_uname_info", MetricType.GAUGE, uname_labels(self._uname()), 1)
