"""Base collector class and interfaces"""
from abc import ABC, abstractmethod
from pathlib import Path

from metrics.exposition import MetricWriter
from utils.procfs import read_file


DEFAULT_PROC_ROOT = Path("/proc")


class BaseCollector(ABC):
    """Base class for all metric collectors"""

    def __init__(self, config=None, name: str = "", help_text: str = ""):
        self.config = config
        self._name = name
        self._help_text = help_text
        self.proc_root = Path(getattr(config, "proc_root", None) or DEFAULT_PROC_ROOT)

    @abstractmethod
    def collect(self, writer: MetricWriter) -> None:
        """Stream this collector's metric families into the writer"""
        pass

    @property
    def name(self) -> str:
        """Collector name for identification"""
        return self._name

    @property
    def help_text(self) -> str:
        """Help text describing what this collector does"""
        return self._help_text or f"{self.name} metrics collector"

    def read_proc(self, *parts: str) -> str:
        """Read a file below the proc root, empty when it is unavailable"""
        return read_file(self.proc_root.joinpath(*parts))
