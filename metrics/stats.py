"""Cumulative per-collector scrape timings"""
from dataclasses import dataclass
from typing import Dict, Iterable


@dataclass
class ScrapeStat:
    """Process-lifetime timing totals for one collector"""
    duration_sum: float = 0.0
    count: int = 0


class ScrapeStats:
    """Cumulative scrape duration and count for every known collector.

    Entries start at zero and only ever grow; nothing here is persisted, so a
    restart begins again from zero. Instances are owned by whoever builds the
    registry, which lets tests use a fresh table per case.
    """

    def __init__(self, collector_names: Iterable[str] = ()):
        self._stats: Dict[str, ScrapeStat] = {name: ScrapeStat() for name in collector_names}

    def record(self, name: str, duration: float) -> ScrapeStat:
        """Fold one completed scrape into the collector's totals"""
        stat = self._stats.setdefault(name, ScrapeStat())
        stat.duration_sum += max(duration, 0.0)
        stat.count += 1
        return stat

    def get(self, name: str) -> ScrapeStat:
        return self._stats.get(name, ScrapeStat())

    def names(self):
        return list(self._stats.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._stats
