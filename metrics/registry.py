"""Metrics registry for running collectors and reporting scrape durations"""
import time
from typing import Dict, Iterable, List, Optional

from .exposition import MetricWriter
from .models import MetricType
from .stats import ScrapeStats
from collectors.base import BaseCollector
from logging_config import get_logger, log_error, log_scrape_completed


logger = get_logger(__name__)

SCRAPE_DURATION_METRIC = "node_exporter_scrape_duration_seconds"


class MetricsRegistry:
    """Ordered registry of collectors and the scrape coordinator.

    Collectors run in registration order on every scrape. Each run is timed
    and folded into the injected ``ScrapeStats``; afterwards a summary family
    reports the latest duration plus the cumulative sum and count per
    collector.
    """

    def __init__(
        self,
        collectors: Iterable[BaseCollector] = (),
        stats: Optional[ScrapeStats] = None,
        timing_enabled: bool = True,
    ):
        self.collectors: Dict[str, BaseCollector] = {}
        for collector in collectors:
            self.register_collector(collector)
        self.stats = stats if stats is not None else ScrapeStats(self.collectors)
        self.timing_enabled = timing_enabled

    def register_collector(self, collector: BaseCollector):
        """Register a new collector"""
        if not isinstance(collector, BaseCollector):
            raise ValueError("Collector must inherit from BaseCollector")
        if collector.name in self.collectors:
            raise ValueError(f"Collector already registered: {collector.name}")

        self.collectors[collector.name] = collector
        logger.debug("Registered collector", collector=collector.name, event_type="collector_registered")

    def get_collector(self, name: str) -> Optional[BaseCollector]:
        """Get collector by name"""
        return self.collectors.get(name)

    def list_collectors(self) -> List[str]:
        """List all registered collector names in scrape order"""
        return list(self.collectors.keys())

    def collect_all(self, writer: MetricWriter) -> None:
        """Run every collector in order, then write the scrape duration summary"""
        start_time = time.perf_counter()
        durations: Dict[str, float] = {}

        for name, collector in self.collectors.items():
            collector_start = time.perf_counter()
            try:
                collector.collect(writer)
            except Exception as e:
                # Continue with other collectors even if one fails
                log_error(logger, e, {"component": "collector", "collector": name})
            duration = time.perf_counter() - collector_start
            durations[name] = duration
            self.stats.record(name, duration)

        if self.timing_enabled:
            self._write_durations(writer, durations)

        log_scrape_completed(logger, writer.sample_count, time.perf_counter() - start_time)

    def _write_durations(self, writer: MetricWriter, durations: Dict[str, float]) -> None:
        duration_metric = writer.begin_family(SCRAPE_DURATION_METRIC, MetricType.SUMMARY)

        for name, duration in durations.items():
            labels = {"collector": name, "result": "success"}
            stat = self.stats.get(name)
            duration_metric(labels, duration)
            writer.sample(f"{SCRAPE_DURATION_METRIC}_sum", labels, stat.duration_sum, MetricType.SUMMARY)
            writer.sample(f"{SCRAPE_DURATION_METRIC}_count", labels, stat.count, MetricType.SUMMARY)
