#!/usr/bin/env python3
"""Main entry point for the host metrics exporter"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from config import Config
from collectors import build_default_collectors
from metrics.exposition import MetricWriter
from metrics.registry import MetricsRegistry
from metrics.stats import ScrapeStats
from logging_config import setup_structured_logging, get_logger, log_server_startup, log_error


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(
        prog="host-metrics-exporter",
        description="Expose /proc metrics in Prometheus text format",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=int,
        default=None,
        help="Serve metrics on this TCP port (default: print one scrape and exit)",
    )
    parser.add_argument(
        "--backend",
        choices=["socket", "fastapi"],
        default=None,
        help="Request dispatcher to use in server mode (default: socket)",
    )
    parser.add_argument(
        "--proc-root",
        type=Path,
        default=None,
        help="Mount point of the proc filesystem (default: /proc)",
    )
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> Config:
    """Build the configuration from the environment, with CLI flags taking precedence"""
    overrides = {}
    if args.port is not None:
        overrides["metrics_port"] = args.port
    if args.backend is not None:
        overrides["server_backend"] = args.backend
    if args.proc_root is not None:
        overrides["proc_root"] = args.proc_root
    # Re-validate so CLI values get the same constraints as environment ones
    return Config.model_validate({**Config().model_dump(), **overrides})


def build_registry(config: Config) -> MetricsRegistry:
    """Create the collector registry with a fresh scrape stats table"""
    collectors = build_default_collectors(config)
    stats = ScrapeStats(collector.name for collector in collectors)
    return MetricsRegistry(collectors, stats=stats, timing_enabled=config.scrape_timing_enabled)


def create_dispatcher(config: Config, registry: MetricsRegistry):
    """Create the configured request dispatcher"""
    if config.server_backend == "fastapi":
        from app.fastapi_server import FastAPIMetricsServer
        return FastAPIMetricsServer(config, registry)
    from app.server import SocketMetricsServer
    return SocketMetricsServer(config, registry)


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point"""
    args = parse_args(argv)
    logger = get_logger(__name__)

    try:
        config = load_config(args)
    except ValidationError as e:
        # Defaults only, so the error still goes to stderr
        setup_structured_logging(Config.model_construct())
        log_error(logger, e, {"component": "main", "phase": "configuration"})
        return 1

    setup_structured_logging(config)
    registry = build_registry(config)

    if not config.is_server_mode():
        registry.collect_all(MetricWriter(sys.stdout.write))
        sys.stdout.flush()
        return 0

    log_server_startup(logger, config)
    dispatcher = create_dispatcher(config, registry)
    try:
        dispatcher.serve_forever()
    except KeyboardInterrupt:
        logger.info("Interrupted", event_type="server_shutdown")
    except OSError as e:
        log_error(logger, e, {"component": "main", "phase": "startup"})
        return 1
    finally:
        dispatcher.shutdown()

    return 0


if __name__ == '__main__':
    sys.exit(main())
