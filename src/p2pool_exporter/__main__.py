import argparse
from pathlib import Path

from loguru import logger

from p2pool_exporter import __version__, settings
from p2pool_exporter.api import start_server
from p2pool_exporter.utils.exceptions import ConfigurationError
from p2pool_exporter.utils.logging_utils import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="p2pool-exporter",
        description="Serve P2Pool stratum and network state as Prometheus metrics and an HTML table.",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=settings.DATA_DIR,
        help="P2Pool data api directory (env P2POOL_DATA_DIR, default: %(default)s)",
    )
    parser.add_argument("--host", default=settings.EXPORTER_HOST, help="bind address (default: %(default)s)")
    parser.add_argument("--port", default=settings.EXPORTER_PORT, help="bind port (default: %(default)s)")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="log level (default: %(default)s)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        port = settings.parse_port(args.port)
        log_level = settings.parse_log_level(args.log_level)
    except ConfigurationError as e:
        raise SystemExit(f"p2pool-exporter: {e}")

    setup_logging(log_level)
    if not args.data_dir.is_dir():
        logger.warning(f"Data directory {args.data_dir} does not exist yet, requests will fail until it does")
    start_server(data_dir=args.data_dir, host=args.host, port=port)


if __name__ == "__main__":
    main()
