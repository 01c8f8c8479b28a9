import os
from pathlib import Path

from p2pool_exporter.utils.exceptions import ConfigurationError

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")

# Base directory of the P2Pool data api (holds local/stratum and network/stats)
DATA_DIR = Path(os.getenv("P2POOL_DATA_DIR", "/var/lib/p2pool"))

EXPORTER_HOST = os.getenv("EXPORTER_HOST", "127.0.0.1")
EXPORTER_PORT = os.getenv("EXPORTER_PORT", "3000")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

STRATUM_FILE = Path("local") / "stratum"
NETWORK_STATS_FILE = Path("network") / "stats"


def parse_port(value: str | int) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid port {value!r}: must be an integer")
    if not 0 < port < 65536:
        raise ConfigurationError(f"Invalid port {port}: must be between 1 and 65535")
    return port


def parse_log_level(value: str) -> str:
    level = value.upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"Invalid log level {value!r}: expected one of {', '.join(LOG_LEVELS)}")
    return level
