"""Read the P2Pool data api files and decode them into state snapshots."""

from __future__ import annotations

import asyncio
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from p2pool_exporter import settings
from p2pool_exporter.models.state_models import NetworkState, StratumState, StratumStats
from p2pool_exporter.telemetry.extractor import extract
from p2pool_exporter.telemetry.metric_models import Metric
from p2pool_exporter.utils.exceptions import StateDecodeError, StateReadError


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise StateReadError(f"Failed to read {path}: {e.strerror or e}", path=path) from e


async def read_source(path: Path) -> bytes:
    """Read a state file without blocking the event loop."""
    logger.debug(f"Reading {path}")
    return await asyncio.to_thread(_read_bytes, path)


def parse_stratum_state(raw: str | bytes, *, path: Path | None = None) -> StratumState:
    try:
        return StratumStats.model_validate_json(raw).to_state()
    except ValidationError as e:
        raise StateDecodeError(f"Invalid stratum document {path or ''}: {e}", path=path) from e


def parse_network_state(raw: str | bytes, *, path: Path | None = None) -> NetworkState:
    try:
        return NetworkState.model_validate_json(raw)
    except ValidationError as e:
        raise StateDecodeError(f"Invalid network stats document {path or ''}: {e}", path=path) from e


async def read_stratum_state(data_dir: Path) -> StratumState:
    path = data_dir / settings.STRATUM_FILE
    return parse_stratum_state(await read_source(path), path=path)


async def read_network_state(data_dir: Path) -> NetworkState:
    path = data_dir / settings.NETWORK_STATS_FILE
    return parse_network_state(await read_source(path), path=path)


async def collect_metrics(data_dir: Path) -> list[Metric[int]]:
    """Read both documents and extract the metric list.

    Raises StateReadError / StateDecodeError before any metric is built.
    """
    stratum = await read_stratum_state(data_dir)
    network = await read_network_state(data_dir)
    return extract(stratum, network)
