from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# The stratum api reports hash rates in units a thousand times coarser than the
# raw hashes/sec we store and export.
HASH_RATE_SCALE = 1000

U64_MAX = 2**64 - 1
# Last second datetime can represent: 9999-12-31 23:59:59 UTC.
MAX_TIMESTAMP = 253402300799

U64 = Annotated[int, Field(ge=0, le=U64_MAX)]
# Source hash rate that still fits a u64 once scaled.
SourceHashRate = Annotated[int, Field(ge=0, le=U64_MAX // HASH_RATE_SCALE)]


class StratumStats(BaseModel):
    """The ``local/stratum`` document as written by P2Pool.

    Only the fields we export are declared; everything else in the document
    (``total_hashes``, ``average_effort``, ...) is ignored.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    hashrate_15m: SourceHashRate
    hashrate_1h: SourceHashRate
    hashrate_24h: SourceHashRate
    shares_found: U64
    shares_failed: U64
    connections: U64
    incoming_connections: U64

    def to_state(self) -> StratumState:
        return StratumState(
            hash_rate_15m=self.hashrate_15m * HASH_RATE_SCALE,
            hash_rate_1h=self.hashrate_1h * HASH_RATE_SCALE,
            hash_rate_24h=self.hashrate_24h * HASH_RATE_SCALE,
            shares_found=self.shares_found,
            shares_failed=self.shares_failed,
            connections=self.connections,
            incoming_connections=self.incoming_connections,
        )


class StratumState(BaseModel):
    """Snapshot of the pool's stratum server counters."""

    model_config = ConfigDict(frozen=True)

    hash_rate_15m: U64
    hash_rate_1h: U64
    hash_rate_24h: U64
    shares_found: U64
    shares_failed: U64
    connections: U64  # outbound
    incoming_connections: U64


class NetworkState(BaseModel):
    """The ``network/stats`` document; only the chain timestamp is kept."""

    model_config = ConfigDict(strict=True, frozen=True, extra="ignore")

    timestamp: Annotated[int, Field(ge=0, le=MAX_TIMESTAMP)]  # seconds since the unix epoch

    @property
    def observed_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)

    def display_timestamp(self) -> str:
        """Render the timestamp as e.g. ``2023-04-23 17:15:52 UTC``."""
        return self.observed_at.strftime("%Y-%m-%d %H:%M:%S UTC")
