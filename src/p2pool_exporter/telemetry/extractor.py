"""Map P2Pool state snapshots onto the exported metric list."""

from __future__ import annotations

from p2pool_exporter.models.state_models import NetworkState, StratumState
from p2pool_exporter.telemetry.metric_models import FamilyObservation, Metric, ScalarObservation

HASH_RATE_PERIOD_LABEL = "period"


def _gauge(name: str, help_text: str, value: int) -> Metric[int]:
    return Metric[int](
        name=name,
        kind_hint="gauge",
        help_text=help_text,
        observation=ScalarObservation[int](value=value),
    )


def extract(stratum: StratumState, network: NetworkState) -> list[Metric[int]]:
    """Build the metric list for one scrape.

    The order and names are part of the scrape contract: dashboards and alerts
    key on ``network_timestamp``, ``stratum_hash_rate`` etc.
    """
    return [
        _gauge(
            "network_timestamp",
            "network timestamp as seconds since unix epoch.",
            network.timestamp,
        ),
        Metric[int](
            name="stratum_hash_rate",
            kind_hint="summary",
            help_text="a summary of the hash rate observed within an observation period.",
            observation=FamilyObservation[int](
                label=HASH_RATE_PERIOD_LABEL,
                values={
                    "15m": stratum.hash_rate_15m,
                    "1h": stratum.hash_rate_1h,
                    "24h": stratum.hash_rate_24h,
                },
            ),
        ),
        _gauge("stratum_shares_found", "number of found shares.", stratum.shares_found),
        _gauge("stratum_shares_failed", "number of failed shares.", stratum.shares_failed),
        _gauge("stratum_connections_outbound", "number of outbound connections.", stratum.connections),
        _gauge("stratum_connections_inbound", "number of inbound connections.", stratum.incoming_connections),
    ]
