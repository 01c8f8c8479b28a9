from p2pool_exporter.telemetry.extractor import extract
from p2pool_exporter.telemetry.metric_models import FamilyObservation, Metric, ScalarObservation
from p2pool_exporter.telemetry.renderer import render
from p2pool_exporter.telemetry.state_reader import collect_metrics, read_network_state, read_stratum_state

__all__ = [
    "FamilyObservation",
    "Metric",
    "ScalarObservation",
    "collect_metrics",
    "extract",
    "read_network_state",
    "read_stratum_state",
    "render",
]
