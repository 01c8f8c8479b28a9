"""Prometheus text exposition for :class:`Metric` lists."""

from __future__ import annotations

from typing import Iterable

from p2pool_exporter.telemetry.metric_models import FamilyObservation, Metric, ScalarObservation
from p2pool_exporter.utils.exceptions import ObservationInvariantError


def escape_label_value(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\n", "\\n").replace('"', '\\"')


def escape_help(text: str) -> str:
    return text.replace("\\", "\\\\").replace("\n", "\\n")


def render_observation(name: str, observation: ScalarObservation | FamilyObservation) -> str:
    if isinstance(observation, ScalarObservation):
        return f"{name} {observation.value}"
    if isinstance(observation, FamilyObservation):
        label = observation.label
        return "\n".join(
            f'{name}{{{label}="{escape_label_value(key)}"}} {value}' for key, value in observation.values.items()
        )
    raise ObservationInvariantError(f"Cannot render observation of type {type(observation).__name__} for '{name}'")


def render_metric(metric: Metric) -> str:
    return (
        f"# HELP {metric.name} {escape_help(metric.help_text)}\n"
        f"# TYPE {metric.name} {metric.kind_hint}\n"
        f"{render_observation(metric.name, metric.observation)}"
    )


def render(metrics: Iterable[Metric]) -> str:
    """Serialise metrics in order, one ``# HELP``/``# TYPE``/samples block each."""
    return "\n".join(render_metric(metric) for metric in metrics)
