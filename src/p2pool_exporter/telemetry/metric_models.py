"""Exported metric data model.

A metric carries either a single scalar observation or a family of
observations keyed by one label. The two shapes are separate models so a
value can never coexist with a label or a value set.
"""

from __future__ import annotations

from typing import Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

V = TypeVar("V")


class ScalarObservation(BaseModel, Generic[V]):
    """A single sample: ``<name> <value>``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: V


class FamilyObservation(BaseModel, Generic[V]):
    """One sample per label value: ``<name>{<label>="<key>"} <value>``.

    ``values`` keeps insertion order, which is the order samples are rendered in.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    label: str = Field(min_length=1)
    values: dict[str, V]


class Metric(BaseModel, Generic[V]):
    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(min_length=1)
    kind_hint: str = Field(serialization_alias="definition")  # "gauge" | "summary"
    help_text: str = Field(serialization_alias="help")
    observation: Union[ScalarObservation[V], FamilyObservation[V]]
