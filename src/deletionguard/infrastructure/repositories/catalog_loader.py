# SPDX-License-Identifier: Apache-2.0
"""Load a YAML catalog of metadata objects into an in-memory repository.

Example::

    relationship_types:
      - uid: Rt0000000A1
        name: Mother-Child
    relationships:
      - uid: Re0000000A1
        name: Jane -> Joe
        relationship_type: Rt0000000A1
    indicator_types:
      - uid: It0000000A1
        name: Percent
        factor: 100
    indicators:
      - uid: In0000000A1
        name: ANC coverage
        indicator_type: It0000000A1
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from deletionguard.domain.entities import Indicator, IndicatorType, Relationship, RelationshipType
from deletionguard.domain.value_objects import Uid

from .in_memory import InMemoryCatalog

PathLike = Union[str, Path]


class _Entry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    uid: str
    name: str


class RelationshipTypeEntry(_Entry):
    bidirectional: bool = False


class RelationshipEntry(_Entry):
    relationship_type: str


class IndicatorTypeEntry(_Entry):
    factor: int = Field(default=1, ge=1)
    number: bool = False


class IndicatorEntry(_Entry):
    indicator_type: str


class CatalogFile(BaseModel):
    """Schema of a catalog YAML file."""

    model_config = ConfigDict(extra="forbid")

    relationship_types: List[RelationshipTypeEntry] = Field(default_factory=list)
    relationships: List[RelationshipEntry] = Field(default_factory=list)
    indicator_types: List[IndicatorTypeEntry] = Field(default_factory=list)
    indicators: List[IndicatorEntry] = Field(default_factory=list)

    def to_catalog(self) -> InMemoryCatalog:
        """Build domain objects; raises ValueError on invalid uids or names."""
        catalog = InMemoryCatalog()
        for rt in self.relationship_types:
            catalog.add(RelationshipType(Uid(rt.uid), rt.name, bidirectional=rt.bidirectional))
        for r in self.relationships:
            catalog.add(Relationship(Uid(r.uid), r.name, relationship_type=Uid(r.relationship_type)))
        for it in self.indicator_types:
            catalog.add(IndicatorType(Uid(it.uid), it.name, factor=it.factor, number=it.number))
        for i in self.indicators:
            catalog.add(Indicator(Uid(i.uid), i.name, indicator_type=Uid(i.indicator_type)))
        return catalog


def load_catalog(path: PathLike) -> InMemoryCatalog:
    """Load a catalog YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the YAML or any entry is invalid
    """
    yaml_path = Path(path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    try:
        with open(yaml_path, "r") as f:
            data = yaml.safe_load(os.path.expandvars(f.read()))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in catalog file: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("Catalog file must contain a dictionary at the root level")

    try:
        catalog_file = CatalogFile(**{str(k).replace("-", "_"): v for k, v in data.items()})
    except ValidationError as e:
        raise ValueError(f"Invalid catalog {path}: {e}") from e

    return catalog_file.to_catalog()
