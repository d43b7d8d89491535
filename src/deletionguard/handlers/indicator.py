# SPDX-License-Identifier: Apache-2.0
"""Deletion handler for indicator metadata."""

from __future__ import annotations

from typing import Optional

from deletionguard.domain.deletion import DeletionVeto
from deletionguard.domain.entities import IndicatorType
from deletionguard.domain.repositories import IIndicatorRepository
from deletionguard.domain.value_objects import DeletableType

from .base import DeletionHandler


class IndicatorDeletionHandler(DeletionHandler):
    """An indicator type cannot be deleted while indicators use it."""

    def __init__(self, indicator_repository: IIndicatorRepository):
        super().__init__()
        self._indicators = indicator_repository

    def register(self) -> None:
        self.when_vetoing(DeletableType.INDICATOR_TYPE, self.allow_delete_indicator_type)

    def allow_delete_indicator_type(self, indicator_type: IndicatorType) -> Optional[DeletionVeto]:
        indicators = self._indicators.get_indicators_by_indicator_type(indicator_type)
        if not indicators:
            return None
        names = ", ".join(sorted(i.name for i in indicators)[:3])
        return DeletionVeto(
            DeletableType.INDICATOR,
            message=f"{DeletableType.INDICATOR.display_name} {names}",
            count=len(indicators),
        )
