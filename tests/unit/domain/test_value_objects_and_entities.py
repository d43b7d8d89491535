# SPDX-License-Identifier: Apache-2.0
"""Tests for deletable types, uids and metadata entities."""

from __future__ import annotations

import pytest

from deletionguard.domain.entities import Indicator, IndicatorType, Relationship, RelationshipType
from deletionguard.domain.value_objects import DeletableType, Uid


class TestDeletableType:
    def test_display_name_is_camel_case(self):
        assert DeletableType.RELATIONSHIP_TYPE.display_name == "RelationshipType"
        assert DeletableType.INDICATOR.display_name == "Indicator"

    @pytest.mark.parametrize(
        "value", ["relationship_type", "RELATIONSHIP_TYPE", "RelationshipType", " relationship_type "]
    )
    def test_parse_accepts_value_name_and_display_name(self, value):
        assert DeletableType.parse(value) is DeletableType.RELATIONSHIP_TYPE

    def test_parse_unknown_type(self):
        with pytest.raises(ValueError) as exc_info:
            DeletableType.parse("organisation_unit")

        assert "Unknown object type: organisation_unit" in str(exc_info.value)
        assert "relationship_type" in str(exc_info.value)


class TestUid:
    def test_valid_uid(self):
        uid = Uid("RtMotherCh1")
        assert str(uid) == "RtMotherCh1"

    def test_uid_is_stripped(self):
        assert Uid("  RtMotherCh1 ").value == "RtMotherCh1"

    @pytest.mark.parametrize("value", ["", "short", "1tMotherCh1", "RtMother-h1", "RtMotherCh12"])
    def test_invalid_uids(self, value):
        with pytest.raises(ValueError):
            Uid(value)

    def test_generate_produces_valid_unique_uids(self):
        uids = {Uid.generate() for _ in range(50)}
        assert len(uids) == 50
        for uid in uids:
            assert len(uid.value) == 11
            assert uid.value[0].isalpha()

    def test_uids_compare_by_value(self):
        assert Uid("RtMotherCh1") == Uid.from_string("RtMotherCh1")


class TestEntities:
    def test_each_entity_carries_its_type_tag(self):
        uid = Uid.generate
        assert RelationshipType(uid(), "rt").deletable_type is DeletableType.RELATIONSHIP_TYPE
        assert (
            Relationship(uid(), "r", relationship_type=uid()).deletable_type
            is DeletableType.RELATIONSHIP
        )
        assert IndicatorType(uid(), "it").deletable_type is DeletableType.INDICATOR_TYPE
        assert Indicator(uid(), "i", indicator_type=uid()).deletable_type is DeletableType.INDICATOR

    def test_equality_by_type_and_uid(self):
        uid = Uid("SameUid0001")
        assert RelationshipType(uid, "a") == RelationshipType(uid, "b")
        assert IndicatorType(uid, "a") != RelationshipType(uid, "a")
        assert len({RelationshipType(uid, "a"), RelationshipType(uid, "b")}) == 1

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError, match="Name cannot be empty"):
            RelationshipType(Uid.generate(), "   ")

    def test_indicator_type_factor_must_be_positive(self):
        with pytest.raises(ValueError, match="factor must be positive"):
            IndicatorType(Uid.generate(), "Broken", factor=0)
