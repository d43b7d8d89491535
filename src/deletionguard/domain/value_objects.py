# SPDX-License-Identifier: Apache-2.0
"""Domain value objects for deletionguard.

Value objects are immutable and defined by their values. The deletable type
tag is the only thing the deletion registry keys on, so it is a closed
enumeration rather than an open set of classes.
"""

from __future__ import annotations

import random
import re
import string
from dataclasses import dataclass
from enum import Enum

_UID_ALPHABET = string.ascii_letters + string.digits
_UID_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9]{10}$")
UID_LENGTH = 11


class DeletableType(str, Enum):
    """Closed set of object types that can be the subject of a deletion request."""

    RELATIONSHIP_TYPE = "relationship_type"
    RELATIONSHIP = "relationship"
    INDICATOR_TYPE = "indicator_type"
    INDICATOR = "indicator"

    @property
    def display_name(self) -> str:
        """CamelCase name used in user-facing veto messages."""
        return "".join(part.capitalize() for part in self.value.split("_"))

    @classmethod
    def parse(cls, value: str) -> DeletableType:
        """Parse a type from its value, enum name or display name.

        Args:
            value: e.g. ``relationship_type``, ``RELATIONSHIP_TYPE`` or
                ``RelationshipType``

        Raises:
            ValueError: If the value names no known type
        """
        candidate = value.strip()
        for member in cls:
            if candidate in (member.value, member.name, member.display_name):
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown object type: {value}. Valid types: {valid}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Uid:
    """Object identifier: 11 alphanumeric characters, starting with a letter."""

    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("Uid cannot be empty")

        normalized = self.value.strip()
        object.__setattr__(self, "value", normalized)

        if not _UID_PATTERN.match(self.value):
            raise ValueError(
                f"Invalid uid format: {self.value}. Must be {UID_LENGTH} alphanumeric "
                "characters starting with a letter"
            )

    @classmethod
    def generate(cls) -> Uid:
        """Generate a new random uid."""
        first = random.choice(string.ascii_letters)
        rest = "".join(random.choices(_UID_ALPHABET, k=UID_LENGTH - 1))
        return cls(first + rest)

    @classmethod
    def from_string(cls, uid_str: str) -> Uid:
        return cls(uid_str)

    def __str__(self) -> str:
        return self.value
