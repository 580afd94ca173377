"""
Key casing strategies for presented output.

Both strategies are idempotent: re-casing a key that is already in the
target convention returns it unchanged.
"""

from __future__ import annotations

import re
from enum import Enum
from functools import lru_cache
from typing import Union

_UPPER_BOUNDARY = re.compile(r"(.)(?=[A-Z])")
_WORD_BREAKS = re.compile(r"[-_]")


def _capitalize_words(value: str) -> str:
    # Upper-case the first letter of each whitespace-separated word and glue them.
    return "".join(word[:1].upper() + word[1:] for word in value.split())


@lru_cache(maxsize=1024)
def snake_case(value: str) -> str:
    """Convert ``value`` to snake_case.

    ``"firstName" -> "first_name"``, ``"full name" -> "full_name"``.
    """
    joined = _capitalize_words(value)
    return _UPPER_BOUNDARY.sub(r"\1_", joined).lower()


@lru_cache(maxsize=1024)
def studly_case(value: str) -> str:
    """Convert ``value`` to StudlyCase (``"full_name" -> "FullName"``)."""
    return _capitalize_words(_WORD_BREAKS.sub(" ", value))


@lru_cache(maxsize=1024)
def camel_case(value: str) -> str:
    """Convert ``value`` to camelCase (``"created_at" -> "createdAt"``)."""
    studly = studly_case(value)
    return studly[:1].lower() + studly[1:]


class Casing(str, Enum):
    """Key-naming convention applied to every output key."""

    SNAKE = "snake_case"
    CAMEL = "camelCase"

    def apply(self, key: str) -> str:
        if self is Casing.CAMEL:
            return camel_case(key)
        return snake_case(key)

    @classmethod
    def coerce(cls, value: Union["Casing", str]) -> "Casing":
        """Accept a member, its value (``"camelCase"``) or its name (``"camel"``)."""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text == member.value or text.upper() == member.name:
                return member
        raise ValueError(
            f"Unknown casing {value!r}; expected one of "
            f"{', '.join(member.value for member in cls)}"
        )


__all__ = ["Casing", "snake_case", "studly_case", "camel_case"]
