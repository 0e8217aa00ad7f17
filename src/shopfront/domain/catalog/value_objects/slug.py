"""URL slug derived from a category name."""

import re
from dataclasses import dataclass

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class Slug:
    """Deterministic slug: lowercase, runs of whitespace become one hyphen.

    Examples
    --------
    >>> Slug.from_name("Home  Office").value
    'home-office'
    """

    value: str

    @classmethod
    def from_name(cls, name: str) -> "Slug":
        return cls(_WHITESPACE.sub("-", name.strip().lower()))

    def __str__(self) -> str:
        return self.value
