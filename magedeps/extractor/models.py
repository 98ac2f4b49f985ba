"""Data models for the mage-init extractor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ParseResult:
    """Dependencies and warnings found in a single template document."""

    dependencies: tuple[str, ...]
    warnings: tuple[str, ...]


@dataclass(frozen=True)
class OpaqueExpression:
    """Any expression other than an object literal (identifiers, calls, ...)."""

    kind: str
    source: str


@dataclass(frozen=True)
class Property:
    """One property of an object literal.

    ``key`` is the decoded key value, or ``None`` when the key is not known
    statically (computed keys, spread elements, methods).
    """

    key: str | None
    value: Expression


@dataclass(frozen=True)
class ObjectExpression:
    """A JavaScript object literal reduced to its ordered properties."""

    properties: tuple[Property, ...]

    def find(self, key: str) -> Property | None:
        """Return the first property named *key*, if any."""
        for prop in self.properties:
            if prop.key == key:
                return prop
        return None


Expression = Union[ObjectExpression, OpaqueExpression]
