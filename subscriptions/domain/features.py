"""Plan features: typed editor rows on one side, a JSON object on the other.

The editor shows each feature as a key, a text value and a type. Storage
keeps a flat object whose values are strings, integers or booleans.
"""

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_WORD_START = re.compile(r"\b\w")


class FeatureType(Enum):
    TEXT = "text"
    NUMBER = "number"
    BOOLEAN = "boolean"


def humanize_key(key: str) -> str:
    """``max_guests`` -> ``Max Guests``."""
    return _WORD_START.sub(lambda match: match.group().upper(), key.replace("_", " "))


@dataclass(frozen=True)
class FeatureRow:
    key: str
    value: str
    type: FeatureType = FeatureType.TEXT

    @property
    def label(self) -> str:
        return humanize_key(self.key)

    def encoded(self) -> Any:
        if self.type is FeatureType.BOOLEAN:
            return self.value == "true"
        if self.type is FeatureType.NUMBER:
            return leading_int(self.value)
        return self.value


def leading_int(text: str) -> int:
    """Integer prefix of ``text``; 0 when there is none."""
    match = _LEADING_INT.match(text or "")
    return int(match.group(1)) if match else 0


def encode_features(rows: Iterable[FeatureRow]) -> dict[str, Any]:
    """Rows without a key are dropped; a repeated key keeps its last value."""
    encoded: dict[str, Any] = {}
    for row in rows:
        key = row.key.strip()
        if key:
            encoded[key] = row.encoded()
    return encoded


def _infer(value: Any) -> tuple[str, FeatureType]:
    if isinstance(value, bool):
        return ("true" if value else "false"), FeatureType.BOOLEAN
    if isinstance(value, (int, float)):
        return str(value), FeatureType.NUMBER
    if value is None:
        return "", FeatureType.TEXT
    return str(value), FeatureType.TEXT


def decode_features(features: Mapping[str, Any] | None) -> list[FeatureRow]:
    if not isinstance(features, Mapping):
        return []
    rows = []
    for key, value in features.items():
        text, kind = _infer(value)
        rows.append(FeatureRow(key=key, value=text, type=kind))
    return rows


def clean_benefits(benefits: Iterable[str]) -> tuple[str, ...]:
    """Trim, drop empties and de-duplicate, keeping first-seen order."""
    return tuple(dict.fromkeys(b.strip() for b in benefits if b and b.strip()))
