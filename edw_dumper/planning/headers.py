from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence


class HeaderDerivationError(ValueError):
    """Raised when a result exposes no columns to derive a header from."""


class CaseFormat(str, Enum):
    UPPER_UNDERSCORE = "upper_underscore"  # TABLE_NAME
    LOWER_UNDERSCORE = "lower_underscore"  # table_name
    UPPER_CAMEL = "upper_camel"  # TableName

    def words(self, value: str) -> List[str]:
        if self in (CaseFormat.UPPER_UNDERSCORE, CaseFormat.LOWER_UNDERSCORE):
            return [part for part in value.split("_") if part]
        words: List[str] = []
        current = ""
        for char in value:
            if char.isupper() and current:
                words.append(current)
                current = char
            else:
                current += char
        if current:
            words.append(current)
        return words

    def to(self, target: "CaseFormat", value: str) -> str:
        words = [word.lower() for word in self.words(value)]
        if target is CaseFormat.UPPER_CAMEL:
            return "".join(word[:1].upper() + word[1:] for word in words)
        if target is CaseFormat.UPPER_UNDERSCORE:
            return "_".join(words).upper()
        return "_".join(words)


def rename_header(columns: Sequence[str], source: CaseFormat) -> List[str]:
    """Convert result column labels to the canonical UpperCamel field names.

    Order and count are preserved. A result without columns is a hard failure:
    the task that produced it must not be written out with an empty header.
    """
    if not columns:
        raise HeaderDerivationError(f"No columns to derive a header from ({source.value} source)")
    return [source.to(CaseFormat.UPPER_CAMEL, str(column)) for column in columns]


@dataclass(frozen=True)
class CamelCaseHeader:
    """Header transformer applied to the executed result's column labels."""

    source: CaseFormat

    def __call__(self, columns: Sequence[str]) -> List[str]:
        return rename_header(columns, self.source)
