"""Factories that turn the trailing columns of a network line into edge data."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, ClassVar

_LOG_FLOOR = 0.000_000_001


class DataFactory(ABC):
    """Parses the columns after the two node names into edge data.

    ``length`` is the number of columns consumed, ``description`` names them
    for error messages and ``default`` is the data given to synthetic edges.
    """

    length: ClassVar[int] = 0
    description: ClassVar[str] = ""
    default: ClassVar[Any] = None

    @abstractmethod
    def from_strs(self, line: int, strs: list[str]) -> Any:
        """Build edge data from the columns of line ``line``."""


class EmptyTupleDataFactory(DataFactory):
    """Edges that carry no data."""

    length = 0
    description = "nothing following"
    default = None

    def from_strs(self, line: int, strs: list[str]) -> None:
        return None


def _parse_float(text: str) -> float:
    if text != text.strip() or "_" in text:
        raise ValueError(text)
    return float(text)


class WeightDataFactory(DataFactory):
    """A single floating-point weight column."""

    length = 1
    description = "weight"
    default = 0.0

    def from_strs(self, line: int, strs: list[str]) -> float:
        weight_str = strs[0]
        try:
            return _parse_float(weight_str)
        except ValueError:
            raise ValueError(f"Line {line} has an invalid weight {weight_str}") from None


class LogWeightDataFactory(WeightDataFactory):
    """A weight column where higher is better, turned into a lower-is-better cost."""

    def from_strs(self, line: int, strs: list[str]) -> float:
        weight = super().from_strs(line, strs)
        # max() with the floor first so that NaN falls back to the floor.
        return -math.log(max(_LOG_FLOOR, weight) / math.log(10.0))