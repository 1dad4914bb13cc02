"""Minimal column-oriented data frames and factors."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass
class Factor:
    """A categorical column: 1-based level codes (``None`` when missing)."""

    codes: list[int | None]
    levels: tuple[str, ...]
    ordered: bool = False

    def __post_init__(self) -> None:
        self.codes = list(self.codes)
        self.levels = tuple(self.levels)
        for code in self.codes:
            if code is not None and not 1 <= code <= len(self.levels):
                raise ValueError(
                    f"code {code} is outside the {len(self.levels)} levels"
                )

    def nlevels(self) -> int:
        """Number of levels of the factor."""
        return len(self.levels)

    def __len__(self) -> int:
        return len(self.codes)

    def __iter__(self) -> Iterator[str | None]:
        for code in self.codes:
            yield None if code is None else self.levels[code - 1]


def _position(labels: Sequence[str], name: Any) -> int | None:
    if isinstance(name, str):
        try:
            return labels.index(name)
        except ValueError:
            return None
    position = int(name)
    return position if 0 <= position < len(labels) else None


def dataframe_column(
    data: Mapping[str, Any] | None, names: Any, drop: bool = False
) -> Any:
    """Extract columns by name or by zero-based position.

    A single column with ``drop`` is returned as is (``None`` if it does not
    exist); otherwise a list of columns is returned and unknown names raise
    ``KeyError``.
    """
    if data is None:
        return None

    labels = list(data)
    wanted = [names] if isinstance(names, (str, int, float)) else list(names)
    positions = [_position(labels, name) for name in wanted]

    if len(wanted) == 1 and drop:
        position = positions[0]
        return None if position is None else data[labels[position]]

    for name, position in zip(wanted, positions):
        if position is None:
            raise KeyError(name)

    return [data[labels[position]] for position in positions]


def qr_matrix(data: Mapping[str, Sequence[float]], names: Any) -> list[list[float]]:
    """Build a design matrix: an intercept column of ones, then the named columns.

    The result is a list of rows.
    """
    if not data:
        raise ValueError("the data frame has no columns")
    nrows = len(next(iter(data.values())))

    if isinstance(names, (str, int, float)):
        names = [names]
    columns = dataframe_column(data, names, drop=False)
    if any(len(column) != nrows for column in columns):
        raise ValueError("all columns must have the same length")

    if not columns:
        return [[1.0] for _ in range(nrows)]
    return [[1.0, *(float(value) for value in values)] for values in zip(*columns)]