"""Disk row state for the alternating disks problem."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator


class PreconditionError(AssertionError):
    """Raised when a caller breaks a :class:`DiskRow` precondition."""


class DiskColor(Enum):
    DARK = "D"
    LIGHT = "L"

    @property
    def token(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, token: str) -> "DiskColor":
        if not isinstance(token, str):
            raise PreconditionError(f"Disk tokens must be strings, got {token!r}")
        try:
            return cls(token.strip().upper())
        except ValueError as exc:
            raise PreconditionError(f"Unknown disk token {token!r}") from exc


class DiskRow:
    """Fixed-length row of dark and light disks.

    A new row alternates light and dark, starting with light at index 0.
    The only mutation is :meth:`swap`, which exchanges two neighbours, so
    the length and the number of each color never change. A row returned
    by :meth:`freeze` refuses further swaps.
    """

    __slots__ = ("_colors", "_frozen")

    def __init__(self, light_count: int) -> None:
        if not isinstance(light_count, int) or isinstance(light_count, bool) or light_count <= 0:
            raise PreconditionError(f"light_count must be a positive integer, got {light_count!r}")
        self._colors: list[DiskColor] = [DiskColor.DARK] * (light_count * 2)
        for index in range(0, len(self._colors), 2):
            self._colors[index] = DiskColor.LIGHT
        self._frozen = False

    @classmethod
    def from_colors(cls, colors: Iterable[DiskColor | str] | str) -> "DiskRow":
        """Build a row from explicit colors or ``"L"``/``"D"`` tokens."""

        if isinstance(colors, str):
            colors = colors.split()
        parsed = [c if isinstance(c, DiskColor) else DiskColor.from_token(c) for c in colors]
        if not parsed or len(parsed) % 2:
            raise PreconditionError(f"A row needs a positive even number of disks, got {len(parsed)}")
        lights = parsed.count(DiskColor.LIGHT)
        if lights * 2 != len(parsed):
            raise PreconditionError(
                f"A row needs as many light disks as dark disks, got {lights} light of {len(parsed)}"
            )
        row = cls(len(parsed) // 2)
        row._colors = parsed
        return row

    def copy(self) -> "DiskRow":
        clone = DiskRow.__new__(DiskRow)
        clone._colors = list(self._colors)
        clone._frozen = False
        return clone

    def freeze(self) -> "DiskRow":
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def total_count(self) -> int:
        return len(self._colors)

    def light_count(self) -> int:
        return self.total_count() // 2

    def dark_count(self) -> int:
        return self.light_count()

    def count(self, color: DiskColor) -> int:
        return self._colors.count(color)

    def is_index(self, index: int) -> bool:
        return 0 <= index < self.total_count()

    def get(self, index: int) -> DiskColor:
        if not self.is_index(index):
            raise PreconditionError(f"Index {index} out of range for {self.total_count()} disks")
        return self._colors[index]

    def swap(self, left_index: int) -> None:
        """Exchange the disk at *left_index* with its right neighbour."""

        if self._frozen:
            raise PreconditionError("Cannot swap disks in a frozen row")
        right_index = left_index + 1
        if not (self.is_index(left_index) and self.is_index(right_index)):
            raise PreconditionError(
                f"Cannot swap {left_index} and {right_index} in a row of {self.total_count()} disks"
            )
        colors = self._colors
        colors[left_index], colors[right_index] = colors[right_index], colors[left_index]

    def equals(self, other: "DiskRow") -> bool:
        if self.total_count() != other.total_count():
            return False
        return self._colors == other._colors

    def is_initialized(self) -> bool:
        """Return ``True`` when the row is light, dark, light, dark, ..."""

        for index, color in enumerate(self._colors):
            expected = DiskColor.LIGHT if index % 2 == 0 else DiskColor.DARK
            if color is not expected:
                return False
        return True

    def is_sorted(self) -> bool:
        """Return ``True`` when every dark disk sits left of every light disk."""

        last = self.total_count() - 1
        for index in range(self.total_count() // 2):
            if self.get(index) is DiskColor.LIGHT:
                return False
            if self.get(last - index) is DiskColor.DARK:
                return False
        return True

    def to_display_string(self) -> str:
        return " ".join(color.token for color in self._colors)

    def __len__(self) -> int:
        return self.total_count()

    def __iter__(self) -> Iterator[DiskColor]:
        return iter(self._colors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiskRow):
            return NotImplemented
        return self.equals(other)

    def __str__(self) -> str:
        return self.to_display_string()

    def __repr__(self) -> str:
        return f"DiskRow.from_colors({self.to_display_string()!r})"
