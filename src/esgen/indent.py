"""Indentation strategies used by the printer.

An indentor offsets a block of rendered text by one nesting level. Two
strategies ship with the package: a fixed number of spaces and a fixed number
of tabs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List


class Indentor(ABC):
    """One level of indentation."""

    @property
    @abstractmethod
    def unit(self) -> str:
        """The prefix added to each line for one nesting level."""

    def indent(self, text: str) -> str:
        """Prefix every line of a multi-line string with one unit."""
        return "\n".join(self.indent_lines(text.split("\n")))

    def indent_lines(self, lines: Iterable[str]) -> List[str]:
        """Prefix every element of an already-split line sequence."""
        unit = self.unit
        return [unit + line for line in lines]


def _check_width(kind: str, width: int) -> None:
    if isinstance(width, bool) or not isinstance(width, int) or width < 1:
        raise ValueError(f"{kind} width must be a positive integer, got {width!r}")


@dataclass(frozen=True)
class Spaces(Indentor):
    """Indent with a fixed number of spaces."""

    width: int = 2

    def __post_init__(self) -> None:
        _check_width("Spaces", self.width)

    @property
    def unit(self) -> str:
        return " " * self.width


@dataclass(frozen=True)
class Tabs(Indentor):
    """Indent with a fixed number of tab characters."""

    width: int = 1

    def __post_init__(self) -> None:
        _check_width("Tabs", self.width)

    @property
    def unit(self) -> str:
        return "\t" * self.width
