"""Process-wide default indentation.

Renders take their indentor as an explicit argument. When a caller omits it,
the printer reads the process default once, at the start of the render, so a
swap never changes the style halfway through a tree.

Usage:
    from esgen.config import set_default_indentor, default_indentor
    from esgen.indent import Tabs

    set_default_indentor(Tabs())

    # Or scoped, restored on exit even if rendering raises
    with default_indentor(Tabs()):
        text = generator.render()
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from .indent import Indentor, Spaces

logger = logging.getLogger(__name__)

# Module-level default, two spaces per level
DEFAULT_INDENTOR: Indentor = Spaces(2)

_lock = threading.Lock()
_indentor: Indentor = DEFAULT_INDENTOR


def get_default_indentor() -> Indentor:
    """Return the indentor used when a render is not given one."""
    with _lock:
        return _indentor


def set_default_indentor(indentor: Indentor) -> Indentor:
    """Swap the process default indentor and return the previous one."""
    global _indentor
    if not isinstance(indentor, Indentor):
        raise TypeError(f"Expected an Indentor, got {type(indentor).__name__}")
    with _lock:
        previous = _indentor
        _indentor = indentor
    logger.debug("Default indentor changed from %r to %r", previous, indentor)
    return previous


def reset_default_indentor() -> None:
    """Restore the built-in two-space default."""
    set_default_indentor(DEFAULT_INDENTOR)


@contextmanager
def default_indentor(indentor: Indentor) -> Iterator[Indentor]:
    """Use an indentor as the process default for the duration of a block.

    Example:
        >>> with default_indentor(Tabs()):
        ...     text = render(node)
    """
    previous = set_default_indentor(indentor)
    try:
        yield indentor
    finally:
        set_default_indentor(previous)


__all__ = [
    "DEFAULT_INDENTOR",
    "get_default_indentor",
    "set_default_indentor",
    "reset_default_indentor",
    "default_indentor",
]
