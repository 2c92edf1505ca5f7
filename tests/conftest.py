"""Pytest configuration for esgen tests."""

import pytest

from esgen.config import reset_default_indentor
from esgen.printer import Printer


@pytest.fixture(autouse=True)
def restore_default_indentor():
    """Keep default-indentor swaps from leaking between tests."""
    reset_default_indentor()
    yield
    reset_default_indentor()


@pytest.fixture
def printer():
    """A printer using the built-in two-space indentation."""
    return Printer()
