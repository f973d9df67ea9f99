"""Shared fixtures for the dice roller test suite."""
from __future__ import annotations

import io
import random

import pytest
from rich.console import Console

from dice_roller.cli.display import Display


@pytest.fixture
def seeded_rng():
    state = random.getstate()
    random.seed(42)
    yield
    random.setstate(state)


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def display(buffer) -> Display:
    console = Console(file=buffer, width=120, color_system=None, highlight=False)
    return Display(console=console, err_console=console)
