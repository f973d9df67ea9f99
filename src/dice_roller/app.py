"""Main application bootstrap — wires config, display and session together."""
from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from dice_roller.config import Settings, load_config
from dice_roller.mechanics.dice import roll_notation
from dice_roller.models.roll import RollResult

logger = logging.getLogger(__name__)


def configure_logging(level: str | int, console: Console | None = None) -> None:
    """Route log records through rich on stderr, once per process."""
    console = console or Console(stderr=True)
    root = logging.getLogger()
    root.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(console=console, show_path=False))


class DiceApp:
    """Main application class for one-shot and interactive rolling."""

    def __init__(self, config_path: Path | None = None, settings: Settings | None = None):
        self.settings = settings or load_config(config_path)

        # Lazy-initialized components
        self._display = None

    @property
    def display(self):
        if self._display is None:
            from dice_roller.cli.display import Display

            self._display = Display(show_banner=self.settings.display.show_banner)
        return self._display

    def roll_once(self, notation: str) -> RollResult:
        """Parse and roll a single notation. DiceNotationError propagates."""
        dice_cfg = self.settings.dice
        result = roll_notation(notation, max_count=dice_cfg.max_count, max_sides=dice_cfg.max_sides)
        self.display.show_roll(result)
        return result

    def interactive(self) -> None:
        from dice_roller.session import Session

        session = Session(self.display, settings=self.settings.dice)
        session.run()
