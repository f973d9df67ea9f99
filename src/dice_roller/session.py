"""Interactive read-eval loop: roll, repeat, and report statistics."""
from __future__ import annotations

import logging

from dice_roller.cli.display import Display
from dice_roller.cli.input_handler import InputHandler
from dice_roller.config import DiceSettings
from dice_roller.mechanics.dice import DiceNotationError, roll_notation
from dice_roller.models.roll import RollResult, SessionState

logger = logging.getLogger(__name__)


class Session:
    """Owns the session state and drives one interactive session."""

    def __init__(
        self,
        display: Display,
        settings: DiceSettings | None = None,
        input_handler: InputHandler | None = None,
    ):
        self.display = display
        self.settings = settings or DiceSettings()
        self.input_handler = input_handler or InputHandler()
        self.state = SessionState(last_input=self.settings.default_notation)

    def run(self) -> None:
        self.display.show_title()
        while True:
            self.display.show_separator()
            try:
                line = self.display.get_input("> ")
            except (EOFError, KeyboardInterrupt):
                self.display.console.print()
                break
            if not self.handle_line(line):
                break
        logger.info("Session ended with %d die sizes tracked", len(self.state.stats))

    def handle_line(self, line: str) -> bool:
        """Process one input line. Returns False when the session should end."""
        classified = self.input_handler.classify(line, last_input=self.state.last_input)
        command = classified["command"]

        if command == "quit":
            return False
        if command == "stats":
            self.display.show_stats(self.state.stats)
            return True
        if command == "help":
            self.display.show_help()
            return True

        notation = classified["notation"]
        try:
            result = self.roll(notation)
        except DiceNotationError as exc:
            logger.info("Ignoring invalid input %r: %s", notation, exc)
            self.display.show_error(str(exc))
            return True

        if not classified["is_repeat"]:
            self.state.last_input = notation
        return True

    def roll(self, notation: str) -> RollResult:
        result = roll_notation(notation, max_count=self.settings.max_count, max_sides=self.settings.max_sides)
        self.display.show_roll(result)
        self.state.record(result)
        return result
