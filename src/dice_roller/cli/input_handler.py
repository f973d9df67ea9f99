"""Classifies interactive session input."""
from __future__ import annotations

import re
from typing import Any

# Meta commands are matched before anything is treated as notation.
PATTERNS: list[tuple[str, re.Pattern]] = [
    ("stats", re.compile(r"^stats$")),
    ("help", re.compile(r"^(?:help|\?)$", re.I)),
    ("quit", re.compile(r"^(?:quit|exit|q)$", re.I)),
]


class InputHandler:
    def classify(self, raw_input: str, last_input: str = "1d20") -> dict[str, Any]:
        """Return the command for a line, with the notation to roll if any.

        An empty line repeats last_input.
        """
        text = raw_input.strip()
        if not text:
            return {"command": "roll", "notation": last_input, "is_repeat": True, "raw_input": raw_input}

        for command, pattern in PATTERNS:
            if pattern.match(text):
                return {"command": command, "notation": None, "is_repeat": False, "raw_input": raw_input}

        return {"command": "roll", "notation": text, "is_repeat": False, "raw_input": raw_input}
