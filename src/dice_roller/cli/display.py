"""Rich terminal display manager."""
from __future__ import annotations

from rich.console import Console
from rich.text import Text

from dice_roller.models.roll import RollResult

console = Console()
err_console = Console(stderr=True)

SUPPORTED_COMMANDS = [
    "dice roll: 1d20, 4d6, d6, 8",
    "display the statistics: stats",
    "no input means the last dice roll value",
    "show this list: help",
    "leave the session: quit",
]


class Display:
    def __init__(
        self,
        console: Console = console,
        show_banner: bool = True,
        err_console: Console = err_console,
    ):
        self.console = console
        self.err_console = err_console
        self.show_banner = show_banner

    def show_title(self) -> None:
        if not self.show_banner:
            return
        self.console.print("*" * 29, style="bold cyan")
        self.console.print("Started in interactive mode!", style="bold")
        self.console.print("*" * 29, style="bold cyan")
        self.show_help()

    def show_help(self) -> None:
        self.console.print("Supported commands:")
        for i, line in enumerate(SUPPORTED_COMMANDS, 1):
            self.console.print(f"  [cyan]{i}.[/cyan] {line}")

    def show_separator(self) -> None:
        self.console.print("=" * 20, style="dim")

    def show_roll(self, result: RollResult) -> None:
        self.console.print()
        self.console.print(f"[bold]Rolled {result.spec}:[/bold]", soft_wrap=True)
        for i, value in enumerate(result.rolls, 1):
            self.console.print(Text(f"({i})\t{value}"), soft_wrap=True)
        if len(result.rolls) > 1:
            self.console.print("-" * 14, soft_wrap=True)
            self.console.print(Text(f"Sum:\t{result.total}", style="bold green"), soft_wrap=True)

    def show_stats(self, stats: dict[int, list[int]]) -> None:
        self.console.print()
        for sides in sorted(stats):
            values = stats[sides]
            # Text keeps the list brackets from being read as markup.
            self.console.print(Text(f"d{sides} ({len(values)}x): {values}"), soft_wrap=True)

    def show_error(self, message: str) -> None:
        self.err_console.print(Text.assemble(("Error: ", "bold red"), message), soft_wrap=True)

    def show_info(self, message: str) -> None:
        self.console.print(Text.assemble(("Info: ", "bold blue"), message))

    def get_input(self, prompt: str = "> ") -> str:
        return self.console.input(f"[bold cyan]{prompt}[/bold cyan]")
