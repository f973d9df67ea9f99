"""Typer CLI application."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="roll-dice",
    help="Roll dice from compact notation such as 1d20, 4d6, d6 or 8.",
    no_args_is_help=False,
)


@app.command()
def main(
    notation: Optional[str] = typer.Argument(
        None, help="Dice to roll once, e.g. 2d6. Omit to start an interactive session."
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a config.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Roll dice once, or start an interactive session."""
    from dice_roller.app import DiceApp, configure_logging
    from dice_roller.config import ConfigError
    from dice_roller.mechanics.dice import DiceNotationError

    try:
        dice_app = DiceApp(config_path=config)
    except ConfigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)

    level = logging.DEBUG if verbose else dice_app.settings.logging.level
    configure_logging(level)

    if notation is None:
        dice_app.interactive()
        return

    try:
        dice_app.roll_once(notation)
    except DiceNotationError as exc:
        dice_app.display.show_error(str(exc))
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
