from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class RollSpec:
    count: int = 1
    sides: int = 20

    def __str__(self) -> str:
        return f"{self.count}d{self.sides}"


@dataclass
class RollResult:
    spec: RollSpec
    rolls: list[int] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.rolls)


class SessionState(BaseModel):
    """Per-session roll history, keyed by die size."""

    last_input: str = "1d20"
    stats: dict[int, list[int]] = Field(default_factory=dict)

    def record(self, result: RollResult) -> None:
        self.stats.setdefault(result.spec.sides, []).extend(result.rolls)
