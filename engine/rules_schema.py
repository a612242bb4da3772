"""Validation schema for Hearts rules configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal, Union

from pydantic import BaseModel, Field, field_validator

PassName = Literal["left", "right", "across", "hold"]


class ScoringConfig(BaseModel):
    heart_points: int = Field(1, ge=0, description="Penalty points for each heart taken.")
    queen_points: int = Field(13, ge=0, description="Penalty points for taking the queen of spades.")


class PassingConfig(BaseModel):
    cards: int = Field(3, ge=1, le=13, description="Number of cards each seat passes before play.")
    rotation: list[PassName] = Field(
        default_factory=lambda: ["left", "right", "across", "hold"],
        description="Pass direction for successive hands, repeating.",
    )

    @field_validator("rotation")
    @classmethod
    def ensure_non_empty(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("Pass rotation must not be empty.")
        return value


class RuleSet(BaseModel):
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    passing: PassingConfig = Field(default_factory=PassingConfig)

    def pass_direction_name(self, hand_index: int) -> str:
        rotation = self.passing.rotation
        return rotation[hand_index % len(rotation)]


DEFAULT_RULES = RuleSet()


def load_rules(path: Union[str, Path]) -> RuleSet:
    """Read a JSON rules file; missing sections fall back to the defaults."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    return RuleSet.model_validate(payload)
