"""Domain models (Pydantic v2).

Note:
- These models describe *what* the daily content is, not *how* it is generated.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

CLUE_COUNT = 5


class SamplingConfig(BaseModel):
    """Sampling parameters sent along with one instruction to the text generator."""

    temperature: float = Field(
        ...,
        ge=0.0,
        le=2.0,
        description="Randomness/creativity of the completion.",
    )
    max_tokens: int | None = Field(
        default=None,
        ge=1,
        description="Output-length cap (generation units).",
    )
    response_shape: Literal["string_array"] | None = Field(
        default=None,
        description="Structural hint for the expected output (e.g. an array of strings).",
    )


class DailyPayload(BaseModel):
    """The response entity: date tag, clue set and secret word.

    There is no cross-validation between `date` and the other two fields.
    """

    date: str = Field(
        ...,
        pattern=r"^\d+-\d+-\d+$",
        description="Calendar date label YEAR-MONTH-DAY (not zero-padded).",
    )
    clues: list[str] = Field(
        ...,
        min_length=CLUE_COUNT,
        max_length=CLUE_COUNT,
        description="Five clues, most abstract first.",
    )
    word: str = Field(
        ...,
        min_length=1,
        description="Uppercase secret word, single token.",
    )

    @field_validator("clues")
    @classmethod
    def _clues_not_blank(cls, value: list[str]) -> list[str]:
        if any(not clue.strip() for clue in value):
            raise ValueError("clues must not be blank")
        return value

    @field_validator("word")
    @classmethod
    def _word_is_single_token(cls, value: str) -> str:
        if any(ch.isspace() for ch in value):
            raise ValueError("word must not contain whitespace")
        return value
