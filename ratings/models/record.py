"""
Score record model: one player's submission for one daily puzzle.

Built from Firestore/JSON dicts via ScoreRecord.model_validate(d).
Stored documents use the field names isoDate and wordleNumber; the camelCase and
snake_case names are accepted too.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ScoreRecord(BaseModel):
    """
    A single submitted result.

    guesses: raw guess count as stored (1..6, 0, None, 7, or a numeric string).
    dnf: explicit "did not finish" flag; only a literal True counts. May disagree with guesses.
    submitted_at: ISO-8601 instant (or datetime). The only source of the record's date;
        records without a usable value take part in nothing.
    puzzle_number: display-only label.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    name: str
    guesses: Any = None
    dnf: Any = False
    submitted_at: Any = Field(
        default=None,
        validation_alias=AliasChoices("submittedAt", "submitted_at", "isoDate"),
    )
    puzzle_number: Any = Field(
        default=None,
        validation_alias=AliasChoices("puzzleNumber", "puzzle_number", "wordleNumber"),
    )

