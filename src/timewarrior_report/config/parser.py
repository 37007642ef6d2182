from __future__ import annotations

from typing import Literal, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from timewarrior_report.config.options import DUPLICATE_POLICIES, FALSE_TOKENS, TRUE_TOKENS

DuplicatePolicy = Literal["last", "first", "error"]


class HeaderParserSettings(BaseModel):
    """Knobs for how header values are interpreted."""

    model_config = ConfigDict(frozen=True)

    true_tokens: Tuple[str, ...] = Field(
        default=TRUE_TOKENS,
        description="Values accepted as boolean true for flag keys.",
    )
    false_tokens: Tuple[str, ...] = Field(
        default=FALSE_TOKENS,
        description="Values accepted as boolean false for flag keys.",
    )
    case_sensitive: bool = Field(
        default=False,
        description="Match boolean tokens exactly instead of case-folded.",
    )
    duplicates: DuplicatePolicy = Field(
        default="last",
        description="last | first | error: how repeated header keys are resolved.",
    )

    @field_validator("true_tokens", "false_tokens", mode="before")
    @classmethod
    def _normalize_tokens(cls, value):
        if isinstance(value, str):
            value = [value]
        tokens = tuple(str(v).strip() for v in value)
        if not tokens or any(not t for t in tokens):
            raise ValueError("boolean token sets must contain non-empty tokens")
        return tokens

    @field_validator("duplicates", mode="before")
    @classmethod
    def _normalize_duplicates(cls, value):
        if value is None:
            return "last"
        name = str(value).strip().lower()
        if name not in DUPLICATE_POLICIES:
            raise ValueError(
                f"duplicates must be one of {', '.join(DUPLICATE_POLICIES)}, got {value!r}"
            )
        return name

    @model_validator(mode="after")
    def _validate(self):
        overlap = set(self._fold(self.true_tokens)) & set(self._fold(self.false_tokens))
        if overlap:
            raise ValueError(
                f"boolean tokens cannot be both true and false: {', '.join(sorted(overlap))}"
            )
        return self

    def _fold(self, tokens: Tuple[str, ...]) -> Tuple[str, ...]:
        if self.case_sensitive:
            return tokens
        return tuple(t.casefold() for t in tokens)

    def parse_bool(self, text: str) -> bool | None:
        """Return the boolean for ``text``, or None if it is not in the vocabulary."""
        token = text if self.case_sensitive else text.casefold()
        if token in self._fold(self.true_tokens):
            return True
        if token in self._fold(self.false_tokens):
            return False
        return None
