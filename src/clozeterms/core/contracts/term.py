"""Term contracts: the resolved flashcard unit and its transient source record.

- `Term`             : frozen Pydantic v2 model handed to callers (renderers,
  exporters). `splits` is a set; callers must not rely on any ordering.
- `DefinitionRecord` : plain dataclass parsed from one definition paragraph and
  consumed by the resolver. It never leaves the extraction pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Term(BaseModel):
    """A term called out in prose and defined in its own paragraph."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Surface text taken from the inline reference.")
    reference: str = Field(description="Reference name linking occurrences to the definition.")
    definition: str = Field(default="", description="Trimmed definition body.")
    splits: frozenset[str] = Field(
        default_factory=frozenset,
        description="Unordered cloze pieces of `text` (manual and splitter-derived).",
    )

    @field_validator("splits")
    @classmethod
    def _no_empty_splits(cls, v: frozenset[str]) -> frozenset[str]:
        if "" in v:
            raise ValueError("splits must not contain empty strings")
        return v

    def sorted_splits(self) -> list[str]:
        """Return splits longest first, then lexically (stable for display)."""
        return sorted(self.splits, key=lambda s: (-len(s), s))


@dataclass(frozen=True, slots=True)
class DefinitionRecord:
    """
    One parsed definition paragraph.

    Attributes
    ----------
    reference : str
        Name between the brackets of ``[name]: /...``.
    raw_splits : str
        The manual-splits token after the leading ``/`` (e.g. ``"ab/cd/"``).
    body : str
        Remaining paragraph text, untrimmed.
    """

    reference: str
    raw_splits: str
    body: str


__all__ = ["DefinitionRecord", "Term"]
