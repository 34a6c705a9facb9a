"""Paragraph classifier: separate definition paragraphs from prose.

The input is split on blank lines (two newlines with only whitespace between
them; whitespace hugging the blank run belongs to the separator). Each
paragraph is then either:

- a **definition**, when one of its lines reads ``[name]: /split/split/`` and
  the rest of the paragraph is the definition body, or
- **prose**, kept in original order and rejoined with exactly one blank line.

Examples
--------
>>> result = classify_paragraphs("See [cat].\\n\\n[cat]: /c/\\nA small feline.")
>>> result.prose
'See [cat].'
>>> result.definitions[0].reference, result.definitions[0].raw_splits
('cat', 'c/')
"""

from __future__ import annotations

import re
from typing import NamedTuple

from clozeterms.core.contracts.term import DefinitionRecord
from clozeterms.core.settings import get_logger

# ASCII whitespace only: a line holding an ideographic space is not blank.
_PARAGRAPH_BREAK = re.compile(r"\s*\n\s*\n\s*", flags=re.ASCII)

# [name]: /manual/splits/ then the body, which may span several lines.
_DEFINITION = re.compile(
    r"^[ \t]*\[(\S+)\]:\s*/(\S*)\s*\n?(.*)", flags=re.ASCII | re.MULTILINE | re.DOTALL
)

PARAGRAPH_SEPARATOR = "\n\n"

logger = get_logger(__name__)


class ClassifiedText(NamedTuple):
    """Definition records and the reassembled prose, both in input order."""

    definitions: list[DefinitionRecord]
    prose: str


def split_paragraphs(text: str) -> list[str]:
    """Split `text` on blank-line runs.

    Whitespace on either side of a blank run belongs to the separator. Pieces
    are otherwise left alone: leading whitespace of the first paragraph
    survives, and text ending in a blank run yields a trailing empty piece.
    """
    return _PARAGRAPH_BREAK.split(text)


def parse_definition(paragraph: str) -> DefinitionRecord | None:
    """Return a :class:`DefinitionRecord` if `paragraph` declares a definition."""
    match = _DEFINITION.search(paragraph)
    if match is None:
        return None
    reference, raw_splits, body = match.groups()
    return DefinitionRecord(reference=reference, raw_splits=raw_splits, body=body)


def classify_paragraphs(text: str) -> ClassifiedText:
    """Partition `text` into definition records and prose.

    Parameters
    ----------
    text : str
        Raw document text.

    Returns
    -------
    ClassifiedText
        ``definitions`` in paragraph order and ``prose``, the remaining
        paragraphs joined by a single blank line.
    """
    definitions: list[DefinitionRecord] = []
    prose: list[str] = []
    for paragraph in split_paragraphs(text):
        record = parse_definition(paragraph)
        if record is None:
            prose.append(paragraph)
        else:
            definitions.append(record)

    logger.debug(
        "classified %d definition(s) and %d prose paragraph(s)", len(definitions), len(prose)
    )
    return ClassifiedText(definitions=definitions, prose=PARAGRAPH_SEPARATOR.join(prose))


__all__ = [
    "PARAGRAPH_SEPARATOR",
    "ClassifiedText",
    "classify_paragraphs",
    "parse_definition",
    "split_paragraphs",
]
