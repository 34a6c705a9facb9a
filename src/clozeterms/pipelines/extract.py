"""
Extraction pipeline: from annotated text to terms and definition-free text.

Flow
----
raw text
  -> paragraph classifier   (definition records, prose)
  -> reference scanner      (reference name -> display text, prose only)
  -> term resolver          (terms, first definition per reference)

Every stage is a pure function of its inputs. The compiled patterns are
module-level constants, so concurrent calls need no coordination as long as
the splitter is itself stateless.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from typing import NamedTuple

from clozeterms.core.contracts.term import Term
from clozeterms.core.settings import get_logger, load_settings
from clozeterms.stages.paragraphs import classify_paragraphs
from clozeterms.stages.references import scan_references
from clozeterms.stages.resolver import resolve_terms
from clozeterms.stages.splitters import WordSplitter, as_word_splitter, resolve_splitter

SplitterLike = WordSplitter | Callable[[str], Sequence[str]] | re.Pattern[str]

logger = get_logger(__name__)


class ExtractionResult(NamedTuple):
    """Resolved terms plus the input with definition paragraphs removed."""

    terms: list[Term]
    leftover_text: str


def _default_splitter() -> WordSplitter:
    name = load_settings().default_splitter
    return resolve_splitter(name).expect(f"configured default splitter {name!r} is invalid")


def extract_terms(text: str, splitter: SplitterLike | None = None) -> ExtractionResult:
    """Extract cloze terms from `text`.

    Parameters
    ----------
    text : str
        Document text with inline ``[display][ref]`` references and
        ``[ref]: /splits/`` definition paragraphs.
    splitter : WordSplitter | callable | re.Pattern | None
        Segments the parts of each term not covered by manual splits.
        ``None`` uses the configured default (``CLOZETERMS_SPLITTER``).

    Returns
    -------
    ExtractionResult
        ``terms`` (order not guaranteed; key by ``reference``) and
        ``leftover_text``, the prose paragraphs joined by single blank lines.
    """
    word_splitter = _default_splitter() if splitter is None else as_word_splitter(splitter)

    classified = classify_paragraphs(text)
    references = scan_references(classified.prose)
    terms = resolve_terms(classified.definitions, references, word_splitter)

    logger.debug(
        "extracted %d term(s) from %d definition(s), %d reference(s)",
        len(terms),
        len(classified.definitions),
        len(references),
    )
    return ExtractionResult(terms=terms, leftover_text=classified.prose)


__all__ = ["ExtractionResult", "SplitterLike", "extract_terms"]
