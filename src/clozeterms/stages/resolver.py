"""Term resolver: turn definition records into :class:`Term` objects.

For each definition record, in the order the paragraphs appeared:

1. Look up its reference name in the reference map built from prose. Records
   nobody refers to are dropped.
2. Parse the manual splits (``/``-separated, trimmed, empties ignored).
3. Remove every manual split from the term text; the fragments in between are
   the *unsplit remainder*.
4. Run the word splitter over each non-empty fragment and add its non-empty
   pieces to the split set.
5. The first record for a reference produces the term; later ones are ignored.

Nothing here raises on odd input. Unreferenced and duplicate definitions are
normal in hand-written notes and only show up in DEBUG logs.

Manual split precedence
-----------------------
All manual splits are removed in one left-to-right pass. When several match
at the same position the longest wins, so ``/a/ab/`` over ``"xaby"`` removes
``"ab"`` and leaves ``["x", "y"]``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence

from clozeterms.core.contracts.term import DefinitionRecord, Term
from clozeterms.core.settings import get_logger
from clozeterms.stages.splitters import WordSplitter

MANUAL_SPLIT_SEPARATOR = "/"

logger = get_logger(__name__)


def parse_manual_splits(raw: str) -> list[str]:
    """Split `raw` on ``/`` into trimmed, non-empty, de-duplicated pieces."""
    pieces = (piece.strip() for piece in raw.split(MANUAL_SPLIT_SEPARATOR))
    return list(dict.fromkeys(piece for piece in pieces if piece))


def unsplit_parts(text: str, manual_splits: Sequence[str]) -> list[str]:
    """Return the fragments of `text` not covered by any manual split.

    Empty fragments (between adjacent splits or at the edges) are kept so the
    result lines up with the removed matches; callers skip them.
    """
    if not manual_splits:
        return [text]
    ordered = sorted(manual_splits, key=lambda s: (-len(s), s))
    pattern = re.compile("|".join(re.escape(s) for s in ordered))
    return pattern.split(text)


def compute_splits(text: str, manual_splits: Sequence[str], splitter: WordSplitter) -> set[str]:
    """Union of the manual splits and the splitter's pieces of the remainder."""
    splits = set(manual_splits)
    for fragment in unsplit_parts(text, manual_splits):
        if not fragment:
            continue
        splits.update(piece for piece in splitter.split_word(fragment) if piece)
    return splits


def resolve_terms(
    definitions: Iterable[DefinitionRecord],
    references: Mapping[str, str],
    splitter: WordSplitter,
) -> list[Term]:
    """Resolve definition records against the reference map.

    Parameters
    ----------
    definitions : Iterable[DefinitionRecord]
        Records in paragraph order.
    references : Mapping[str, str]
        Reference name -> display text, from the prose scan.
    splitter : WordSplitter
        Fills in splits for text not covered by manual splits.

    Returns
    -------
    list[Term]
        One term per referenced name, first definition wins.
    """
    terms: list[Term] = []
    seen: set[str] = set()

    for record in definitions:
        text = references.get(record.reference)
        if text is None:
            logger.debug("dropping definition [%s]: not referenced in text", record.reference)
            continue

        if record.reference in seen:
            logger.debug("dropping duplicate definition [%s]", record.reference)
            continue
        seen.add(record.reference)

        manual_splits = parse_manual_splits(record.raw_splits)
        terms.append(
            Term(
                text=text,
                reference=record.reference,
                definition=record.body.strip(),
                splits=frozenset(compute_splits(text, manual_splits, splitter)),
            )
        )

    logger.debug("resolved %d term(s)", len(terms))
    return terms


__all__ = [
    "MANUAL_SPLIT_SEPARATOR",
    "compute_splits",
    "parse_manual_splits",
    "resolve_terms",
    "unsplit_parts",
]
