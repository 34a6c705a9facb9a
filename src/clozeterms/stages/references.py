"""Reference scanner: map reference names to the display text used in prose.

Inline references look like markdown reference links:

- ``[display]`` or ``[display][]``  -> reference name is the display text
- ``[display][name]``               -> reference name is ``name``

Names are trimmed; display text is kept exactly as written. When the same
name appears more than once, the last occurrence wins.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import NamedTuple

_INLINE_REFERENCE = re.compile(r"\[([^\]]+)\](\[([^\]]*)\])?")


class InlineReference(NamedTuple):
    """One inline occurrence: display text and its effective reference name."""

    display: str
    reference: str


def iter_references(prose: str) -> Iterator[InlineReference]:
    """Yield every inline reference in `prose`, left to right."""
    for match in _INLINE_REFERENCE.finditer(prose):
        display = match.group(1)
        name = match.group(3) or display
        yield InlineReference(display=display, reference=name.strip())


def scan_references(prose: str) -> dict[str, str]:
    """Build the reference map (name -> display text) for `prose`."""
    return {ref.reference: ref.display for ref in iter_references(prose)}


__all__ = ["InlineReference", "iter_references", "scan_references"]
