"""Pipeline entry points for clozeterms.

Currently exposed:

- :func:`extract_terms` — classify paragraphs, scan references and resolve
  terms in a single pass, implemented in ``extract.py``.
"""

from __future__ import annotations

from .extract import ExtractionResult, extract_terms

__all__ = ["ExtractionResult", "extract_terms"]
