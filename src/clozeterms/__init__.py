"""clozeterms: extract cloze terms and their splits from annotated text.

Public surface:
    from clozeterms import extract_terms, Term, WordSplitter
"""

from __future__ import annotations

__version__ = "0.1.0"

from clozeterms.core.contracts.term import Term
from clozeterms.pipelines.extract import ExtractionResult, extract_terms
from clozeterms.stages.splitters import WordSplitter

__all__ = ["__version__", "ExtractionResult", "Term", "WordSplitter", "extract_terms"]
