# scripts/smoke.py
"""
Smoke test script for the clozeterms extraction pipeline.

Usage
-----
1. Run over the built-in sample note:
    $ python scripts/smoke.py

2. Run over a local file with a specific splitter:
    $ python scripts/smoke.py --file notes/latin.md --splitter whitespace
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from clozeterms.pipelines.extract import extract_terms
from clozeterms.stages.splitters import resolve_splitter

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

DEFAULT_TEXT = """\
筑波大などの国際研究チームは、カンボジアの北西部の[密林][]に、
古代クメール王朝の首都「[マヘンドラパルバタ][b]」の遺跡を見つけた。

[密林]: /密/林
みつ‐りん【密林】
樹木などがすきまのないほど生い茂っている林。

[b]: /
マヘンドラパルバタ

[unused]: /
Never referenced, so it yields no term.
"""


def main() -> None:
    """Run the extraction and print what came out."""
    parser = argparse.ArgumentParser(description="Run clozeterms smoke test")
    parser.add_argument("--file", "-f", type=str, help="Path to an annotated text file")
    parser.add_argument("--splitter", "-s", type=str, default="japanese")
    args = parser.parse_args()

    if args.file:
        input_path = Path(args.file)
        if not input_path.exists():
            print(f"File not found: {input_path}")
            return
        text = input_path.read_text(encoding="utf-8")
    else:
        text = DEFAULT_TEXT

    chosen = resolve_splitter(args.splitter)
    if chosen.is_err():
        print(f"Bad splitter: {chosen.unwrap_err()}")
        return

    terms, leftover = extract_terms(text, chosen.unwrap())

    print("=" * 60)
    print(f"{len(terms)} term(s)")
    print("=" * 60)
    for term in sorted(terms, key=lambda t: t.reference):
        print(f"[{term.reference}] {term.text}: {' / '.join(term.sorted_splits())}")
        print(f"    {term.definition.splitlines()[0] if term.definition else '(no definition)'}")

    print("\nLeftover text:")
    print(leftover)


if __name__ == "__main__":
    main()
