"""Inspect how an HTML fragment converts to a document tree."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from pathlib import Path

from bs4 import BeautifulSoup

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from richtext import decode, dumps, encode, find_disallowed_tags  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Encode an HTML fragment and show the result.")
    parser.add_argument("--file", required=True, help="Local HTML file path")
    parser.add_argument("--no-json", action="store_true", help="Skip printing the Lexical JSON")
    args = parser.parse_args()

    html = load_html(args.file)
    soup = BeautifulSoup(html, "html.parser")

    print("Tags:")
    for name, count in collect_tags(soup).most_common():
        print(f"{name}: {count}")

    disallowed = find_disallowed_tags(html)
    if disallowed:
        print(f"\nUnsupported tags: {', '.join(disallowed)}")

    tree = encode(html)
    counts = Counter(node.type for node in tree.children)
    print("\nTop-level blocks:")
    for name, count in counts.most_common():
        print(f"{name}: {count}")

    if not args.no_json:
        print("\nLexical JSON:")
        print(dumps(tree, indent=2))

    print("\nDecoded HTML:")
    print(decode(tree))


def load_html(file_path: str) -> str:
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"HTML file not found: {path}")
    return path.read_text(encoding="utf-8")


def collect_tags(soup: BeautifulSoup) -> Counter:
    tags = Counter()
    for tag in soup.find_all(True):
        tags[tag.name] += 1
    return tags


if __name__ == "__main__":
    main()
