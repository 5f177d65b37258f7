"""Local configuration for richtext."""

from __future__ import annotations

import os


DEFAULT_HTML_PARSER = "html.parser"
DEFAULT_MAX_DEPTH = 200
DEFAULT_BLOCK_SEPARATOR = "\n"

# Parser backend handed to BeautifulSoup. html.parser keeps table markup as
# written (no synthesised <tbody>).
RICHTEXT_HTML_PARSER = os.getenv("RICHTEXT_HTML_PARSER", DEFAULT_HTML_PARSER)
RICHTEXT_MAX_DEPTH = int(os.getenv("RICHTEXT_MAX_DEPTH", str(DEFAULT_MAX_DEPTH)))
RICHTEXT_BLOCK_SEPARATOR = os.getenv("RICHTEXT_BLOCK_SEPARATOR", DEFAULT_BLOCK_SEPARATOR)
