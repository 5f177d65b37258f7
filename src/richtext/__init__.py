"""richtext: convert HTML fragments to document trees and back."""

from richtext.decoder import decode
from richtext.encoder import encode
from richtext.exceptions import DisallowedMarkupError, DocumentLoadError, RichTextError
from richtext.schemas import DocumentTree, UploadSpec
from richtext.serialization import dumps, from_lexical, loads, to_lexical
from richtext.text import extract_text
from richtext.uploads import inject_upload_nodes
from richtext.validation import find_disallowed_tags, validate_fragment

__all__ = [
    "DisallowedMarkupError",
    "DocumentLoadError",
    "DocumentTree",
    "RichTextError",
    "UploadSpec",
    "decode",
    "dumps",
    "encode",
    "extract_text",
    "find_disallowed_tags",
    "from_lexical",
    "inject_upload_nodes",
    "loads",
    "to_lexical",
    "validate_fragment",
]
