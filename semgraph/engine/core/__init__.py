"""Engine core module.

This module contains core utilities and data structures for the engine:
- Parse-time document structures (markers, ranges, segments)
- Structural error types
- Token counting
- Checksum helpers
"""

from .checksum import ChecksumFn, combine_checksums, label_checksum, sha256_hex
from .document import MarkerRange, ParsedDoc, RawMarker, SegmentInstance
from .errors import (
    FrontmatterError,
    GraphDocumentError,
    MarkerCountError,
    MarkerOrderError,
    NestedSegmentError,
    RefError,
    ReferenceFormatError,
    SegmentParseError,
    UnclosedMarkerError,
    UnmatchedEndMarkerError,
    UnresolvableReferenceError,
)
from .tokens import count_tokens, estimate_tokens, get_encoder

__all__ = [
    # Document structures
    "RawMarker",
    "MarkerRange",
    "SegmentInstance",
    "ParsedDoc",
    # Errors
    "SegmentParseError",
    "FrontmatterError",
    "GraphDocumentError",
    "MarkerCountError",
    "UnclosedMarkerError",
    "UnmatchedEndMarkerError",
    "MarkerOrderError",
    "NestedSegmentError",
    "RefError",
    "ReferenceFormatError",
    "UnresolvableReferenceError",
    # Token utilities
    "get_encoder",
    "count_tokens",
    "estimate_tokens",
    # Checksums
    "ChecksumFn",
    "sha256_hex",
    "label_checksum",
    "combine_checksums",
]
