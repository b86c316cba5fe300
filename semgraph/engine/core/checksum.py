"""Checksum helpers.

Hash primitives are injected as ``ChecksumFn`` callables returning a hex
digest; SHA-256 is the default.
"""

import hashlib
from collections.abc import Callable, Iterable

from ...config import settings

ChecksumFn = Callable[[str], str]


def sha256_hex(content: str) -> str:
    """Hex SHA-256 digest of UTF-8 encoded content."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def label_checksum(digest: str, prefix: str | None = None) -> str:
    """Prefix a hex digest with its algorithm label (``sha256:...``)."""
    return f"{prefix or settings.checksum_prefix}:{digest}"


def combine_checksums(
    checksums: Iterable[str | None],
    checksum_fn: ChecksumFn = sha256_hex,
    prefix: str | None = None,
) -> str:
    """Digest the ordered ``|``-joined concatenation of checksums.

    Absent (None or empty) checksums are omitted from the digest input.

    Returns:
        Labelled checksum, or "" when there is nothing to digest
    """
    parts = [c for c in checksums if c]
    if not parts:
        return ""
    return label_checksum(checksum_fn("|".join(parts)), prefix)
