"""Segment token counts.

The segment index records a token count per segment body. ``count_tokens``
uses the tiktoken encoding named in settings; ``estimate_tokens`` is the
offline fallback a caller can pass to ``build_segment_index`` instead.
"""

import tiktoken

from ...config import settings

_encoding: tiktoken.Encoding | None = None


def get_encoder() -> tiktoken.Encoding:
    """Return the encoding for ``settings.token_encoding``, loaded on first use."""
    global _encoding
    if _encoding is None:
        _encoding = tiktoken.get_encoding(settings.token_encoding)
    return _encoding


def count_tokens(text: str) -> int:
    """Count the tokens in a segment body."""
    return len(get_encoder().encode(text))


def estimate_tokens(text: str) -> int:
    """Approximate a token count at four characters per token.

    Non-empty text counts as at least one token.
    """
    if not text:
        return 0
    return max(1, len(text) // 4)
