"""Segment marker scanner.

Finds segment start/end markers in raw document bytes. The scanner knows
nothing about specs or pairing rules; it reports every marker occurrence in
document order with its byte offset and line.

Marker syntax (namespace configurable, ``semcontext:segment`` by default)::

    <!-- semcontext:segment start key="intro" type="overview" audience="dev, ops" -->
    ...
    <!-- semcontext:segment end -->
"""

import re
from dataclasses import dataclass
from functools import cached_property

from ...config import settings
from ...models.enums import MarkerKind
from ..core.document import RawMarker


@dataclass(frozen=True)
class MarkerSyntax:
    """One configurable start/end marker token pair."""

    namespace: str = "semcontext:segment"
    start_keyword: str = "start"
    end_keyword: str = "end"

    @classmethod
    def from_settings(cls) -> "MarkerSyntax":
        return cls(namespace=settings.marker_namespace)

    @cached_property
    def start_pattern(self) -> re.Pattern[bytes]:
        ns = re.escape(self.namespace.encode("utf-8"))
        kw = re.escape(self.start_keyword.encode("utf-8"))
        return re.compile(
            rb"<!--\s*" + ns + rb"\s+" + kw + rb'\s+(?:key|id)="([^"]+)"'
            rb'(?:\s+type="([^"]*)")?(?:\s+audience="([^"]*)")?\s*-->'
        )

    @cached_property
    def end_pattern(self) -> re.Pattern[bytes]:
        ns = re.escape(self.namespace.encode("utf-8"))
        kw = re.escape(self.end_keyword.encode("utf-8"))
        return re.compile(rb"<!--\s*" + ns + rb"\s+" + kw + rb"\s*-->")

    def start_marker(self, segment_id: str) -> str:
        """Render a start marker (used when writing documents back out)."""
        return f'<!-- {self.namespace} {self.start_keyword} key="{segment_id}" -->'

    def end_marker(self) -> str:
        return f"<!-- {self.namespace} {self.end_keyword} -->"


def _split_audience(raw: bytes | None) -> tuple[str, ...] | None:
    if raw is None:
        return None
    roles = tuple(a.strip() for a in raw.decode("utf-8").split(",") if a.strip())
    return roles or None


def scan_markers(
    data: bytes,
    syntax: MarkerSyntax | None = None,
    base_offset: int = 0,
    base_line: int = 1,
) -> list[RawMarker]:
    """Collect all start and end markers in ``data``.

    Args:
        data: UTF-8 encoded text to scan
        syntax: Marker syntax (defaults to the configured namespace)
        base_offset: Added to every offset (bytes preceding ``data``)
        base_line: Line number of the first line of ``data``

    Returns:
        Markers sorted by byte offset
    """
    syntax = syntax or MarkerSyntax.from_settings()
    found: list[tuple[int, int, MarkerKind, str, str | None, tuple[str, ...] | None]] = []

    for match in syntax.start_pattern.finditer(data):
        inline_type = match.group(2).decode("utf-8") if match.group(2) else None
        found.append(
            (
                match.start(),
                match.end() - match.start(),
                MarkerKind.START,
                match.group(1).decode("utf-8"),
                inline_type,
                _split_audience(match.group(3)),
            )
        )
    for match in syntax.end_pattern.finditer(data):
        found.append((match.start(), match.end() - match.start(), MarkerKind.END, "", None, None))

    found.sort(key=lambda item: item[0])

    markers: list[RawMarker] = []
    line = base_line
    cursor = 0
    for offset, length, kind, segment_id, inline_type, audience in found:
        line += data.count(b"\n", cursor, offset)
        cursor = offset
        markers.append(
            RawMarker(
                kind=kind,
                id=segment_id,
                byte_offset=offset + base_offset,
                match_length=length,
                line=line,
                type=inline_type,
                audience=audience,
            )
        )
    return markers
