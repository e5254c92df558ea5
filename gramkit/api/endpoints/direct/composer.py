"""Direct message composition.

A message is sent either as plain text or, when the text contains links,
as a link item so the server renders a preview. The mode also picks the
broadcast route (``threads/broadcast/text/`` or ``threads/broadcast/link/``).
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

__all__ = ["ComposedMessage", "compose_message", "detect_links", "json_ids"]

# Hostnames ending in a common generic TLD or any two-letter country code
_HOST = (
    r"(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+"
    r"(?:com|net|org|edu|gov|mil|int|info|biz|name|pro|aero|mobi|museum"
    r"|app|dev|io|ai|xyz|online|site|shop|store|blog|tech|news|live|[a-z]{2})\b"
)
_TAIL = r"""(?::\d{1,5})?(?:[/?#][^\s<>"'`]*)?"""

# Scheme URLs, www-prefixed hosts, email addresses and bare hosts
_LINK_PATTERN = re.compile(
    r"""(?:\b(?:https?|ftp)://|\bwww\.)[^\s<>"'`]+"""
    rf"|\b[a-z0-9._%+-]+@{_HOST}"
    rf"|(?<![\w@.-]){_HOST}(?![@-]){_TAIL}",
    re.IGNORECASE,
)
_TRAILING_PUNCTUATION = ".,;:!?"


def _trim(candidate: str) -> str:
    trimmed = candidate.rstrip(_TRAILING_PUNCTUATION)
    # Drop closing brackets that close text outside the link
    for opening, closing in ("()", "[]", "{}"):
        while trimmed.endswith(closing) and trimmed.count(closing) > trimmed.count(opening):
            trimmed = trimmed[:-1].rstrip(_TRAILING_PUNCTUATION)
    return trimmed


def detect_links(text: str) -> list[str]:
    """Link substrings of ``text`` in order of appearance (duplicates kept)."""
    links: list[str] = []
    for match in _LINK_PATTERN.finditer(text):
        link = _trim(match.group(0))
        if link.endswith("://") or link.lower() == "www.":
            continue
        links.append(link)
    return links


def _is_number(value: str) -> bool:
    # ASCII decimal digits without a leading zero survive an int round trip
    return value.isascii() and value.isdecimal() and (value == "0" or not value.startswith("0"))


def json_ids(identifiers: Iterable[str]) -> str:
    """JSON array of identifiers, numeric ones as numbers (``[123,456]``)."""
    values = [int(value) if _is_number(str(value)) else str(value) for value in identifiers]
    return json.dumps(values, separators=(",", ":"))


@dataclass(frozen=True)
class ComposedMessage:
    """Mode and body fields for one outgoing message.

    Attributes:
        mode: ``"link"`` or ``"text"``
        fields: Either ``{"text"}`` or ``{"link_text", "link_urls"}``
        links: Detected link substrings
    """

    mode: str
    fields: Mapping[str, str] = field(default_factory=dict)
    links: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "links", tuple(self.links))


def compose_message(text: str) -> ComposedMessage:
    """Pick the message mode for ``text`` and build its body fields.

    Example:
        >>> compose_message("check this http://a.example out").fields["link_urls"]
        '["http://a.example"]'
        >>> compose_message("hello").fields
        mappingproxy({'text': 'hello'})
    """
    links = detect_links(text)
    if links:
        return ComposedMessage(
            mode="link",
            fields={
                "link_text": text,
                "link_urls": json.dumps(links, separators=(",", ":")),
            },
            links=tuple(links),
        )
    return ComposedMessage(mode="text", fields={"text": text})
