#!/usr/bin/env python3
"""
sanitize.py
-----------
Free-text field sanitizer.

Removes noise that crowd contributors leave in stored text without
touching its meaning. Rules run in a fixed order:

    1. Repair mis-decoded text (ftfy), decode HTML entities that end in
       ";" ("&nbsp;" -> space, "&amp;" -> "&") and turn markup tags
       into spaces
    2. Drop control/format characters and redundant symbols, keeping
       intra-word punctuation such as hyphens and apostrophes
    3. Collapse any run of whitespace to a single space
    4. Trim leading and trailing whitespace

Text that only looks like markup is left alone: "&copy=2" in a query
string is not an entity, "5<x and x>12" holds no tag, and "~" in a URL
path stays.

The pipeline is repeated until its output no longer changes, so
``sanitize(sanitize(x)) == sanitize(x)`` holds even when a removal in
step 2 exposes a new entity. A pass that changes the text makes it
shorter or turns whitespace into plain spaces, so the loop ends.

Usage:
    from theatrical.curation.sanitize import sanitize

    sanitize("  Hello&nbsp;&nbsp;World!! ")  # "Hello World!!"
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import html
import re
import unicodedata
from html.entities import html5
from typing import Optional

# --- Third-party imports ---
from ftfy import fix_text  # type: ignore

# --- Local imports ---
from .configs import MARKUP_TAGS, REDUNDANT_SYMBOLS

_ENTITY_RE = re.compile(r"&(#[0-9]{1,7}|#[xX][0-9A-Fa-f]{1,6}|[A-Za-z][A-Za-z0-9]{1,31});")
_TAG_RE = re.compile(
    r"<!--.*?-->|</?(?:%s)(?=[\s/>])[^<>]*>" % "|".join(MARKUP_TAGS),
    re.DOTALL | re.IGNORECASE,
)
_WHITESPACE_RE = re.compile(r"\s+")
_SYMBOL_TABLE = str.maketrans("", "", REDUNDANT_SYMBOLS + "\ufffd")
_DROPPED_CATEGORIES = frozenset({"Cc", "Cf", "Co", "Cs"})


def _decode_entity(match: re.Match) -> str:
    name = match.group(1)
    if name.startswith("#"):
        return html.unescape(match.group(0))
    # Exact lookup: html.unescape would also decode a known prefix ("&notit;")
    return html5.get(f"{name};", match.group(0))


def decode_entities(text: str) -> str:
    """
    Decode HTML entities until none remain and replace tags by spaces.

    Double-escaped input ("&amp;nbsp;") is decoded all the way down.
    Only complete entities are decoded: "&copy=2" stays as written.

    Args:
        text: Text possibly containing HTML entities and tags

    Returns:
        Text with entities decoded and tags replaced by spaces
    """
    decoded = fix_text(text, unescape_html=False)
    while True:
        unescaped = _ENTITY_RE.sub(_decode_entity, decoded)
        if unescaped == decoded:
            break
        decoded = unescaped
    return _TAG_RE.sub(" ", decoded)


def strip_noise(text: str) -> str:
    """
    Remove invisible characters and redundant symbols.

    Whitespace control characters (tabs, newlines) are kept so the
    whitespace rule can turn them into single spaces.
    """
    text = text.translate(_SYMBOL_TABLE)
    return "".join(
        c for c in text
        if c.isspace() or unicodedata.category(c) not in _DROPPED_CATEGORIES
    )


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to one space and trim both ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def _sanitize_once(text: str) -> str:
    return collapse_whitespace(strip_noise(decode_entities(text)))


def sanitize(text: Optional[str]) -> str:
    """
    Clean a free-text value.

    Total function: never raises, maps None and empty input to "".

    Args:
        text: Raw field value

    Returns:
        Cleaned value, stable under a second sanitize
    """
    if not text:
        return ""

    result = text
    while True:
        cleaned = _sanitize_once(result)
        if cleaned == result:
            return result
        result = cleaned
