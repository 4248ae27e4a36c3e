"""
Curation Configuration
----------------------

Tunables for the sanitizer and the role similarity resolver, and the
record kind names the curation session works with.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Dict, Tuple

# ---- Sanitizer ----
# Symbols that carry no meaning in stored text. Angle brackets go only
# as part of a tag; "~" stays since URLs use it.
REDUNDANT_SYMBOLS = "{}|\\^`"

# Tags stripped from free text; any other <...> span is kept as written
MARKUP_TAGS: Tuple[str, ...] = (
    "a", "abbr", "b", "big", "blockquote", "br", "center", "code", "div",
    "em", "font", "h1", "h2", "h3", "h4", "h5", "h6", "hr", "i", "img",
    "li", "ol", "p", "pre", "s", "small", "span", "strike", "strong",
    "sub", "sup", "table", "tbody", "td", "th", "thead", "tr", "u", "ul",
)

# ---- Role similarity ----
# One tolerated edit per this many characters of the shorter string
CHARS_PER_EDIT = 5

# Strings shorter than this only cluster with case/whitespace variants
MIN_FUZZY_LENGTH = 4

# ---- Record kinds ----
# Order in which a full curation run visits record kinds
KIND_ORDER: Tuple[str, ...] = (
    "contributions",
    "organizers",
    "people",
    "productions",
    "roles",
    "venues",
)

ROLE_KIND = "roles"
CONTRIBUTION_KIND = "contributions"

# Parent kind -> contribution column referencing it
ORPHAN_KEYS: Dict[str, str] = {
    "people": "person_id",
    "productions": "production_id",
}
