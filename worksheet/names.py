# worksheet/names.py
# Normalization helpers for snippet identifiers.
from __future__ import annotations
import re

# Lowercase, spaces/underscores -> hyphens, strip other punctuation.
# Ensure leading char is [a-z] and max length 64.
_SLUG_ALLOWED = re.compile(r'[^a-z0-9-]+')
_LEADING_OK = re.compile(r'^[a-z]')
_SEP = re.compile(r'[\s_]+')
_DASHES = re.compile(r'-{2,}')

def normalize_snippet_slug(name: str | None) -> str:
    if not isinstance(name, str):
        return "_"
    s = name.strip().lower()
    s = _SEP.sub("-", s)
    s = _SLUG_ALLOWED.sub("", s)
    s = _DASHES.sub("-", s).strip("-")
    if not s:
        return "_"
    if not _LEADING_OK.match(s):
        s = "s-" + s
    if len(s) > 64:
        s = s[:64]
    return s

def slug_match(pattern: str, slug: str) -> bool:
    """Match a snippet slug where '*' selects everything, else compare normalized."""
    if pattern == "*":
        return True
    return normalize_snippet_slug(pattern) == slug
