"""Slug derivation for property titles."""

import re

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")


def create_slug(title: str) -> str:
    """Turn a title into a URL-safe slug.

    Lowercases, drops everything that is not ``a-z``, ``0-9``, whitespace or a
    hyphen, turns whitespace runs into a single hyphen, collapses repeated
    hyphens and trims hyphens from both ends.

    >>> create_slug("Lake View Camp #1!!")
    'lake-view-camp-1'
    """
    slug = _DISALLOWED.sub("", title.lower())
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    return slug.strip("-")
