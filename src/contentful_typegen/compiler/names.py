# Copyright 2026 Contentful Typegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Identifier normalization for generated type names and property keys."""

import re

# ###############
# Public Interface
# ###############


def to_pascal(text: str) -> str:
    """Convert arbitrary text to a PascalCase type name.

    Splits on runs of non-word characters and upper-cases the first character
    of each segment.  Underscores are word characters, so ``foo_bar`` stays one
    segment, and a leading digit is left untouched.
    """
    segments = [s for s in _NON_WORD_RUN_RE.split(text) if s]
    return "".join(s[0].upper() + s[1:] for s in segments)


def safe_prop(identifier: str | None) -> str:
    """Return a valid TypeScript property key for a possibly missing identifier.

    Empty or missing identifiers fall back to ``"field"``.
    """
    base = identifier if identifier else "field"
    cleaned = _NON_IDENT_CHAR_RE.sub("_", base)
    if _IDENT_START_RE.match(cleaned):
        return cleaned
    return f"_{cleaned}"


# ################
# Implementation
# ################

_NON_WORD_RUN_RE = re.compile(r"[^A-Za-z0-9_]+")
_NON_IDENT_CHAR_RE = re.compile(r"[^A-Za-z0-9_]")
_IDENT_START_RE = re.compile(r"^[A-Za-z_]")
