"""Validation of text fields before they are published as tags."""

from __future__ import annotations

import re

from beartype import beartype

HTML_TAG_PATTERN = re.compile(r"<[^>]*>")


@beartype
def is_acceptable(text: str) -> bool:
    """
    Check whether a market field can be published in a tag.

    Args:
        text: Raw field value from the subgraph

    Returns:
        False for blank values or values containing HTML tags, True otherwise
    """
    if not text.strip():
        return False
    return HTML_TAG_PATTERN.search(text) is None
