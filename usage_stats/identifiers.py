"""
identifiers.py - Canonical keys for free-text names.

Species, item, ability, nature and move names arrive as display text
("Light Ball", "Mr. Mime"). Every aggregate is keyed by the normalized id.
"""
import re

NON_ID_RE = re.compile(r"[^a-z0-9]+")


def to_id(text: str) -> str:
    """
    Lower-case text and strip everything outside [a-z0-9].

    Names that collapse to the same id are treated as the same entity.

    Args:
        text (str): Display name.

    Returns:
        str: Normalized id (may be empty).
    """
    return NON_ID_RE.sub("", text.lower())
