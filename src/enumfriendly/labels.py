"""
Readable labels for enum member names.

PENDING_APPROVAL -> Pending Approval
"""

from typing import Tuple


LABEL_SEPARATORS: Tuple[str, ...] = ("_", "-")


def to_readable(key: str) -> str:
    """
    Convert a member name into a title-cased, space-separated label.

    The name is lower-cased, every separator becomes a space, and the first
    character of each space-separated word is upper-cased. Runs of spaces are
    kept as they are.

    Examples:
        to_readable("PENDING_APPROVAL")  -> "Pending Approval"
        to_readable("user_active")       -> "User Active"
        to_readable("HTTP2_ENABLED")     -> "Http2 Enabled"
    """
    text = key.lower()
    for sep in LABEL_SEPARATORS:
        text = text.replace(sep, " ")
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))
