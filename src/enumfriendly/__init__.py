"""
EnumFriendly Package

Derived operations for closed enumerations: labels, soft coercion,
membership tests, filtering, export and random selection.

ARCHITECTURAL GUARANTEE:
------------------------
This package holds ZERO state of its own.

Every operation is recomputed from the host enum's declared members,
in declaration order, on every call.
"""

from enumfriendly.analyzer import EnumReport, analyze_enum
from enumfriendly.friendly import EnumFriendly
from enumfriendly.labels import to_readable
from enumfriendly.model import Backed, Unbacked, VariantRecord

__version__ = "0.1.0"

__all__ = [
    "EnumFriendly",
    "EnumReport",
    "analyze_enum",
    "to_readable",
    "Backed",
    "Unbacked",
    "VariantRecord",
]
