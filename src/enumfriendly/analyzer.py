"""
Enum Analyzer: definition report for EnumFriendly hosts.

This module inspects a host enum and reports:
    - Shape (string-backed, integer-backed, unbacked)
    - Aliases created by duplicated payloads
    - Names that render to the same readable label
    - Whether the host provides descriptions

IMPORTANT: This is read-only. It never modifies the enum.
Problems are collected as warnings; nothing here raises for a valid Enum.
"""

from __future__ import annotations

import warnings
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Set

from enumfriendly.friendly import EnumFriendly
from enumfriendly.labels import to_readable
from enumfriendly.model import Backed, backing_of, is_backed_type


SHAPE_STRING = "string"
SHAPE_INTEGER = "integer"
SHAPE_UNBACKED = "unbacked"


@dataclass
class EnumReport:
    """Analysis report for a single host enum."""

    type_name: str
    shape: str = SHAPE_UNBACKED
    total_variants: int = 0

    # alias name -> canonical member name
    aliases: Dict[str, str] = field(default_factory=dict)
    # readable label -> member names rendering to it
    label_collisions: Dict[str, List[str]] = field(default_factory=dict)
    payload_types: Set[str] = field(default_factory=set)
    has_description: bool = False

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def _shape_of(enum_cls: type) -> str:
    if not is_backed_type(enum_cls):
        return SHAPE_UNBACKED
    if issubclass(enum_cls, str):
        return SHAPE_STRING
    return SHAPE_INTEGER


def analyze_enum(enum_cls: type, emit_warnings: bool = False) -> EnumReport:
    """
    Inspect a host enum definition.

    Args:
        enum_cls: Enum subclass to inspect
        emit_warnings: Also issue every report warning via warnings.warn

    Returns:
        EnumReport with metrics and warnings

    Raises:
        TypeError: If enum_cls is not an Enum subclass
    """
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
        raise TypeError(f"Expected an Enum subclass, got {enum_cls!r}")

    report = EnumReport(type_name=enum_cls.__name__)
    report.shape = _shape_of(enum_cls)
    members = list(enum_cls)
    report.total_variants = len(members)

    # Aliases: extra names bound to an already-declared member
    for alias_name, member in enum_cls.__members__.items():
        if alias_name != member.name:
            report.aliases[alias_name] = member.name

    labels: Dict[str, List[str]] = defaultdict(list)
    for member in members:
        labels[to_readable(member.name)].append(member.name)
        backing = backing_of(member)
        if isinstance(backing, Backed):
            report.payload_types.add(type(backing.payload).__name__)
    report.label_collisions = {label: names for label, names in labels.items() if len(names) > 1}

    report.has_description = (
        issubclass(enum_cls, EnumFriendly)
        and getattr(enum_cls, "description") is not EnumFriendly.description
    )

    # =========================================================================
    # WARNING FLAGS
    # =========================================================================

    if report.total_variants == 0:
        report.add_warning(f"{report.type_name} declares no members")

    for alias_name, canonical in report.aliases.items():
        report.add_warning(
            f"Duplicate payload: {alias_name} is an alias of {canonical} and is ignored"
        )

    for label, names in report.label_collisions.items():
        report.add_warning(
            f"Label collision: {', '.join(names)} all render as '{label}'"
        )

    if emit_warnings:
        for msg in report.warnings:
            warnings.warn(msg, UserWarning)

    return report
