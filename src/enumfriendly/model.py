"""
Core Variant Model

Defines how a host enum member is seen by every EnumFriendly operation.

These are pure data classes representing:
    - Backing (the Backed / Unbacked tagged union)
    - VariantRecord (one declared member: name + backing)

ARCHITECTURAL RULE:
    Every operation that works on "values" goes through effective_value().
    Nothing else is allowed to look at member.value directly.

    Backed hosts:   effective value = payload (member.value)
    Unbacked hosts: effective value = member.name
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from enumfriendly.labels import to_readable


Payload = Union[str, int]


@dataclass(frozen=True)
class Backed:
    """
    Tag for a member that carries a payload.

    Properties:
        payload: The string or integer value declared for the member
    """

    payload: Payload


@dataclass(frozen=True)
class Unbacked:
    """
    Tag for a member without a payload.

    The member's name stands in for the payload everywhere.
    """

    pass


Backing = Union[Backed, Unbacked]


def is_backed_type(enum_cls: type) -> bool:
    """
    Decide the shape of a host enum.

    A host is backed when it mixes in ``str`` or ``int`` (StrEnum, IntEnum,
    ``class X(str, Enum)``). Every other Enum is unbacked: its member values
    are opaque (usually ``enum.auto()``) and never used.
    """
    return issubclass(enum_cls, (str, int))


def backing_of(member: Enum) -> Backing:
    """Return the Backed/Unbacked tag for a single member."""
    if is_backed_type(type(member)):
        return Backed(payload=member.value)
    return Unbacked()


@dataclass(frozen=True)
class VariantRecord:
    """
    Read-only view of one declared member.

    Properties:
        name:
            Declaration identifier (e.g. "PENDING_APPROVAL")

        backing:
            Backed(payload) or Unbacked()

    Derived:
        effective_value: payload, or name when unbacked
        label: readable label computed from name
    """

    name: str
    backing: Backing

    @property
    def effective_value(self) -> Payload:
        if isinstance(self.backing, Backed):
            return self.backing.payload
        return self.name

    @property
    def label(self) -> str:
        return to_readable(self.name)


def variant_records(enum_cls: type) -> List[VariantRecord]:
    """
    Build one VariantRecord per member, in declaration order.

    Iterating an Enum class skips aliases, so duplicated payloads never show
    up here.
    """
    return [VariantRecord(name=member.name, backing=backing_of(member)) for member in enum_cls]


def effective_value(member: Enum) -> Payload:
    """
    The value used wherever "the enum's value" is requested.

    Returns the payload for backed hosts and the name for unbacked hosts.
    """
    return VariantRecord(name=member.name, backing=backing_of(member)).effective_value
