"""
EnumFriendly mixin.

Adds labeling, coercion, membership testing, filtering, export and random
selection to any Enum subclass:

    class Status(EnumFriendly, str, Enum):
        PENDING = "pending"
        IN_PROGRESS = "in_progress"
        COMPLETED = "completed"

    Status.values()              # ['pending', 'in_progress', 'completed']
    Status.coerce_enum("done")   # None
    Status.PENDING.label()       # 'Pending'

Three host shapes are supported:
    - String-backed: mixes in str (or StrEnum)
    - Integer-backed: mixes in int (or IntEnum)
    - Unbacked: plain Enum, the member name acts as its value

ARCHITECTURAL RULE:
    The mixin holds NO state. Every call recomputes from the host's members
    (declaration order, aliases excluded). Nothing is cached.

    Not finding a match is a normal outcome: coercion returns None,
    predicates return False, filters return a possibly-empty list.
"""

import logging
from random import Random, SystemRandom
from typing import Any, Dict, Iterable, List, Optional, Union

from enumfriendly.comparison import contains, values_equal
from enumfriendly.labels import to_readable
from enumfriendly.model import Payload, effective_value, is_backed_type, variant_records
from enumfriendly.serialization import enum_to_json, enum_to_yaml


logger = logging.getLogger(__name__)

DEFAULT_COMMENT_PREFIX = "possible values: "
DEFAULT_GLUE = ","
COMMENT_SEPARATOR = ", "

# SystemRandom draws from the OS and is safe to share between threads
_RNG = SystemRandom()


class EnumFriendly:
    """
    Mixin providing the enum extension contract.

    Must be listed before the data type and the Enum base:
        class Color(EnumFriendly, Enum): ...
        class Status(EnumFriendly, str, Enum): ...
        class Level(EnumFriendly, IntEnum): ...
    """

    # =========================================================================
    # ENUMERATION ACCESSORS
    # =========================================================================

    @classmethod
    def values(cls) -> List[Payload]:
        """
        Effective values of all members, in declaration order.

        Payloads for backed hosts, names for unbacked hosts.
        """
        return [record.effective_value for record in variant_records(cls)]

    @classmethod
    def keys(cls) -> List[str]:
        """Member names, in declaration order."""
        return [member.name for member in cls]

    @classmethod
    def readable(cls) -> List[str]:
        """Readable label for every member, derived from keys()."""
        return [to_readable(key) for key in cls.keys()]

    @classmethod
    def count(cls) -> int:
        """
        Number of declared members (aliases excluded).

        On str-backed hosts this replaces str.count for members too:
        Status.PENDING.count("n") raises TypeError. Use str(member.value).count()
        to count substrings of a payload.
        """
        return len(cls)

    @classmethod
    def is_backed(cls) -> bool:
        """True if the host carries string or integer payloads."""
        return is_backed_type(cls)

    # =========================================================================
    # COERCION
    # =========================================================================

    @classmethod
    def coerce_enum(cls, value: Any) -> Optional["EnumFriendly"]:
        """
        Coerce a member, payload or name into a member of this enum.

        Args:
            value: A member of this enum, a raw value (str/int) or None

        Returns:
            The matching member, or None if nothing matches

        Matching uses strict equality against each member's effective value:
        the payload for backed hosts, the name for unbacked hosts.

        Examples:
            Status.coerce_enum("completed")       -> Status.COMPLETED
            Status.coerce_enum(Status.COMPLETED)  -> Status.COMPLETED
            Status.coerce_enum("done")            -> None
            Color.coerce_enum("RED")              -> Color.RED
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        for member in cls:
            if values_equal(effective_value(member), value, strict=True):
                return member
        logger.debug("No %s member matches %r", cls.__name__, value)
        return None

    @classmethod
    def coerce_value(cls, value: Any) -> Optional[Payload]:
        """
        Like coerce_enum(), but return the effective value of the match.

        A member of this enum yields its effective value without scanning.
        """
        if isinstance(value, cls):
            return effective_value(value)
        member = cls.coerce_enum(value)
        if member is None:
            return None
        return effective_value(member)

    @classmethod
    def from_value_or(cls, value: Any, default: "EnumFriendly") -> "EnumFriendly":
        """
        Coerce value into a member, falling back to default.

        Raises:
            TypeError: If default is not a member of this enum
        """
        if not isinstance(default, cls):
            raise TypeError(f"Default must be a {cls.__name__} member, got {default!r}")
        member = cls.coerce_enum(value)
        if member is None:
            logger.debug("Falling back to %s for %r", default, value)
            return default
        return member

    @classmethod
    def has_value(cls, value: Any, strict: bool = True) -> bool:
        """
        True if value matches one of the effective values.

        strict=False lets numbers and numeric strings match each other,
        so has_value("1", strict=False) is True for a host with payload 1.
        """
        return contains(cls.values(), value, strict)

    # =========================================================================
    # FILTERING
    # =========================================================================

    @classmethod
    def only(cls, names: Iterable[str]) -> List["EnumFriendly"]:
        """Members whose name is in names. Unknown names are ignored."""
        wanted = set(names)
        return [member for member in cls if member.name in wanted]

    @classmethod
    def except_(cls, names: Iterable[str]) -> List["EnumFriendly"]:
        """Members whose name is NOT in names."""
        unwanted = set(names)
        return [member for member in cls if member.name not in unwanted]

    @classmethod
    def only_values(cls, values: Iterable[Any], strict: bool = True) -> List[Payload]:
        """Effective values that appear in values."""
        candidates = list(values)
        return [value for value in cls.values() if contains(candidates, value, strict)]

    @classmethod
    def except_values(cls, values: Iterable[Any], strict: bool = True) -> List[Payload]:
        """Effective values that do NOT appear in values."""
        candidates = list(values)
        return [value for value in cls.values() if not contains(candidates, value, strict)]

    # =========================================================================
    # REPRESENTATION & EXPORT
    # =========================================================================

    @classmethod
    def to_options(cls) -> List[Dict[str, Union[Payload, str]]]:
        """
        Options for UI select widgets, one per member.

        Example:
            Status.to_options()
            # [{"value": "pending", "label": "Pending", "name": "Pending"}, ...]
        """
        options = []
        for record in variant_records(cls):
            readable = record.label
            options.append({
                "value": record.effective_value,
                "label": readable,
                "name": readable,
            })
        return options

    @classmethod
    def to_readable_dict(cls) -> Dict[Payload, str]:
        """Mapping of effective value -> readable label."""
        return {record.effective_value: record.label for record in variant_records(cls)}

    @classmethod
    def to_dict(cls) -> Dict[Payload, str]:
        """Mapping of effective value -> member name."""
        return {record.effective_value: record.name for record in variant_records(cls)}

    @classmethod
    def to_json_dict(cls) -> Dict[str, Payload]:
        """Mapping of member name -> effective value (inverse of to_dict())."""
        return {record.name: record.effective_value for record in variant_records(cls)}

    @classmethod
    def to_json(cls, **options: Any) -> str:
        """
        JSON string of to_dict().

        Keyword arguments are passed to json.dumps (indent, sort_keys, ...).
        """
        return enum_to_json(cls, **options)

    @classmethod
    def to_yaml(cls, **options: Any) -> str:
        """YAML document of to_json_dict(), in declaration order."""
        return enum_to_yaml(cls, **options)

    @classmethod
    def to_typescript(cls) -> Dict[str, Any]:
        """
        Description of the enum for a type-definition generator.

        Returns {"type": <class name>, "values": values()}. This is data,
        not generated source.
        """
        return {
            "type": cls.__name__,
            "values": cls.values(),
        }

    @classmethod
    def comment(cls, prefix: str = DEFAULT_COMMENT_PREFIX) -> str:
        """
        List the possible values, e.g. for a database column comment.

        Status.comment() -> "possible values: pending, in_progress, completed"
        """
        return prefix + cls.implode(COMMENT_SEPARATOR)

    @classmethod
    def implode(cls, glue: str = DEFAULT_GLUE) -> str:
        """Join the effective values with glue."""
        return glue.join(str(value) for value in cls.values())

    # =========================================================================
    # PER-MEMBER OPERATIONS
    # =========================================================================

    def label(self) -> str:
        """Readable label of this member's name."""
        return to_readable(self.name)

    def description(self) -> Optional[str]:
        """
        Extended description of this member.

        Hosts that have descriptions override this method. The default
        returns None.
        """
        return None

    def is_(self, other: Any) -> bool:
        """True if other is, or coerces to, this very member."""
        return type(self).coerce_enum(other) is self

    def in_(self, candidates: Iterable[Any]) -> bool:
        """True if is_() holds for at least one candidate."""
        return any(self.is_(candidate) for candidate in candidates)

    @classmethod
    def random_case(cls, rng: Optional[Random] = None) -> "EnumFriendly":
        """Pick one member uniformly at random."""
        return (rng or _RNG).choice(list(cls))

    @classmethod
    def random(cls, rng: Optional[Random] = None) -> Payload:
        """Pick one effective value uniformly at random."""
        return (rng or _RNG).choice(cls.values())


__all__ = [
    "EnumFriendly",
    "DEFAULT_COMMENT_PREFIX",
    "DEFAULT_GLUE",
    "COMMENT_SEPARATOR",
]
