"""
Serialization helpers for EnumFriendly hosts.

Encodes the exported mappings as JSON or YAML text. The mappings themselves
are built by the mixin (to_dict, to_json_dict, to_typescript); this module
only turns them into strings and keeps the structure stable and explicit.

JSON:  to_dict()       -> {"pending": "PENDING", ...}   (value -> name)
YAML:  to_json_dict()  -> PENDING: pending              (name -> value)
"""
from __future__ import annotations

import json
from typing import Any

import yaml


def enum_to_json(enum_cls: Any, **options: Any) -> str:
    """
    JSON-encode the value -> name mapping of a host enum.

    Keyword arguments go straight to json.dumps. Integer payloads become
    JSON object keys, so they are written as strings ({"1": "PENDING"}).
    """
    return json.dumps(enum_cls.to_dict(), **options)


def enum_to_yaml(enum_cls: Any, **options: Any) -> str:
    """
    YAML-encode the name -> value mapping of a host enum.

    Declaration order is kept unless the caller passes sort_keys=True.
    """
    options.setdefault("sort_keys", False)
    return yaml.safe_dump(enum_cls.to_json_dict(), **options)


def typescript_to_json(enum_cls: Any, **options: Any) -> str:
    """JSON-encode the to_typescript() description for an external generator."""
    return json.dumps(enum_cls.to_typescript(), **options)
