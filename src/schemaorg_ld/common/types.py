# schemaorg_ld/common/types.py
from __future__ import annotations
import re
from enum import Enum
from typing import Any, Dict, Iterable, List, Protocol, Tuple, Union, runtime_checkable

JSONPrimitive = Union[str, int, float, bool, None]
JSONValue = Union[JSONPrimitive, List[Any], Dict[str, Any]]
JSONStruct = Dict[str, Any]

UNQUALIFIED_NAME_REGEX = re.compile(r"([^.:]+)$")


@runtime_checkable
class SerializableEntity(Protocol):
    """
    Anything that can be written as a schema.org node.

    type_name: the unqualified schema.org type, e.g. "Event"
    attributes: ordered (identifier, value) pairs, in declaration order
    """

    def type_name(self) -> str: ...

    def attributes(self) -> Iterable[Tuple[str, Any]]: ...


class ValueKind(Enum):
    """Coarse classification of an attribute value, used for blank filtering."""
    ABSENT = "absent"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    ENTITY = "entity"
    SCALAR = "scalar"


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def value_kind(value: Any) -> ValueKind:
    if value is None:
        return ValueKind.ABSENT
    if isinstance(value, str):
        return ValueKind.STRING
    if is_sequence(value):
        return ValueKind.SEQUENCE
    if isinstance(value, dict):
        return ValueKind.MAPPING
    if isinstance(value, SerializableEntity):
        return ValueKind.ENTITY
    return ValueKind.SCALAR


def is_blank(value: Any) -> bool:
    """
    True for values that are omitted from serialized output.

    Notes:
        - whitespace-only strings count as blank
        - False and 0 are regular values and are kept
    """
    kind = value_kind(value)
    if kind is ValueKind.ABSENT:
        return True
    if kind is ValueKind.STRING:
        return not value.strip()
    if kind in (ValueKind.SEQUENCE, ValueKind.MAPPING):
        return len(value) == 0
    return False


def unqualified_name(name: str) -> str:
    """Strip namespace, module or enclosing class prefixes: 'Namespace::Event' -> 'Event'."""
    match = UNQUALIFIED_NAME_REGEX.search(name)
    return match.group(1) if match else name
