# schemaorg_ld/serialization/jsonld.py
from __future__ import annotations
import json
import logging
from typing import Any, Dict, Optional

from schemaorg_ld.common.naming import translate_attribute_name
from schemaorg_ld.config import pretty_default
from schemaorg_ld.common.types import (
    JSONStruct, SerializableEntity, ValueKind, is_blank, value_kind,
)

logger = logging.getLogger(__name__)

SCHEMA_CONTEXT = "http://schema.org"
ROOT_ATTR: Dict[str, str] = {"@context": SCHEMA_CONTEXT}

SCRIPT_OPEN = '<script type="application/ld+json">'
SCRIPT_CLOSE = "</script>"


def object_to_json_struct(obj: Any) -> Optional[JSONStruct]:
    if obj is None:
        return None
    return serialize_struct(obj)


def _transform_value(value: Any) -> Any:
    kind = value_kind(value)
    if kind is ValueKind.ENTITY:
        return object_to_json_struct(value)
    if kind is ValueKind.SEQUENCE:
        return [
            object_to_json_struct(v) if value_kind(v) is ValueKind.ENTITY else v
            for v in value
        ]
    return value


def attrs_and_values(entity: SerializableEntity) -> JSONStruct:
    """
    Translated key -> transformed value for every declared attribute of `entity`,
    in declaration order. Blank values are still present here.
    """
    return {
        translate_attribute_name(identifier): _transform_value(value)
        for identifier, value in entity.attributes()
    }


def serialize_struct(entity: SerializableEntity, as_root: bool = False) -> JSONStruct:
    """
    Serialize a schema entity into a JSON compatible dict.

    Args:
        entity: any object implementing SerializableEntity
        as_root: prepend the "@context" declaration

    Returns:
        {"@context"?, "@type", <attributes in declaration order>}, blank values removed

    Notes:
        - nested entities never carry "@context"
        - cyclic entity graphs recurse until RecursionError
    """
    merged = {"@type": entity.type_name(), **attrs_and_values(entity)}
    struct = {k: v for k, v in merged.items() if not is_blank(v)}
    if not as_root:
        return struct
    doc = dict(ROOT_ATTR)
    doc.update((k, v) for k, v in struct.items() if k not in ROOT_ATTR)
    return doc


def render(structure: JSONStruct, pretty: bool = False) -> str:
    if pretty:
        return json.dumps(structure, indent=2, ensure_ascii=False)
    return json.dumps(structure, separators=(",", ":"), ensure_ascii=False)


def to_json(entity: SerializableEntity, pretty: bool = False, as_root: bool = False) -> str:
    return render(serialize_struct(entity, as_root=as_root), pretty=pretty)


def to_script_tag(entity: SerializableEntity, pretty: Optional[bool] = None, as_root: bool = True) -> str:
    """
    Wrap the document of `entity` (the root document unless as_root=False) in a JSON-LD script element.
    With pretty=None the formatting follows the configured default.
    """
    if pretty is None:
        pretty = pretty_default()
    logger.debug("Rendering %s as JSON-LD script tag (pretty=%s)", entity.type_name(), pretty)
    return SCRIPT_OPEN + "\n" + to_json(entity, pretty=pretty, as_root=as_root) + "\n" + SCRIPT_CLOSE
