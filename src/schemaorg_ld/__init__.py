"""
schemaorg_ld - schema.org JSON-LD documents from typed Python objects.
"""

from .model.base import SchemaEntity
from .common.types import SerializableEntity
from .serialization.jsonld import (
    ROOT_ATTR, serialize_struct, attrs_and_values, render, to_json, to_script_tag,
)
from .registry import Registry, UnknownSchemaTypeError
from .config import SchemaOrgConfig, ConfigLoader, load_config, pretty_default
from .loader import load_entity, load_file
from . import types

__version__ = "0.1.0"

__all__ = [
    "SchemaEntity", "SerializableEntity",
    "ROOT_ATTR", "serialize_struct", "attrs_and_values", "render", "to_json", "to_script_tag",
    "Registry", "UnknownSchemaTypeError",
    "SchemaOrgConfig", "ConfigLoader", "load_config", "pretty_default",
    "load_entity", "load_file",
    "types",
]
