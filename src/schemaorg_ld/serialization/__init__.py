from .jsonld import (
    ROOT_ATTR, SCHEMA_CONTEXT, SCRIPT_OPEN, SCRIPT_CLOSE,
    attrs_and_values, serialize_struct, render, to_json, to_script_tag,
)

__all__ = [
    "ROOT_ATTR", "SCHEMA_CONTEXT", "SCRIPT_OPEN", "SCRIPT_CLOSE",
    "attrs_and_values", "serialize_struct", "render", "to_json", "to_script_tag",
]
