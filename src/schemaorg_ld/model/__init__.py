from .base import SchemaEntity
from schemaorg_ld.common.types import SerializableEntity

__all__ = [
    "SchemaEntity",
    "SerializableEntity",
]
