# schemaorg_ld/model/base.py
from __future__ import annotations
from typing import Any, ClassVar, Iterator, Optional, Tuple
from pydantic import BaseModel, ConfigDict

from schemaorg_ld.common.naming import translate_attribute_name
from schemaorg_ld.common.types import JSONStruct, unqualified_name
from schemaorg_ld.serialization import jsonld


class SchemaEntity(BaseModel):
    """
    Base class of all schema.org types.

    Declared fields are the serialized attributes, in declaration order.
    Fields declared with `exclude=True` are bookkeeping and never serialized.
    Construction validates the attribute values; instances are immutable.

    Example:
        class Event(SchemaEntity):
            name: str
            start_date: Optional[str] = None

        Event(name="Concert").to_json_struct()
        # {"@type": "Event", "name": "Concert"}
    """
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=translate_attribute_name,
    )

    # overrides the class name as "@type" when set
    schema_type: ClassVar[Optional[str]] = None

    def type_name(self) -> str:
        return self.schema_type or unqualified_name(type(self).__qualname__)

    def attributes(self) -> Iterator[Tuple[str, Any]]:
        for name, field in type(self).model_fields.items():
            if field.exclude:
                continue
            yield name, getattr(self, name)

    def to_json_struct(self) -> JSONStruct:
        return jsonld.serialize_struct(self)

    def to_json(self, pretty: bool = False, as_root: bool = False) -> str:
        return jsonld.to_json(self, pretty=pretty, as_root=as_root)

    def to_json_ld(self, pretty: bool = False) -> str:
        return jsonld.to_script_tag(self, pretty=pretty)

    def __str__(self) -> str:
        return jsonld.to_script_tag(self)
