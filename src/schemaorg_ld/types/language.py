from typing import Optional

from schemaorg_ld.model.base import SchemaEntity
from schemaorg_ld.registry import Registry


@Registry.register
class Language(SchemaEntity):
    name: str
    alternate_name: Optional[str] = None
