from typing import List, Literal, Optional, Union

from schemaorg_ld.model.base import SchemaEntity
from schemaorg_ld.registry import Registry
from .common import Count, Position, Url


@Registry.register
class ListItem(SchemaEntity):
    """One entry of a BreadcrumbList or ItemList; `item` is a URL or any entity."""
    position: Position
    name: Optional[str] = None
    item: Optional[Union[Url, SchemaEntity]] = None


@Registry.register
class BreadcrumbList(SchemaEntity):
    item_list_element: List[ListItem]


@Registry.register
class ItemList(SchemaEntity):
    item_list_element: List[ListItem] = []
    item_list_order: Optional[Literal["Ascending", "Descending", "Unordered"]] = None
    number_of_items: Optional[Count] = None
