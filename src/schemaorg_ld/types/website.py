from typing import Optional

from pydantic import field_validator

from schemaorg_ld.model.base import SchemaEntity
from schemaorg_ld.registry import Registry
from .common import Url


@Registry.register
class SearchAction(SchemaEntity):
    """
    Sitelinks search box action.

    target: URL template, e.g. https://example.com/search?q={search_term_string}
    query_input: serialized as "query-input", e.g. "required name=search_term_string"
    """
    target: Url
    query_input: str

    @field_validator("query_input")
    @classmethod
    def _check_query_input(cls, value: str) -> str:
        if "required name=" not in value:
            raise ValueError("query_input must declare a 'required name=' placeholder")
        return value


@Registry.register
class WebSite(SchemaEntity):
    name: Optional[str] = None
    url: Url
    potential_action: Optional[SearchAction] = None
