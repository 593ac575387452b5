from typing import List, Optional

from schemaorg_ld.model.base import SchemaEntity
from schemaorg_ld.registry import Registry
from .common import Url


@Registry.register
class Person(SchemaEntity):
    """A person. `same_as` lists profile URLs (social accounts, Wikipedia...)."""
    name: str
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    url: Optional[Url] = None
    image: Optional[Url] = None
    email: Optional[str] = None
    job_title: Optional[str] = None
    same_as: List[Url] = []
