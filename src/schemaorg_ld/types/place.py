from typing import Optional

from schemaorg_ld.model.base import SchemaEntity
from schemaorg_ld.registry import Registry
from .common import Url


@Registry.register
class PostalAddress(SchemaEntity):
    street_address: Optional[str] = None
    address_locality: Optional[str] = None
    address_region: Optional[str] = None
    postal_code: Optional[str] = None
    address_country: Optional[str] = None


@Registry.register
class Place(SchemaEntity):
    name: Optional[str] = None
    address: Optional[PostalAddress] = None
    url: Optional[Url] = None
