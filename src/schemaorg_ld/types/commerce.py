from typing import List, Optional, Union

from schemaorg_ld.model.base import SchemaEntity
from schemaorg_ld.registry import Registry
from .common import Count, Price, Url
from .organization import Organization


@Registry.register
class Offer(SchemaEntity):
    """
    An offer to sell something.

    price: numeric price, currency given separately as ISO 4217 code
    availability: a schema.org ItemAvailability URL, e.g. https://schema.org/InStock
    """
    name: Optional[str] = None
    price: Optional[Price] = None
    price_currency: Optional[str] = None
    availability: Optional[Url] = None
    url: Optional[Url] = None
    valid_from: Optional[str] = None


@Registry.register
class AggregateOffer(SchemaEntity):
    low_price: Price
    high_price: Optional[Price] = None
    offer_count: Optional[Count] = None
    price_currency: Optional[str] = None
    offers: List[Offer] = []


@Registry.register
class Product(SchemaEntity):
    name: str
    description: Optional[str] = None
    image: List[Url] = []
    url: Optional[Url] = None
    sku: Optional[str] = None
    brand: Optional[Organization] = None
    offers: Optional[Union[Offer, AggregateOffer]] = None
