from typing import List, Optional, Union

from schemaorg_ld.model.base import SchemaEntity
from schemaorg_ld.registry import Registry
from .commerce import AggregateOffer, Offer
from .common import Url
from .organization import Organization
from .person import Person
from .place import Place


@Registry.register
class Event(SchemaEntity):
    name: str
    start_date: str
    end_date: Optional[str] = None
    description: Optional[str] = None
    location: Optional[Place] = None
    organizer: Optional[Union[Organization, Person]] = None
    performer: List[Union[Person, Organization]] = []
    offers: List[Union[Offer, AggregateOffer]] = []
    image: List[Url] = []
    url: Optional[Url] = None
    event_status: Optional[Url] = None
    event_attendance_mode: Optional[Url] = None
