from typing import List, Optional

from schemaorg_ld.model.base import SchemaEntity
from schemaorg_ld.registry import Registry
from .common import Url
from .person import Person
from .place import Place, PostalAddress


@Registry.register
class ContactPoint(SchemaEntity):
    telephone: Optional[str] = None
    contact_type: Optional[str] = None
    email: Optional[str] = None
    area_served: List[str] = []
    available_language: List[str] = []


@Registry.register
class Organization(SchemaEntity):
    name: str
    legal_name: Optional[str] = None
    url: Optional[Url] = None
    logo: Optional[Url] = None
    email: Optional[str] = None
    telephone: Optional[str] = None
    slogan: Optional[str] = None
    founding_date: Optional[str] = None
    founder: Optional[Person] = None
    founding_location: Optional[Place] = None
    address: Optional[PostalAddress] = None
    contact_point: List[ContactPoint] = []
    same_as: List[Url] = []


@Registry.register
class CollegeOrUniversity(Organization):
    pass
