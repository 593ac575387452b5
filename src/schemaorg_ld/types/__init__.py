"""
The schema.org types shipped with schemaorg_ld. Importing this package
registers every type with the Registry.
"""

from .place import Place, PostalAddress
from .person import Person
from .organization import CollegeOrUniversity, ContactPoint, Organization
from .commerce import AggregateOffer, Offer, Product
from .website import SearchAction, WebSite
from .lists import BreadcrumbList, ItemList, ListItem
from .event import Event
from .language import Language
from .discussion import Comment, DiscussionForumPosting, InteractionCounter

__all__ = [
    "Place", "PostalAddress",
    "Person",
    "CollegeOrUniversity", "ContactPoint", "Organization",
    "AggregateOffer", "Offer", "Product",
    "SearchAction", "WebSite",
    "BreadcrumbList", "ItemList", "ListItem",
    "Event",
    "Language",
    "Comment", "DiscussionForumPosting", "InteractionCounter",
]
