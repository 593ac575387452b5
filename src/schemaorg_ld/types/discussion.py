from typing import List, Optional, Union

from schemaorg_ld.model.base import SchemaEntity
from schemaorg_ld.registry import Registry
from .common import Count, Url
from .organization import Organization
from .person import Person


@Registry.register
class InteractionCounter(SchemaEntity):
    """interaction_type: a schema.org action URL, e.g. https://schema.org/LikeAction"""
    interaction_type: Url
    user_interaction_count: Count


@Registry.register
class Comment(SchemaEntity):
    author: Union[Person, Organization]
    text: str
    date_published: Optional[str] = None
    url: Optional[Url] = None


@Registry.register
class DiscussionForumPosting(SchemaEntity):
    headline: str
    author: Union[Person, Organization]
    text: Optional[str] = None
    date_published: Optional[str] = None
    url: Optional[Url] = None
    comment: List[Comment] = []
    interaction_statistic: List[InteractionCounter] = []
