"""
Shared attribute types for the schema.org catalogue.
"""

from typing import Annotated, Union
from pydantic import AfterValidator, Field

URL_SCHEMES = ("http://", "https://")


def _check_url(value: str) -> str:
    if not value.startswith(URL_SCHEMES):
        raise ValueError(f"must be an absolute http(s) URL, got {value!r}")
    return value


Url = Annotated[str, AfterValidator(_check_url)]
Count = Annotated[int, Field(ge=0)]
# ints stay ints, 20 is rendered as 20 and not 20.0
Price = Union[Annotated[int, Field(ge=0)], Annotated[float, Field(ge=0)]]
Position = Annotated[int, Field(ge=1)]
