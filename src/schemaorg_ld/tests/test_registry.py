from typing import ClassVar, Optional

import pytest

from schemaorg_ld.model.base import SchemaEntity
from schemaorg_ld.registry import Registry, UnknownSchemaTypeError
from schemaorg_ld.types import Event, Person


def test_catalogue_is_registered():
    assert Registry.get("Event") is Event
    assert Registry.get("Person") is Person
    assert Registry.contains("WebSite")
    names = [t.__name__ for t in Registry.list()]
    assert names == sorted(names)
    assert "SearchAction" in names


def test_lookup_by_qualified_name():
    assert Registry.get("SchemaDotOrg::Event") is Event
    assert Registry.get("schemaorg_ld.types.Person") is Person


def test_unknown_type():
    with pytest.raises(UnknownSchemaTypeError) as exc:
        Registry.get("Spaceship")
    assert str(exc.value) == "Unknown schema.org type: Spaceship"
    assert isinstance(exc.value, KeyError)


def test_register_with_schema_type_override():
    @Registry.register
    class LocalBusinessEntry(SchemaEntity):
        schema_type: ClassVar[Optional[str]] = "LocalBusiness"
        name: Optional[str] = None

    try:
        assert Registry.get("LocalBusiness") is LocalBusinessEntry
        assert LocalBusinessEntry(name="Bakery").to_json_struct() == {"@type": "LocalBusiness", "name": "Bakery"}
    finally:
        Registry._registry.pop("LocalBusiness", None)


def test_entries_use_registered_name():
    @Registry.register
    class BakeryEntry(SchemaEntity):
        schema_type: ClassVar[Optional[str]] = "Bakery"

    try:
        entries = dict(Registry.entries())
        assert entries["Bakery"] is BakeryEntry
        assert "BakeryEntry" not in entries
        names = [name for name, _ in Registry.entries()]
        assert names == sorted(names)
    finally:
        Registry._registry.pop("Bakery", None)
