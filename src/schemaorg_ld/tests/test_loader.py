import json

import pytest
import yaml
from pydantic import ValidationError

from schemaorg_ld.loader import load_entity, load_file
from schemaorg_ld.registry import UnknownSchemaTypeError
from schemaorg_ld.serialization.jsonld import serialize_struct
from schemaorg_ld.types import Event, Organization, Person, SearchAction


def test_load_entity(event_document):
    event = load_entity(event_document)
    assert isinstance(event, Event)
    assert event.start_date == "2026-11-01T20:00"
    assert event.location.address.address_locality == "Leipzig"
    assert isinstance(event.performer[0], Person)
    assert isinstance(event.performer[1], Organization)


def test_loaded_entity_serializes_back(event_document):
    doc = serialize_struct(load_entity(event_document), as_root=True)
    assert doc == {
        "@context": "http://schema.org",
        "@type": "Event",
        "name": "Jazz Night",
        "startDate": "2026-11-01T20:00",
        "location": {
            "@type": "Place",
            "name": "Town Hall",
            "address": {"@type": "PostalAddress", "addressLocality": "Leipzig"},
        },
        "performer": [
            {"@type": "Person", "name": "Ada"},
            {"@type": "Organization", "name": "Big Band"},
        ],
    }


def test_load_irregular_key():
    action = load_entity({
        "@type": "SearchAction",
        "target": "https://example.com/?q={q}",
        "query-input": "required name=q",
    })
    assert isinstance(action, SearchAction)
    assert action.query_input == "required name=q"


def test_missing_type():
    with pytest.raises(ValueError):
        load_entity({"name": "Ada"})


def test_unknown_type():
    with pytest.raises(UnknownSchemaTypeError):
        load_entity({"@type": "Spaceship"})


def test_invalid_attributes():
    with pytest.raises(ValidationError):
        load_entity({"@type": "Person", "name": "Ada", "url": "not a url"})


def test_load_yaml_and_json_files(tmp_path, event_document):
    yaml_path = tmp_path / "event.yaml"
    yaml_path.write_text(yaml.safe_dump(event_document), encoding="utf-8")
    json_path = tmp_path / "event.json"
    json_path.write_text(json.dumps(event_document), encoding="utf-8")

    assert load_file(yaml_path) == load_file(json_path)
    assert load_file(str(yaml_path)).name == "Jazz Night"


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "event.txt"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError):
        load_file(path)


def test_unquoted_yaml_dates_become_iso_strings(tmp_path):
    path = tmp_path / "event.yaml"
    path.write_text(
        '"@type": Event\n'
        "name: Concert\n"
        "start_date: 2026-11-01\n"
        "end_date: 2026-11-01 23:30:00\n",
        encoding="utf-8",
    )
    event = load_file(path)
    assert event.start_date == "2026-11-01"
    doc = serialize_struct(event, as_root=True)
    assert doc["startDate"] == "2026-11-01"
    assert doc["endDate"] == "2026-11-01T23:30:00"


def test_nested_dates_are_converted():
    post = load_entity({
        "@type": "DiscussionForumPosting",
        "headline": "Hello",
        "author": {"@type": "Person", "name": "Ada"},
        "comment": [{
            "@type": "Comment",
            "author": {"@type": "Person", "name": "Grace"},
            "text": "Hi!",
            "date_published": yaml.safe_load("2026-01-02"),
        }],
    })
    assert post.comment[0].date_published == "2026-01-02"
