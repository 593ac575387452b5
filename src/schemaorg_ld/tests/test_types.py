from schemaorg_ld.common.types import ValueKind, value_kind, is_blank
from schemaorg_ld.types import Person


def test_value_kind():
    assert value_kind(None) is ValueKind.ABSENT
    assert value_kind("") is ValueKind.STRING
    assert value_kind([]) is ValueKind.SEQUENCE
    assert value_kind(()) is ValueKind.SEQUENCE
    assert value_kind({}) is ValueKind.MAPPING
    assert value_kind(Person(name="Ada")) is ValueKind.ENTITY
    assert value_kind(3) is ValueKind.SCALAR
    assert value_kind(False) is ValueKind.SCALAR


def test_is_blank():
    for blank in (None, "", "   ", [], (), {}):
        assert is_blank(blank), blank
    for value in ("x", 0, 0.0, False, [None], {"a": 1}, Person(name="Ada")):
        assert not is_blank(value), value
