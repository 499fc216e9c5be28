"""Tests for message records."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from syslogparser.models import Message, StructuredDataElement


def make_message(**overrides) -> Message:
    fields = {
        "prival": 165,
        "version": 1,
        "timestamp": datetime(2003, 10, 11, 22, 14, 15, 3000, tzinfo=timezone.utc),
        "hostname": "mymachine.example.com",
        "app_name": "evntslog",
        "procid": None,
        "msgid": "ID47",
    }
    fields.update(overrides)
    return Message(**fields)


class TestMessage:
    def test_facility_and_severity_derived(self) -> None:
        """Test facility and severity are derived from PRIVAL."""
        message = make_message(prival=165)

        assert message.facility == 20
        assert message.severity == 5

    def test_names(self) -> None:
        """Test human-readable facility and severity names."""
        message = make_message(prival=34)

        assert message.facility_name == "auth"
        assert message.severity_name == "crit"

    def test_local_facility_names(self) -> None:
        """Test names for the highest facility and severity."""
        assert make_message(prival=191).facility_name == "local7"
        assert make_message(prival=191).severity_name == "debug"

    def test_immutable(self) -> None:
        """Test messages cannot be modified."""
        message = make_message()

        with pytest.raises(FrozenInstanceError):
            message.hostname = "other"  # type: ignore[misc]

    def test_has_bom(self) -> None:
        """Test detection of a leading byte order mark."""
        assert make_message(msg="\ufeffhello").has_bom is True
        assert make_message(msg="hello").has_bom is False
        assert make_message(msg=None).has_bom is False

    def test_element_lookup(self) -> None:
        """Test looking up structured data by SD-ID."""
        first = StructuredDataElement("origin", {"ip": "192.0.2.1"})
        second = StructuredDataElement("meta", {"sequenceId": "1"})
        message = make_message(structured_data=(first, second))

        assert message.element("meta") is second
        assert message.element("timeQuality") is None
        assert make_message().element("meta") is None

    def test_hashable(self) -> None:
        """Test messages with structured data can be hashed."""
        element = StructuredDataElement("origin", {"ip": "192.0.2.1"})
        message = make_message(structured_data=(element,))

        assert hash(message) == hash(make_message(structured_data=(element,)))


class TestStructuredDataElement:
    def test_enterprise_id(self) -> None:
        """Test splitting an SD-ID with an enterprise number."""
        element = StructuredDataElement("exampleSDID@32473")

        assert element.name == "exampleSDID"
        assert element.enterprise_number == "32473"

    def test_registered_id(self) -> None:
        """Test an SD-ID without an enterprise number."""
        element = StructuredDataElement("timeQuality")

        assert element.name == "timeQuality"
        assert element.enterprise_number is None

    def test_params_read_only(self) -> None:
        """Test params cannot be modified."""
        element = StructuredDataElement("x@1", {"a": "1"})

        with pytest.raises(TypeError):
            element.params["a"] = "2"  # type: ignore[index]

    def test_params_copied(self) -> None:
        """Test params are copied from the given mapping."""
        params = {"a": "1"}
        element = StructuredDataElement("x@1", params)
        params["a"] = "2"

        assert element.params == {"a": "1"}

    def test_equality(self) -> None:
        """Test elements compare by id and params."""
        assert StructuredDataElement("x@1", {"a": "1"}) == StructuredDataElement("x@1", {"a": "1"})
        assert StructuredDataElement("x@1", {"a": "1"}) != StructuredDataElement("x@1", {"a": "2"})
