import pytest
from trigger.events import Event, EventName


class TestEvent:
    """Event construction and data access."""

    @pytest.fixture
    def event(self):
        return Event("greet:spanish", {"name": "Chris"})

    def test_has_name(self, event):
        """Test the event exposes its name."""
        assert event.name == "greet"

    def test_has_namespace(self, event):
        """Test the event exposes its namespace."""
        assert event.namespace == "spanish"

    def test_has_full_name(self, event):
        """Test the event exposes its full name."""
        assert event.full_name == "greet:spanish"
        assert event.event_name == EventName("greet:spanish")

    def test_has_data(self, event):
        """Test the event exposes its data."""
        assert event.data == {"name": "Chris"}

    def test_item_access_reads_data(self, event):
        """Test item access reads the payload."""
        assert event["name"] == "Chris"
        assert event["missing"] is None
        assert event.get("missing", "default") == "default"

    def test_data_is_read_only(self, event):
        """Test the payload cannot be modified."""
        with pytest.raises(TypeError):
            event.data["name"] = "Someone else"

    def test_data_is_copied_from_caller(self):
        """Test later changes to the caller's dict are not seen."""
        payload = {"name": "Chris"}
        event = Event("greet", payload)
        payload["name"] = "Changed"
        assert event["name"] == "Chris"

    @pytest.mark.parametrize("data", [None, "not a mapping", 42, ["name", "Chris"]])
    def test_non_mapping_data_becomes_empty(self, data):
        """Test non-mapping data becomes an empty payload."""
        event = Event("greet", data)
        assert dict(event.data) == {}

    def test_missing_data_becomes_empty(self):
        """Test missing data becomes an empty payload."""
        assert dict(Event("greet").data) == {}


def test_wrap_returns_existing_event_unchanged():
    event = Event("greet", {"name": "Chris"})
    assert Event.wrap(event, {"name": "Ignored"}) is event


def test_wrap_builds_event_from_name():
    event = Event.wrap("greet:french", {"name": "Chris"})
    assert isinstance(event, Event)
    assert event.namespace == "french"
    assert event["name"] == "Chris"


def test_event_name_cannot_be_changed_through_event():
    event = Event("greet:spanish")
    with pytest.raises(AttributeError):
        event.event_name.namespace = "french"
    assert event.full_name == "greet:spanish"
