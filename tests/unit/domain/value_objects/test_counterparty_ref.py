"""Unit tests for CounterpartyRef value object."""

import pytest

from haulbook.domain.value_objects.counterparty_ref import CounterpartyRef


class TestCounterpartyRef:
    """Test CounterpartyRef creation and equality."""

    def test_for_partner_renders_id_as_text(self):
        ref = CounterpartyRef.for_partner("site", 42)
        assert ref.kind == "site"
        assert ref.id == "42"

    def test_equality_is_by_kind_and_id(self):
        """Same id under another kind is a different counterparty."""
        assert CounterpartyRef("site", "1") == CounterpartyRef.for_partner("site", 1)
        assert CounterpartyRef("site", "1") != CounterpartyRef("buyer", "1")

    @pytest.mark.parametrize("kind,ref_id", [("", "1"), ("site", "")])
    def test_rejects_empty_parts(self, kind, ref_id):
        with pytest.raises(ValueError):
            CounterpartyRef(kind=kind, id=ref_id)

    def test_str(self):
        assert str(CounterpartyRef("cash", "main")) == "cash:main"
