"""Unit tests for PartnerKind value object."""

import pytest

from haulbook.domain.exceptions import InvalidPartnerKindError
from haulbook.domain.value_objects.fusion_snapshot import TripLinkField
from haulbook.domain.value_objects.partner_kind import PartnerKind


class TestPartnerKind:
    """Test PartnerKind parsing and labels."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("site", PartnerKind.SITE),
            ("Buyer", PartnerKind.BUYER),
            ("  HAULER ", PartnerKind.HAULER),
        ],
    )
    def test_from_string(self, value, expected):
        """Test parsing is case- and whitespace-insensitive."""
        assert PartnerKind.from_string(value) is expected

    def test_from_string_rejects_unknown_kind(self):
        """Test unknown kinds raise a domain error."""
        with pytest.raises(InvalidPartnerKindError) as exc_info:
            PartnerKind.from_string("truck")

        assert exc_info.value.code == "INVALID_PARTNER_KIND"
        assert "truck" in exc_info.value.message

    def test_label(self):
        """Test operator-facing label."""
        assert PartnerKind.SITE.label == "Site"
        assert PartnerKind.HAULER.label == "Hauler"

    def test_str_is_value(self):
        """Test str() gives the stored value."""
        assert str(PartnerKind.BUYER) == "buyer"


class TestTripLinkField:
    """Test the trip column chosen per partner kind."""

    def test_for_kind(self):
        assert TripLinkField.for_kind(PartnerKind.SITE) is TripLinkField.SITE
        assert TripLinkField.for_kind(PartnerKind.BUYER) is TripLinkField.BUYER
        assert TripLinkField.for_kind(PartnerKind.HAULER) is TripLinkField.CONDUCTOR
