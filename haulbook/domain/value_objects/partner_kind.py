"""Partner kind value object."""

from enum import Enum

from haulbook.domain.exceptions import InvalidPartnerKindError


class PartnerKind(str, Enum):
    """The three kinds of business partner tracked by the ledger."""

    SITE = "site"  # Supply site (mine, quarry)
    BUYER = "buyer"
    HAULER = "hauler"  # Truck driver / carrier

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"PartnerKind.{self.name}"

    @property
    def label(self) -> str:
        """Human readable label used in operator-facing messages."""
        return self.value.capitalize()

    @classmethod
    def from_string(cls, value: str) -> "PartnerKind":
        """
        Create PartnerKind from string value.

        Args:
            value: Kind name (case-insensitive), e.g. "site"

        Returns:
            PartnerKind enum value

        Raises:
            InvalidPartnerKindError: If the value is not a known kind
        """
        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError):
            raise InvalidPartnerKindError(str(value))
