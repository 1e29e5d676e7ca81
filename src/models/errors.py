# src/models/errors.py

"""Error taxonomy for the marketplace core.

Input defects raise :class:`ValidationError`. Description suggestion
failures are tagged with an explicit :class:`SuggestionErrorKind` when the
raw upstream failure is classified, so callers branch on ``kind`` rather
than on message text.
"""

from enum import Enum


class MarketplaceError(Exception):
    """Base class for all marketplace errors."""


class ValidationError(MarketplaceError):
    """User-correctable input defects, reported together."""

    def __init__(
        self,
        errors: dict[str, str],
        message: str | None = None,
    ) -> None:
        self.errors = dict(errors)
        if message is None:
            message = (
                "Please fill in all required fields correctly: "
                f"{', '.join(self.errors.values())}."
            )
        super().__init__(message)

    @property
    def fields(self) -> list[str]:
        """Names of the failing fields in reporting order."""
        return list(self.errors)


class DuplicateProductError(MarketplaceError):
    """A product with the same id is already in the catalog."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(f"Product id '{product_id}' already exists")


class SuggestionErrorKind(str, Enum):
    """Classified outcome of a failed description suggestion."""

    CONFIGURATION = "configuration"
    AUTHENTICATION = "authentication"
    EMPTY_RESPONSE = "empty_response"
    TRANSIENT = "transient"


class SuggestionError(MarketplaceError):
    """Base class for description suggestion failures."""

    kind: SuggestionErrorKind = SuggestionErrorKind.TRANSIENT

    @property
    def retryable(self) -> bool:
        """Whether the user should be invited to try again."""
        return self.kind in (
            SuggestionErrorKind.EMPTY_RESPONSE,
            SuggestionErrorKind.TRANSIENT,
        )


class ConfigurationError(SuggestionError):
    """No credential is available for the suggestion service."""

    kind = SuggestionErrorKind.CONFIGURATION


class AuthenticationError(SuggestionError):
    """The upstream rejected the configured credential."""

    kind = SuggestionErrorKind.AUTHENTICATION


class EmptyResponseError(SuggestionError):
    """The upstream answered without usable text."""

    kind = SuggestionErrorKind.EMPTY_RESPONSE


class TransientError(SuggestionError):
    """Network, rate-limit or malformed-response failure."""

    kind = SuggestionErrorKind.TRANSIENT
