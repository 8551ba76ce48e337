"""
Exceptions for projinit.

Cancellation is deliberately absent: a cancelled wizard is a normal outcome
and is reported as "no result", not raised.
"""


class ProjinitError(Exception):
    """Base exception for projinit errors."""

    pass


class WizardConfigurationError(ProjinitError):
    """The wizard was asked to confirm a stage whose list is empty.

    This only happens with a malformed option catalog, so the run is
    terminated instead of guessing a default.
    """

    def __init__(self, message: str, stage: str | None = None):
        super().__init__(message)
        self.stage = stage


class CatalogError(ProjinitError):
    """The option catalog could not be loaded or is malformed."""

    pass


class ValidationError(ProjinitError):
    """A request value failed validation."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.field:
            return f"validation error for {self.field}: {self.message}"
        return self.message
