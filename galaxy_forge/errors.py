"""Errors raised while generating a galaxy.

Generation is all-or-nothing: any of these propagates to the caller, which
must discard the in-progress galaxy.
"""


class GalaxyGenerationError(Exception):
    """Base class for fatal galaxy generation failures."""

    def __init__(self, message: str):
        """Initialize generation error.

        Args:
            message: Human-readable error message
        """
        self.message = message
        super().__init__(message)


class ConfigurationError(GalaxyGenerationError):
    """Raised when the galaxy configuration cannot be honoured.

    Covers unsupported or disabled topologies and malformed custom layouts.
    Always raised before any star is created.
    """


class PreconditionError(GalaxyGenerationError):
    """Raised when a collaborator cannot supply what generation needs.

    The main case is a star name pool smaller than the number of stars.
    """
