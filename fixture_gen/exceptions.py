"""Custom exception hierarchy for fixture-gen."""


class FixtureGenError(Exception):
    """Base exception for all fixture-gen errors."""


class EmptyChoiceError(FixtureGenError, ValueError):
    """Raised when a selection is asked to pick from no candidates."""


class PatternError(FixtureGenError, ValueError):
    """Raised when a pattern template contains an invalid token.

    Parameters
    ----------
    template : str
        The template being expanded.
    position : int
        Index of the offending ``^`` inside the template.
    """

    def __init__(self, template: str, position: int) -> None:
        self.template = template
        self.position = position
        token = template[position : position + 2]
        super().__init__(f"invalid pattern token {token!r} at position {position} in {template!r}")


class ConfigurationError(FixtureGenError):
    """Raised when configuration is invalid or missing."""
