"""
Exception hierarchy for AdCloner.

Operation callers only ever see ConfigurationError (at startup) or one of the
two operation errors. The remote/parse/validation errors are internal causes
that the extractor and optimizer log and re-raise as ExtractionError or
OptimizationError.
"""


class AdClonerError(Exception):
    """Base class for all AdCloner errors."""


class ConfigurationError(AdClonerError):
    """Required configuration (the OpenAI credential) is missing."""


class RemoteCallError(AdClonerError):
    """The AI provider call failed (network, auth, quota, server error)."""


class MalformedResponseError(AdClonerError):
    """The AI provider returned something that is not JSON."""


class SchemaValidationError(AdClonerError):
    """The response parsed as JSON but is not a valid listing."""


class ExtractionError(AdClonerError):
    """Extracting a listing from a URL failed."""


class OptimizationError(AdClonerError):
    """Optimizing a listing failed."""
