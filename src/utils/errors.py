"""
Error taxonomy for the messenger relay.

Only ``ConfigurationError`` is fatal (raised at cold start). Everything else
is raised while handling a single record and contained by the dispatcher.
"""


class MessengerError(Exception):
    """Base class for relay errors."""


class ConfigurationError(MessengerError, RuntimeError):
    """Required configuration is missing or invalid."""


class ParseError(MessengerError):
    """Record payload is absent or not valid JSON."""


class ValidationError(MessengerError):
    """Payload parsed but a required field is missing or empty."""


class DeliveryFailure(MessengerError):
    """Slack webhook delivery did not succeed."""


class NoDestinationError(DeliveryFailure):
    """Channel has no webhook configured. Handled like any delivery failure."""


class FallbackFailure(MessengerError):
    """Publishing to the fallback SNS topic failed."""
