from .exceptions import (
    SlackRequestException,
    ConfigurationException,
    AuthenticationException,
    GenerationException,
    GenerationTimeoutException,
    DeliveryException
)

__all__ = [
    "SlackRequestException",
    "ConfigurationException",
    "AuthenticationException",
    "GenerationException",
    "GenerationTimeoutException",
    "DeliveryException"
]
