"""Errors raised across the analysis boundary."""


class TransportError(Exception):
    """The completion service could not produce a reply.

    Covers network failures, rejected credentials, non-success responses,
    timeouts and empty replies. This is the only error ``CVAnalyzer.analyze``
    lets through to its caller.
    """


class ConfigurationMissingError(TransportError):
    """Required configuration (e.g. the API key) is absent at call time."""
