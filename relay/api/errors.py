"""Error kinds raised while relaying a prompt to the worker assistant.

Every request-time failure is a RelayError subclass so the handler can log
which step failed. Clients always see the same generic 500 body regardless
of the kind.
"""


class ConfigurationError(Exception):
    """Raised at startup when required settings are missing or invalid."""

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.missing = missing or []


class RelayError(Exception):
    """Base class for failures after a request has been routed."""
    pass


class ParseError(RelayError):
    """Request body is not valid UTF-8 JSON."""
    pass


class TransportError(RelayError):
    """A call to the assistant service raised."""
    pass


class OrchestrationError(RelayError):
    """The assistant run finished in a state other than completed."""

    def __init__(self, terminal_state: str):
        super().__init__(f"Assistant run failed: {terminal_state}")
        self.terminal_state = terminal_state
