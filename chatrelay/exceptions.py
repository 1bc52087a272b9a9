"""
Error taxonomy shared by the relay server and the chat client.

Server-side errors carry the HTTP status and the terse message the caller is
allowed to see. Anything more detailed stays in the server log.
"""


class RelayError(Exception):
    status_code = 500
    message = "Failed to generate a reply."

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class BadRequest(RelayError):
    """Raised when the request carries no usable user message."""

    status_code = 400
    message = "A user message is required."


class UpstreamEmpty(RelayError):
    """Raised when the provider answered but produced no text."""

    message = "No response generated."


class UpstreamError(RelayError):
    """
    Raised when the provider call itself failed (network, auth, rate limit,
    malformed completion). The original exception is chained but its details
    are never sent to the caller.
    """


class NetworkError(Exception):
    """Raised on the client side when the relay endpoint cannot be reached
    or does not answer with a usable reply."""
