"""
Errors raised while decoding a game server payload.
"""


class RequestDecodeError(ValueError):
    """The request body does not describe a valid game state."""
