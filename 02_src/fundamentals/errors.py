"""Exception types for recordings and replay."""


class DecodeError(ValueError):
    """Raised when persisted or wire data is malformed or unrecognized."""

    def __init__(self, path: str, reason: str):
        self.path = path or "<root>"
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class EncodeError(ValueError):
    """Raised when a value cannot be represented (e.g. non-finite float)."""

    def __init__(self, path: str, reason: str):
        self.path = path or "<root>"
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class TransportError(ConnectionError):
    """Raised when a send on a live viewer connection fails or stalls."""
    pass
