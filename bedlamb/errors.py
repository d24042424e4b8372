from __future__ import annotations


class BedlambError(RuntimeError):
    """Base class for errors that end the process with exit code 1."""


class SerializationError(BedlambError):
    """The request payload could not be encoded as JSON."""


class ConfigError(BedlambError):
    """AWS credentials, region or profile could not be resolved."""


class InvocationError(BedlambError):
    """The invoke call failed before the function produced a result."""


class FunctionError(BedlambError):
    """The function ran but raised an error of its own."""

    def __init__(self, error: str, payload: bytes):
        super().__init__(error)
        self.error = error
        self.payload = payload
