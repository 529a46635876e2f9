"""graphops custom exceptions."""


class GraphError(Exception):
    """Base exception for graphops errors."""


class InvalidInputError(GraphError):
    """User-supplied text could not be interpreted."""


class GraphDecodeError(GraphError):
    """A graph could not be decoded from JSON.

    ``kind`` names the failure: ``"syntax"``, ``"schema"`` or ``"io"``.
    """

    def __init__(self, kind: str, message: str) -> None:
        super().__init__(f"{kind} error: {message}")
        self.kind = kind
        self.message = message
