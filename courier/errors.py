class CourierError(Exception):
    """Base error for Courier."""


class JsonDecodeError(CourierError, ValueError):
    """Raised when a response declared as JSON has a body that does not parse."""

    def __init__(self, msg: str, doc: str = "", pos: int = 0) -> None:
        super().__init__(f"Unable to decode JSON response: {msg}")
        self.msg = msg
        self.doc = doc
        self.pos = pos
