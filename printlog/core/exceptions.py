"""
Error values produced by the print helpers.
"""


class PrintError(Exception):
    """
    Location-prefixed error returned by ``errorf``.

    The message is a flat string. Callers that need a cause pass ``cause=`` to
    ``errorf``, which sets ``__cause__`` without touching the message.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


__all__ = ["PrintError"]
