"""Recoverable errors raised by the transaction core."""


class BankError(Exception):
    """Base class for errors the API renders as a client error."""

    kind = "BankError"
    status_code = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(BankError):
    """The addressed account does not exist."""

    kind = "NotFound"
    status_code = 404


class BadRequestError(BankError):
    """Validation failed: unknown type, non-positive amount, insufficient funds."""

    kind = "BadRequest"
    status_code = 400
