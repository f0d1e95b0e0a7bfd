"""Domain exceptions."""


class InvalidArgumentError(ValueError):
    """
    Raised when an order or one of its fields fails validation.

    Covers a missing order, a blank order ID, a duplicate ID on insert
    and an unknown status name. Callers translate it to a client error.
    """
