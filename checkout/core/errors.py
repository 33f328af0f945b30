"""Error kinds reported through the Output envelope.

Every error a checkout operation can report is a CheckoutError subclass.
They are returned in Output.error rather than raised past the session
boundary, so they compare equal by kind and message.
"""


class CheckoutError(Exception):
    """Base class for all checkout error kinds."""

    default_message = "Checkout error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CheckoutError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


class InvalidInputError(CheckoutError):
    """Scan was called with an empty or missing SKU."""

    default_message = "Invalid input"


class ItemNotFoundError(CheckoutError):
    """The SKU is not present in the item repository."""

    default_message = "Item not found"


class EmptyCartError(CheckoutError):
    """A summary was requested for a cart with no scanned items."""

    default_message = "Cart is empty"


class InternalFaultError(CheckoutError):
    """An unexpected exception was caught at an operation boundary.

    The original exception is kept on ``cause`` for diagnostics but does
    not take part in equality.
    """

    default_message = "Internal fault"

    def __init__(self, message: str | None = None, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


__all__ = [
    "CheckoutError",
    "EmptyCartError",
    "InternalFaultError",
    "InvalidInputError",
    "ItemNotFoundError",
]
