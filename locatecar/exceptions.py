"""
Custom exception classes for the LocateCar rental ledger.

Services raise these typed failures; the HTTP controllers catch them and
render a JSON error with a matching status code instead of a generic 500.
"""


class LocateCarError(Exception):
    """Base class for every failure the core reports to its callers."""

    status_code = 400

    def __init__(self, message: str = "Error: operation failed") -> None:
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


class ValidationError(LocateCarError):
    """Raised when a plate, document, email or argument is malformed."""

    def __init__(self, message: str = "Error: invalid data") -> None:
        super().__init__(message)


class DuplicateKeyError(LocateCarError):
    """Raised when registering an entity whose identifier already exists."""

    status_code = 409

    def __init__(self, message: str = "Error: duplicate identifier") -> None:
        super().__init__(message)


class NotFoundError(LocateCarError):
    """Raised when a referenced entity cannot be found."""

    status_code = 404

    def __init__(self, message: str = "Error: not found") -> None:
        super().__init__(message)


class VehicleNotFoundError(NotFoundError):
    """Raised when a plate cannot be found in the fleet."""

    def __init__(self, message: str = "Error: vehicle not found") -> None:
        super().__init__(message)


class CustomerNotFoundError(NotFoundError):
    """Raised when a customer document cannot be found."""

    def __init__(self, message: str = "Error: customer not found") -> None:
        super().__init__(message)


class RentalNotFoundError(NotFoundError):
    """Raised when no open rental exists for a vehicle."""

    def __init__(self, message: str = "Error: rental not found") -> None:
        super().__init__(message)


class ConflictError(LocateCarError):
    """Raised when the current state forbids the operation."""

    status_code = 409

    def __init__(self, message: str = "Error: conflict") -> None:
        super().__init__(message)


class VehicleUnavailableError(ConflictError):
    """Raised when checking out a vehicle that is already rented."""

    def __init__(self, message: str = "Error: vehicle is not available") -> None:
        super().__init__(message)


class IOFailure(LocateCarError):
    """Raised by a persistence port when loading or saving fails."""

    status_code = 500

    def __init__(self, message: str = "Error: persistence failed") -> None:
        super().__init__(message)
