"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was malformed or out of range."""


class InvalidStatusError(ValidationError):
    """A status string is not one of the known order statuses."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class BusinessRuleViolation(DomainException):
    """Input was well-formed but the current state forbids the operation."""


class InsufficientInventoryError(BusinessRuleViolation):
    """A clothing set does not have enough free units for a date range."""

    def __init__(
        self,
        clothing_set_id: int,
        set_name: str,
        available: int,
        requested: int,
    ) -> None:
        self.clothing_set_id = clothing_set_id
        self.set_name = set_name
        self.available = available
        self.requested = requested
        super().__init__(
            f"Insufficient inventory for '{set_name}' (set #{clothing_set_id}). "
            f"Available: {available}, Requested: {requested}"
        )
