"""
Base domain exceptions.
"""


class EtherStakeException(Exception):
    """Base exception for all EtherStake domain errors."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


class EntityNotFoundError(EtherStakeException):
    """Raised when entity is not found in repository."""

    def __init__(self, entity_type: str, entity_id: str):
        message = f"{entity_type} with ID {entity_id} not found"
        super().__init__(message, code="ENTITY_NOT_FOUND")


class DuplicateEntityError(EtherStakeException):
    """Raised when attempting to create duplicate entity."""

    def __init__(self, entity_type: str, identifier: str):
        message = f"{entity_type} with {identifier} already exists"
        super().__init__(message, code="DUPLICATE_ENTITY")


class ValidationError(EtherStakeException):
    """Raised when entity validation fails."""

    def __init__(self, field: str, reason: str):
        self.field = field
        message = f"Validation failed for {field}: {reason}"
        super().__init__(message, code="VALIDATION_ERROR")


class ConcurrentModificationError(EtherStakeException):
    """Raised when an entity changed between read and write."""

    def __init__(self, entity_type: str, entity_id: str):
        message = (
            f"{entity_type} {entity_id} was modified by another request. "
            f"Reload and retry."
        )
        super().__init__(message, code="CONCURRENT_MODIFICATION")
