class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class UnknownPartitionError(DomainError):
    """Raised when a partition has no declared entity type."""


class StorageError(Exception):
    """Raised by key-value backends when the durable store cannot be read or written."""
