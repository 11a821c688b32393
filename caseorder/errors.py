import enum
from typing import List, Optional

class Outcome(str, enum.Enum):
    """Non-error results of repository operations. Callers must branch on these."""
    NOT_FOUND = "NOT_FOUND"
    NOTHING_TO_DELETE = "NOTHING_TO_DELETE"

NOT_FOUND = Outcome.NOT_FOUND
NOTHING_TO_DELETE = Outcome.NOTHING_TO_DELETE


class ValidationError(Exception):
    """Caller input is missing required fields. Raised before any store call."""

    def __init__(self, message: str, fields: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.fields = list(fields or [])


class PersistenceError(Exception):
    """The store rejected or failed an operation (connectivity, constraint, query, timeout)."""

    def __init__(self, operation: str, entity: str):
        super().__init__(f"{operation} failed for {entity}")
        self.operation = operation
        self.entity = entity
