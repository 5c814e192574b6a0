"""Errors raised by the catalog and logbook services."""


class ValidationError(ValueError):
    """Input rejected before any write to the entity store."""


class LogValidationError(ValidationError):
    """A new log entry failed the add-log checks."""


class EntityNotFoundError(LookupError):
    """A referenced place, burger or log does not exist."""

    def __init__(self, kind: str, entity_id: str) -> None:
        super().__init__(f"{kind} not found: {entity_id}")
        self.kind = kind
        self.entity_id = entity_id
