class NotFoundError(LookupError):
    """A referenced category or transaction does not exist."""

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ConflictError(ValueError):
    """A write would break a uniqueness rule (e.g. duplicate category name)."""
