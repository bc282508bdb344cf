"""Domain exceptions raised by the repository and services."""


class ResourceNotFoundError(Exception):
    """Raised when a referenced entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} not found with id: {entity_id}")


class StorageError(Exception):
    """Raised when a persistence operation fails (I/O, constraint, abort)."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"Storage operation '{operation}' failed: {detail}")
