class DuplicateRecordError(ValueError):
    """Raised by the record store when a unique field value is already taken."""

    def __init__(self, entity: str, field: str, value: str):
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(f"{entity} with {field} '{value}' already exists")
