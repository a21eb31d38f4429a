"""Record validation errors.

These are the only errors the functional core raises. They are raised
while a record is being built, never while it is being drawn.
"""


class RecordError(ValueError):
    """Base class for a feature that cannot become an EarthquakeRecord.

    Attributes:
        key: The property that failed validation
        record_id: Identifier of the offending feature (may be empty)
    """

    def __init__(self, key: str, message: str, record_id: str = "") -> None:
        self.key = key
        self.record_id = record_id
        prefix = f"{record_id}: " if record_id else ""
        super().__init__(f"{prefix}{message}")


class MissingPropertyError(RecordError):
    """A required property is absent from the feature."""

    def __init__(self, key: str, record_id: str = "") -> None:
        super().__init__(key, f"missing required property '{key}'", record_id)


class PropertyParseError(RecordError):
    """A property is present but has the wrong type or an unusable value."""

    def __init__(
        self,
        key: str,
        value: object,
        record_id: str = "",
        expected: str = "a valid number",
    ) -> None:
        self.value = value
        super().__init__(
            key,
            f"property '{key}' is not {expected}: {value!r}",
            record_id,
        )
