from enum import StrEnum
from typing import Any


class ErrorStates(StrEnum):
    MALFORMED_INPUT = "malformed_input"
    DATA_SOURCE_ERROR = "data_source_error"
    UNKNOWN_ENTITY = "unknown_entity"
    RENDER_ERROR = "render_error"


class GrowthError(Exception):
    def __init__(
        self,
        error_type: ErrorStates,
        message: str,
        details: dict[str, Any] | None = None,
        recoverable: bool = True,
    ):
        self.error_type = error_type
        self.message = message
        self.details = details or {}
        self.recoverable = recoverable
        super().__init__(self.message)


class MalformedInputError(GrowthError):
    """A level record is missing a tracked statistic or holds a non-numeric value."""

    def __init__(self, entity: str | None, level: int, statistic: str, value: Any = None):
        who = entity if entity is not None else "<unnamed>"
        super().__init__(
            error_type=ErrorStates.MALFORMED_INPUT,
            message=f"Malformed record for {who} at level {level}: "
            f"statistic '{statistic}' is missing or not numeric ({value!r})",
            details={"entity": entity, "level": level, "statistic": statistic, "value": value},
            recoverable=False,
        )
        self.entity = entity
        self.level = level
        self.statistic = statistic


class DataSourceError(GrowthError):
    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        recoverable: bool = True,
    ):
        super().__init__(
            error_type=ErrorStates.DATA_SOURCE_ERROR,
            message=message,
            details=details,
            recoverable=recoverable,
        )


class UnknownEntityError(GrowthError):
    def __init__(self, name: str, available: list[str] | None = None):
        super().__init__(
            error_type=ErrorStates.UNKNOWN_ENTITY,
            message=f"Unknown hero: {name}",
            details={"name": name, "available": available or []},
        )
        self.name = name


class RenderError(GrowthError):
    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        recoverable: bool = True,
    ):
        super().__init__(
            error_type=ErrorStates.RENDER_ERROR,
            message=message,
            details=details,
            recoverable=recoverable,
        )
