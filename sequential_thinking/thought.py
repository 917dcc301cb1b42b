"""Thought record model and the decoder that builds it from raw tool arguments"""

import math
from collections.abc import Mapping
from typing import Annotated, Any, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    model_validator,
)
from pydantic_core import PydanticCustomError


class ThoughtValidationError(ValueError):
    """Raised when tool arguments cannot be turned into a ThoughtRecord."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class MissingFieldError(ThoughtValidationError):
    pass


class WrongTypeError(ThoughtValidationError):
    pass


class RangeViolationError(ThoughtValidationError):
    pass


class ConstraintViolationError(ThoughtValidationError):
    pass


def _whole_number(value: Any) -> Any:
    # JSON numbers come in as float; bool is an int subclass and is not a number here
    if isinstance(value, bool):
        raise PydanticCustomError("int_type", "Input should be a valid integer")
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise PydanticCustomError(
                "int_from_float", "Input should be a whole number, got {value}", {"value": value}
            )
        return int(value)
    return value


Ordinal = Annotated[StrictInt, Field(ge=1), BeforeValidator(_whole_number)]


def _lookup(data: Mapping[str, Any], alias: str, name: str) -> Any:
    return data[alias] if alias in data else data.get(name)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ThoughtRecord(BaseModel):
    """One reasoning step. Built per request and never mutated."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    thought: Annotated[StrictStr, Field(min_length=1)]
    thought_number: Ordinal = Field(alias="thoughtNumber")
    total_thoughts: Ordinal = Field(alias="totalThoughts")
    next_thought_needed: StrictBool = Field(alias="nextThoughtNeeded")
    is_revision: Optional[StrictBool] = Field(default=None, alias="isRevision")
    revises_thought: Optional[Ordinal] = Field(default=None, alias="revisesThought")
    branch_from_thought: Optional[Ordinal] = Field(default=None, alias="branchFromThought")
    branch_id: Optional[StrictStr] = Field(default=None, alias="branchId")
    needs_more_thoughts: Optional[StrictBool] = Field(default=None, alias="needsMoreThoughts")

    @model_validator(mode="before")
    @classmethod
    def _fill_defaults(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data

        # JSON null means absent
        data = {key: value for key, value in data.items() if value is not None}

        if _lookup(data, "nextThoughtNeeded", "next_thought_needed") is None:
            thought_number = _lookup(data, "thoughtNumber", "thought_number")
            total_thoughts = _lookup(data, "totalThoughts", "total_thoughts")
            if _is_number(thought_number) and _is_number(total_thoughts):
                data["nextThoughtNeeded"] = thought_number < total_thoughts
        return data

    @model_validator(mode="after")
    def _check_order(self) -> "ThoughtRecord":
        if self.thought_number > self.total_thoughts:
            raise PydanticCustomError(
                "thought_order", "thoughtNumber cannot be greater than totalThoughts"
            )
        return self


def _translate(error: Mapping[str, Any]) -> ThoughtValidationError:
    kind = error["type"]
    field = str(error["loc"][0]) if error["loc"] else "arguments"

    if kind == "model_type":
        return WrongTypeError(
            "arguments", f"arguments must be an object, got {type(error['input']).__name__}"
        )
    if kind == "thought_order":
        return ConstraintViolationError("thoughtNumber", error["msg"])
    if kind == "missing":
        return MissingFieldError(field, f"{field} is required")
    if kind == "string_too_short":
        return MissingFieldError(field, f"{field} must not be empty")
    if kind == "greater_than_equal":
        return RangeViolationError(field, f"{field} must be at least 1, got {error['input']}")
    return WrongTypeError(field, f"{field}: {error['msg']}")


def decode_thought(arguments: Mapping[str, Any]) -> ThoughtRecord:
    """
    Decode raw tool arguments into a ThoughtRecord.

    Only the first failure is reported, in field order. A missing
    nextThoughtNeeded is derived from thoughtNumber < totalThoughts.

    Raises:
        MissingFieldError, WrongTypeError, RangeViolationError,
        ConstraintViolationError (all ThoughtValidationError)
    """
    try:
        return ThoughtRecord.model_validate(arguments)
    except ValidationError as e:
        raise _translate(e.errors()[0]) from e
