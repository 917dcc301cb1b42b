"""Sequential Thinking MCP Server - validate and render single reasoning steps"""

from .formatting import ThoughtFormatter
from .thought import (
    ConstraintViolationError,
    MissingFieldError,
    RangeViolationError,
    ThoughtRecord,
    ThoughtValidationError,
    WrongTypeError,
    decode_thought,
)

__version__ = "1.0.0"

__all__ = [
    "ConstraintViolationError",
    "MissingFieldError",
    "RangeViolationError",
    "ThoughtFormatter",
    "ThoughtRecord",
    "ThoughtValidationError",
    "WrongTypeError",
    "decode_thought",
]
