"""Tagged validation results for decoded Civitai payloads.

Validators never raise on bad input. They return ``Valid`` holding the
typed entity or ``Invalid`` holding the offending field locations, and the
client decides how to surface the failure.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class FieldError:
    """A single schema violation."""

    location: str
    message: str

    def __str__(self) -> str:
        return f"{self.location}: {self.message}" if self.location else self.message


@dataclass(frozen=True)
class Valid(Generic[T]):
    """Successful validation."""

    value: T
    ok = True


@dataclass(frozen=True)
class Invalid:
    """Failed validation."""

    errors: tuple[FieldError, ...]
    ok = False

    def describe(self) -> str:
        """Join the errors into one line."""
        return "; ".join(str(error) for error in self.errors)


ValidationResult = Union[Valid[T], Invalid]


def _location(loc: tuple[int | str, ...]) -> str:
    parts: list[str] = []
    for part in loc:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        elif parts:
            parts.append(f".{part}")
        else:
            parts.append(str(part))
    return "".join(parts)


def validate_as(schema: type[M], data: Any) -> ValidationResult[M]:
    """Validate decoded JSON against a schema.

    Args:
        schema: Entity class to validate against.
        data: Decoded JSON value of unknown shape.

    Returns:
        Valid with the entity, or Invalid with one FieldError per violation.
    """
    try:
        return Valid(schema.model_validate(data))
    except PydanticValidationError as e:
        return Invalid(
            tuple(
                FieldError(location=_location(err["loc"]), message=err["msg"])
                for err in e.errors()
            )
        )
