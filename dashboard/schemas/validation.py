"""
Form validation boundary.

Forms arrive as untyped string mappings. ``safe_parse`` runs them through a
pydantic model and returns either the typed record or per-field messages.
It never raises for bad input.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError


class FormModel(BaseModel):
    """
    Base class for models that validate submitted forms.

    Subclasses may set ``error_messages`` to replace pydantic's messages with
    a single user-facing message per field.
    """

    error_messages: ClassVar[Dict[str, str]] = {}

    model_config = {
        "str_strip_whitespace": True,
    }


ModelT = TypeVar("ModelT", bound=FormModel)


@dataclass
class ParseResult(Generic[ModelT]):
    """Outcome of ``safe_parse``: exactly one of data / errors is set."""

    data: Optional[ModelT] = None
    errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.data is not None


def flatten_errors(model: Type[FormModel], exc: ValidationError) -> Dict[str, List[str]]:
    """Group validation errors by top-level field name."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        loc = error.get("loc") or ("form",)
        field_name = str(loc[0])
        message = model.error_messages.get(field_name, error["msg"])
        messages = errors.setdefault(field_name, [])
        if message not in messages:
            messages.append(message)
    return errors


def safe_parse(model: Type[ModelT], raw: Mapping[str, Any]) -> ParseResult[ModelT]:
    """
    Validate ``raw`` against ``model``.

    Args:
        model: FormModel subclass describing the expected shape
        raw: Field values as submitted (usually strings or None)

    Returns:
        ParseResult with ``data`` on success, ``errors`` otherwise
    """
    try:
        return ParseResult(data=model.model_validate(dict(raw)))
    except ValidationError as exc:
        return ParseResult(errors=flatten_errors(model, exc))
