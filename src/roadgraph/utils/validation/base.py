"""
Base Validation Components for roadgraph

This module provides the foundational validation components used by the
snapshot models:
- ValidationResult for reporting validation outcomes with errors and warnings
- DataclassRule for checking dataclass field values against their type hints
- validate_dataclass, a decorator that runs DataclassRule after __post_init__
"""

from dataclasses import dataclass
from enum import Enum
from typing import (
    Any,
    Dict,
    List,
    Optional,
    Type,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid (bool): Whether the validation passed successfully
        errors (List[str]): List of validation error messages
        warnings (List[str]): List of validation warning messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str]
    warnings: List[str]
    context: Optional[Dict[str, Any]] = None


class DataclassRule:
    """
    Rule for validating dataclass fields.

    Checks that every field of a dataclass instance matches its type hint.
    Supports Optional, List, Dict, fixed and variadic Tuple, Enum members and
    nested dataclasses.

    Attributes:
        dataclass_type: The dataclass type to validate against
        error_message: Message to display when validation fails
    """

    def __init__(self, dataclass_type: Type, error_message: str = ""):
        self.error_message = error_message or f"Invalid value for {dataclass_type.__name__}"
        self.dataclass_type = dataclass_type
        self.type_hints = get_type_hints(dataclass_type)

    def _validate_type(self, value: Any, expected_type: Any) -> bool:
        """Validate a value against its expected type."""
        if expected_type is Any:
            return True

        origin = get_origin(expected_type)

        # Handle Optional types
        if origin is Union:
            args = get_args(expected_type)
            if value is None:
                return type(None) in args
            return any(self._validate_type(value, t) for t in args if t is not type(None))

        if value is None:
            return False

        if origin is list:
            if not isinstance(value, list):
                return False
            args = get_args(expected_type)
            if not args:
                return True
            return all(self._validate_type(item, args[0]) for item in value)
        elif origin is dict:
            if not isinstance(value, dict):
                return False
            args = get_args(expected_type)
            if len(args) != 2:
                return True
            key_type, val_type = args
            return all(
                self._validate_type(k, key_type) and self._validate_type(v, val_type)
                for k, v in value.items()
            )
        elif origin is tuple:
            if not isinstance(value, tuple):
                return False
            args = get_args(expected_type)
            if not args:
                return True
            # Tuple[X, ...] holds any number of X
            if len(args) == 2 and args[1] is Ellipsis:
                return all(self._validate_type(item, args[0]) for item in value)
            if len(args) != len(value):
                return False
            return all(self._validate_type(val, typ) for val, typ in zip(value, args))
        elif origin is not None:
            try:
                return isinstance(value, origin)
            except TypeError:
                return True

        if isinstance(expected_type, type) and issubclass(expected_type, Enum):
            return isinstance(value, expected_type)
        # bool is an int subclass but never a valid numeric field value
        if expected_type in (int, float) and isinstance(value, bool):
            return False
        try:
            return isinstance(value, expected_type)
        except TypeError:
            return True

    def validate(self, value: Any) -> bool:
        """
        Validate a dataclass instance.

        Args:
            value: Dataclass instance to validate

        Returns:
            bool: True if every field matches its type hint, False otherwise
        """
        if not isinstance(value, self.dataclass_type):
            return False

        for field_name, field_type in self.type_hints.items():
            if not self._validate_type(getattr(value, field_name), field_type):
                return False

        return True

    def invalid_fields(self, value: Any) -> List[str]:
        """Return the names of fields whose values do not match their type hints."""
        return [
            field_name
            for field_name, field_type in self.type_hints.items()
            if not self._validate_type(getattr(value, field_name), field_type)
        ]


def validate_dataclass(cls: Type[Any]) -> Type[Any]:
    """
    Decorator that adds runtime type checking to dataclass fields.

    The class's own ``__post_init__`` runs first so it can normalise values
    (for example coercing an int weight to float) before types are checked.

    Args:
        cls: The dataclass to validate

    Returns:
        The decorated class with type validation

    Example:
        >>> @validate_dataclass
        ... @dataclass(frozen=True)
        ... class Example:
        ...     name: str
        ...     def __post_init__(self):
        ...         pass
    """
    original_post_init = getattr(cls, "__post_init__", None)

    def validated_post_init(self):
        """Validate all fields after initialization."""
        if original_post_init:
            original_post_init(self)

        validator = DataclassRule(cls)
        bad_fields = validator.invalid_fields(self)
        if bad_fields:
            raise TypeError(f"Invalid field types in {cls.__name__}: {', '.join(bad_fields)}")

    cls.__post_init__ = validated_post_init
    return cls
