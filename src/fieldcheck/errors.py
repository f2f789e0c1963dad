"""Exception types raised by fieldcheck.

There are two disjoint failure kinds:

- ``SchemaDefinitionError`` is raised by the compiler as soon as the first
  structural defect of a schema is found. Compilation never aggregates.
- ``ValidationError`` is raised once at the end of a ``validate`` call and
  carries every path -> message pair found in the value.

Example:
    >>> from fieldcheck import Schema, ValidationError
    >>> schema = Schema({"name": {"type": "string", "required": True}})
    >>> try:
    ...     schema.validate({})
    ... except ValidationError as e:
    ...     errors = e.errors
    >>> errors
    {'name': 'field is required'}
"""

from ._types import ErrorSet


class SchemaDefinitionError(ValueError):
    """A schema is malformed (bad shorthand, unknown type or property, ...)."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class ValidationError(ValueError):
    """A value does not match its schema.

    Attributes:
        errors: Mapping of field path to message, one entry per failing field.
    """

    def __init__(self, errors: ErrorSet):
        self.errors = dict(errors)
        super().__init__(self._format(self.errors))

    @staticmethod
    def _format(errors: ErrorSet) -> str:
        lines = [f"{path}: {message}" for path, message in errors.items()]
        return "Validation failed:\n  " + "\n  ".join(lines) if lines else "Validation failed"


__all__ = ["SchemaDefinitionError", "ValidationError"]
