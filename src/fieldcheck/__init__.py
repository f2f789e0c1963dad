"""fieldcheck - declarative schema validation that reports every error.

A schema describes the shape a value should have. fieldcheck compiles it
once into a canonical, checked form and then validates values against it,
collecting every violation instead of stopping at the first one.

## Key Components

### Core Classes
- `Schema`: Compiles a raw schema and validates values
- `SchemaCompiler`: Shorthand expansion and structural checks
- `ValueValidator`: Recursive, error-aggregating validation
- `ArrayMatcher`: Union matching for array elements

### Errors
- `SchemaDefinitionError`: The schema itself is malformed (raised on the first defect)
- `ValidationError`: The value is invalid; `.errors` holds every path -> message pair

### Types
- `FieldType`: Capability contract of a type
- `TypeRegistry`, `register_type`: Register custom types or override built-ins

## Quick Examples

### Shorthand and verbose syntax
```python
from fieldcheck import Schema

schema = Schema({
    "name": str,                                   # bare type
    "gender": {"type": "string", "enum": ["male", "female"]},
    "favorite_stuff": [str, int],                  # array of strings or numbers
    "address": {"city": str, "zip": {"type": "string", "test": r"^\\d{5}$"}},
})
```

### Collecting every error
```python
from fieldcheck import ValidationError

try:
    schema.validate({"name": 42, "favorite_stuff": ["pizza", False], "nickname": "x"})
except ValidationError as e:
    print(e.errors)
    # {'name': 'field is not of the correct type',
    #  'favorite_stuff[1]': 'not of the correct type',
    #  'nickname': 'unknown property'}
```

### Custom types
```python
from fieldcheck import FieldType, register_type

class EvenType(FieldType):
    @property
    def name(self):
        return "even"

    @property
    def allowed_props(self):
        return frozenset({"required"})

    def validate_type(self, value, field=None):
        return isinstance(value, int) and value % 2 == 0

register_type("even", EvenType())
Schema({"count": "even"})
```
"""

from ._types import MISSING, ErrorSet, FieldSchema, ObjectSchema
from .arrays import ArrayMatcher
from .compiler import SchemaCompiler
from .config import FieldcheckSettings, load_settings
from .errors import SchemaDefinitionError, ValidationError
from .loaders import load_schema, load_schema_from_file
from .registry import TypeRegistry, get_default_registry, register_type
from .schema import Schema
from .types import FieldType
from .validator import ValueValidator

__all__ = [
    # Main entry point
    "Schema",
    # Engine
    "SchemaCompiler",
    "ValueValidator",
    "ArrayMatcher",
    # Errors
    "SchemaDefinitionError",
    "ValidationError",
    # Types and registry
    "FieldType",
    "TypeRegistry",
    "get_default_registry",
    "register_type",
    # Type aliases
    "FieldSchema",
    "ObjectSchema",
    "ErrorSet",
    "MISSING",
    # Settings and loading
    "FieldcheckSettings",
    "load_settings",
    "load_schema",
    "load_schema_from_file",
]
