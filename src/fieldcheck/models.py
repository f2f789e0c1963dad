"""Base Pydantic model for fieldcheck.

Example:
    >>> from fieldcheck.models import FieldcheckBaseModel
    >>>
    >>> class MyModel(FieldcheckBaseModel):
    ...     name: str
    >>>
    >>> MyModel(name="test").model_dump()
    {'name': 'test'}
"""

from pydantic import BaseModel, ConfigDict


class FieldcheckBaseModel(BaseModel):
    """Base model for all fieldcheck Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
