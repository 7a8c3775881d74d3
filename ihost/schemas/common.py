"""
Shared request/response schemas
"""
from typing import Any, ClassVar, Dict, Tuple

from pydantic import model_validator

from ihost.models.base import CamelModel


class ErrorResponse(CamelModel):
    """Body of every handled error response"""
    error: str
    message: str


class MessageResponse(CamelModel):
    message: str


class PatchRequest(CamelModel):
    """
    Partial update body.

    Only fields present in the JSON body are applied. A field sent as null
    clears the stored value, except for fields listed in `required_fields`,
    which may be omitted but never nulled.
    """

    required_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def _reject_null_required(self):
        for name in self.required_fields:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        """Supplied fields keyed by attribute name."""
        return {name: getattr(self, name) for name in self.model_fields_set}

    def document_changes(self) -> Dict[str, Any]:
        """Supplied fields keyed by their stored (camelCase) names."""
        return self.model_dump(mode="json", by_alias=True, include=self.model_fields_set)
