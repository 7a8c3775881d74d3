"""
Base model for documents stored in Firestore.

Attributes are snake_case in Python; documents and JSON use camelCase.
The document id is never written into the document body.
"""
from typing import Any, ClassVar, Dict, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Pydantic model serialised with camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class FirestoreModel(CamelModel):
    """Entity backed by a single Firestore document."""

    # Name of the attribute holding the document id
    id_field: ClassVar[str] = "id"

    def to_document(self) -> Dict[str, Any]:
        """Serialise to the field map written to Firestore."""
        return self.model_dump(mode="json", by_alias=True, exclude={self.id_field})

    @classmethod
    def from_document(cls, document_id: str, data: Optional[Dict[str, Any]]):
        """Build the entity from a document id and its field map."""
        payload = dict(data or {})
        payload[cls.id_field] = document_id
        return cls.model_validate(payload)
