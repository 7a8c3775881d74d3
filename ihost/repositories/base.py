"""
Shared Firestore access for the collection repositories
"""
import logging
from typing import Any, ClassVar, Dict, Generic, List, Optional, Tuple, Type, TypeVar

from google.cloud.firestore import Client
from google.cloud.firestore_v1.base_query import FieldFilter

from ihost.models.base import FirestoreModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=FirestoreModel)


class FirestoreRepository(Generic[ModelT]):
    """Maps one Firestore collection to one document model."""

    collection_name: ClassVar[str]
    model: ClassVar[Type[FirestoreModel]]

    def __init__(self, db: Client):
        self.db = db
        self.collection = db.collection(self.collection_name)

    def _to_entity(self, snapshot) -> Optional[ModelT]:
        if not snapshot.exists:
            return None
        return self.model.from_document(snapshot.id, snapshot.to_dict())

    def _where(self, *conditions: Tuple[str, str, Any]):
        query = self.collection
        for field, op, value in conditions:
            query = query.where(filter=FieldFilter(field, op, value))
        return query

    def _find_where(self, *conditions: Tuple[str, str, Any]) -> List[ModelT]:
        return [self._to_entity(snapshot) for snapshot in self._where(*conditions).stream()]

    def _find_first_where(self, *conditions: Tuple[str, str, Any]) -> Optional[ModelT]:
        for snapshot in self._where(*conditions).limit(1).stream():
            return self._to_entity(snapshot)
        return None

    def find_by_id(self, document_id: str) -> Optional[ModelT]:
        return self._to_entity(self.collection.document(document_id).get())

    def find_all(self) -> List[ModelT]:
        return [self._to_entity(snapshot) for snapshot in self.collection.stream()]

    def save(self, entity: ModelT) -> str:
        """Write the entity and return its document id.

        A new document id is generated when the entity has none.
        """
        document_id = getattr(entity, entity.id_field)
        ref = self.collection.document(document_id) if document_id else self.collection.document()
        ref.set(entity.to_document())
        return ref.id

    def update_fields(self, document_id: str, fields: Dict[str, Any]) -> None:
        """Overwrite only the given (camelCase) fields of a document."""
        self.collection.document(document_id).update(fields)

    def delete(self, document_id: str) -> None:
        self.collection.document(document_id).delete()
