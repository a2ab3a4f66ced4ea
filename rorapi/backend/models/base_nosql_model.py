"""
Base model class for MongoDB collections.

The database handle is passed in by whoever builds the model (normally
create_app), so a test can hand in any object with the pymongo Collection
surface instead of a live connection.
"""
from datetime import datetime, timezone
from typing import Optional, Any, Dict, Tuple
from enum import Enum

from bson import ObjectId
from pymongo.collection import Collection


class BaseNoSqlModel:
    """
    Thin wrapper over one MongoDB collection exposing the record store
    contract: count, insert, find by id, update by id, delete by id.

    Subclasses name the collection and convert raw documents to domain
    objects. Errors from pymongo are not caught here; the service layer
    decides how each one is reported.
    """

    collection_name: str = ""

    def __init__(self, db):
        self.db = db

    @property
    def collection(self) -> Collection:
        if not self.collection_name:
            raise NotImplementedError("Subclasses must set collection_name")
        return self.db[self.collection_name]

    # -------------------------------------------------------------------------
    # Record store operations
    # -------------------------------------------------------------------------

    def count(self, filter: Optional[Dict[str, Any]] = None) -> int:
        return self.collection.count_documents(filter or {})

    def insert(self, doc: Dict[str, Any]) -> Tuple[str, datetime]:
        """
        Insert a document and let MongoDB assign its _id.
        Sets created_at automatically.
        """
        doc = self._to_storage(doc)
        doc.pop("_id", None)
        created_at = datetime.now(timezone.utc)
        doc["created_at"] = created_at

        result = self.collection.insert_one(doc)
        return str(result.inserted_id), created_at

    def find_by_id(self, doc_id: ObjectId) -> Optional[Dict[str, Any]]:
        return self.collection.find_one({"_id": doc_id})

    def update(self, doc_id: ObjectId, fields: Dict[str, Any]) -> Tuple[int, int]:
        """
        $set every given field on the matching document and stamp updated_at.
        Returns (matched_count, modified_count).
        """
        processed_data = self._to_storage(fields)
        processed_data.pop("_id", None)
        processed_data["updated_at"] = datetime.now(timezone.utc)

        result = self.collection.update_one(
            {"_id": doc_id},
            {"$set": processed_data}
        )
        return result.matched_count, result.modified_count

    def delete(self, doc_id: ObjectId) -> int:
        result = self.collection.delete_one({"_id": doc_id})
        return result.deleted_count

    @staticmethod
    def _to_storage(data: Dict[str, Any]) -> Dict[str, Any]:
        # Enums are stored as their plain values
        return {
            key: value.value if isinstance(value, Enum) else value
            for key, value in data.items()
        }

    def from_doc(self, doc: Dict[str, Any]) -> Any:
        """
        Convert MongoDB document to model instance.
        Override in subclasses to provide proper model instantiation.
        """
        raise NotImplementedError("Subclasses must implement from_doc method")
