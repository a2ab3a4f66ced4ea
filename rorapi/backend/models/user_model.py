from typing import Any, Dict

from shared.modules.user.models.user import User
from backend.models.base_nosql_model import BaseNoSqlModel


class UserModel(BaseNoSqlModel):
    """
    MongoDB persistence wrapper for User records.
    Inherits the record store operations from BaseNoSqlModel.
    """

    collection_name = "users"

    def from_doc(self, doc: Dict[str, Any]) -> User:
        doc = dict(doc)
        doc["id"] = str(doc.pop("_id"))
        return User(**doc)
