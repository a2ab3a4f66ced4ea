import logging
from typing import Any, Mapping, Union

import pydantic
from pymongo.errors import PyMongoError

from backend.models.user_model import UserModel
from shared.modules.user.errors import (
    NotFound,
    StoreUnavailable,
    StoreWriteError,
)
from shared.modules.user.identifier import parse_identifier
from shared.modules.user.models.user import User, UserFields
from shared.modules.user.models.write_result import DeleteResult, InsertResult, UpdateResult
from shared.modules.user.validation import validate_fields


class UserService:
    """
    Validated CRUD over the users collection.

    Field validation and identifier parsing happen before the store is
    touched. Store failures are not retried here; they are wrapped in
    StoreUnavailable / StoreWriteError and left to the caller.
    """

    def __init__(self, user_model: UserModel, logger=None):
        self.user_model = user_model
        self.logger = logger or logging.getLogger(self.__class__.__name__)

    def count(self) -> int:
        try:
            return self.user_model.count()
        except PyMongoError as e:
            self.logger.error(f"Failed to count users: {e}")
            raise StoreUnavailable() from e

    def create(self, fields: Union[UserFields, Mapping[str, Any]]) -> InsertResult:
        user_fields = validate_fields(fields)

        try:
            inserted_id, created_at = self.user_model.insert(user_fields.model_dump())
        except PyMongoError as e:
            self.logger.error(f"Failed to insert user: {e}")
            raise StoreWriteError("Error inserting user") from e

        self.logger.info(f"Created user {inserted_id}")
        return InsertResult(inserted_id=inserted_id, created_at=created_at)

    def get(self, identifier: str) -> User:
        object_id = parse_identifier(identifier)

        try:
            doc = self.user_model.find_by_id(object_id)
        except PyMongoError as e:
            # A failed lookup is reported the same way as a missing record
            self.logger.error(f"Failed to find user {identifier}: {e}")
            raise NotFound(identifier) from e

        if not doc:
            raise NotFound(identifier)

        try:
            return self.user_model.from_doc(doc)
        except pydantic.ValidationError as e:
            # Undecodable document, reported like any other failed lookup
            self.logger.error(f"Stored user {identifier} could not be decoded: {e}")
            raise NotFound(identifier) from e

    def update(self, identifier: str, fields: Union[UserFields, Mapping[str, Any]]) -> UpdateResult:
        """
        Replace the full client field set of one user.

        Fields left out of the input are not merged from the stored record;
        a missing required field fails validation and an omitted age is
        written as 0.
        """
        object_id = parse_identifier(identifier)
        user_fields = validate_fields(fields)

        try:
            matched, modified = self.user_model.update(object_id, user_fields.model_dump())
        except PyMongoError as e:
            self.logger.error(f"Failed to update user {identifier}: {e}")
            raise StoreWriteError("Error updating user") from e

        return UpdateResult(matched_count=matched, modified_count=modified)

    def delete(self, identifier: str) -> DeleteResult:
        object_id = parse_identifier(identifier)

        try:
            deleted = self.user_model.delete(object_id)
        except PyMongoError as e:
            self.logger.error(f"Failed to delete user {identifier}: {e}")
            raise StoreWriteError("Error deleting user") from e

        return DeleteResult(deleted_count=deleted)
