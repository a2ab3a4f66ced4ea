from datetime import datetime
from pydantic import BaseModel


class InsertResult(BaseModel):
    inserted_id: str
    created_at: datetime


class UpdateResult(BaseModel):
    matched_count: int
    modified_count: int


class DeleteResult(BaseModel):
    deleted_count: int
