from typing import Any, Mapping, Union

import pydantic

from .errors import ValidationError
from .models.user import UserFields


def validate_fields(fields: Union[UserFields, Mapping[str, Any], None]) -> UserFields:
    """
    Check a user field set before any store call is made.

    Accepts a pydantic model (UserFields, or a stored User being written
    back; re-validated either way) or a raw mapping decoded from a request.
    """
    if fields is None:
        raise ValidationError("Missing user data")
    if isinstance(fields, pydantic.BaseModel):
        fields = fields.model_dump()
    if not isinstance(fields, Mapping):
        raise ValidationError("User data must be an object")

    try:
        return UserFields.model_validate(dict(fields))
    except pydantic.ValidationError as e:
        details = {
            ".".join(str(part) for part in err["loc"]) or "body": err["msg"]
            for err in e.errors()
        }
        raise ValidationError("Invalid user data", details) from e
