from bson import ObjectId

from .errors import InvalidIdentifier


def parse_identifier(identifier: str) -> ObjectId:
    """
    Parse a 24 character hex string into an ObjectId.

    Raises InvalidIdentifier for anything else, including 12 byte strings,
    which ObjectId would otherwise accept.
    """
    if not isinstance(identifier, str) or len(identifier) != 24 or not ObjectId.is_valid(identifier):
        raise InvalidIdentifier(str(identifier))
    return ObjectId(identifier)
