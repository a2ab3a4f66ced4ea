from flask import Blueprint, request, jsonify

from backend.factories.service_factory import ServiceFactory
from shared.modules.log.logger import get_logger
from shared.modules.user.errors import UserStoreError

bp = Blueprint("user_controller", __name__)
logger = get_logger(__name__)


@bp.errorhandler(UserStoreError)
def handle_user_store_error(e: UserStoreError):
    if e.status_code >= 500:
        logger.error(f"{e.code}: {e.message}")
    return jsonify(e.to_dict()), e.status_code


def _json_body():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return None
    return payload


@bp.route("/users/count", methods=["GET"])
def count_users():
    count = ServiceFactory.user_service().count()
    return jsonify({"count": count}), 200


@bp.route("/users", methods=["POST"])
def create_user():
    """
    Create a user.

    payload = {"first_name": "sam", "last_name": "chan", "gender": "male", "age": 20}
    """
    payload = _json_body()
    if payload is None:
        return jsonify({"error": "Error parsing body"}), 400

    result = ServiceFactory.user_service().create(payload)
    return jsonify(result.model_dump(mode="json")), 201


@bp.route("/users/<user_id>", methods=["GET"])
def get_user(user_id):
    """
    Fetch a user, served from Redis when a fresh copy is cached.
    The X-Cache header reports HIT or MISS.
    """
    lookup = ServiceFactory.user_cache_service().get_with_cache(user_id)

    response = jsonify(lookup.user.model_dump(mode="json"))
    response.headers["X-Cache"] = "HIT" if lookup.cache_hit else "MISS"
    return response, 200


@bp.route("/users/<user_id>", methods=["PUT"])
def update_user(user_id):
    """
    Replace all fields of a user. Omitted fields are not kept from the
    stored record.
    """
    payload = _json_body()
    if payload is None:
        return jsonify({"error": "Error parsing body"}), 400

    result = ServiceFactory.user_service().update(user_id, payload)
    ServiceFactory.user_cache_service().on_write(user_id)
    return jsonify(result.model_dump()), 200


@bp.route("/users/<user_id>", methods=["DELETE"])
def delete_user(user_id):
    result = ServiceFactory.user_service().delete(user_id)
    ServiceFactory.user_cache_service().on_write(user_id)
    return jsonify(result.model_dump()), 200
