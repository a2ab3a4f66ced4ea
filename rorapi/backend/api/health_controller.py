import hmac
from functools import wraps

from flask import Blueprint, Response, current_app, request

from shared.modules.log.logger import get_logger

bp = Blueprint("health_controller", __name__)
logger = get_logger(__name__)


def _check_credentials(username: str, password: str) -> bool:
    users = current_app.config["BASIC_AUTH_USERS"]
    expected = users.get(username)
    if expected is None:
        return False
    return hmac.compare_digest(expected.encode("utf-8"), password.encode("utf-8"))


def basic_auth_required(view):
    """Reject the request with 401 unless it carries valid Basic credentials."""
    @wraps(view)
    def wrapper(*args, **kwargs):
        auth = request.authorization
        if (
            auth is None
            or auth.type != "basic"
            or not _check_credentials(auth.username or "", auth.password or "")
        ):
            return Response(
                "Unauthorized",
                status=401,
                headers={"WWW-Authenticate": 'Basic realm="Restricted"'},
            )
        return view(*args, **kwargs)
    return wrapper


@bp.route("/", methods=["GET"])
@basic_auth_required
def index():
    logger.info("Received / request")
    return "Hello, World 👋!", 200


@bp.route("/healthcheck", methods=["GET"])
def healthcheck():
    logger.info("Received /healthcheck request")
    return "OK", 200
