from flask import Blueprint

from ..utils.response import health_check

core_bp = Blueprint("core", __name__)


@core_bp.route("/health")
def health():
    return health_check()
