from flask import Blueprint

bp = Blueprint("course", __name__)

from . import routes  # noqa: E402,F401
