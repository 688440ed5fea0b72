from flask import Blueprint, jsonify

from app.errors import ServiceError
from app.routes.helpers import error_response, load_body
from app.schemas.auth_schema import CredentialsSchema
from app.services import auth_service


auth_bp = Blueprint("auth", __name__)

credentials_schema = CredentialsSchema()


@auth_bp.route("/register", methods=["POST"])
def register():
    try:
        data = load_body(credentials_schema)
        user = auth_service.register(data["username"], data["password"])
        return jsonify({"message": "User registered", "user": user}), 201
    except ServiceError as e:
        return error_response(e)


@auth_bp.route("/login", methods=["POST"])
def login():
    try:
        data = load_body(credentials_schema)
        user = auth_service.login(data["username"], data["password"])
        return jsonify({"message": "Login successful", "user": user}), 200
    except ServiceError as e:
        return error_response(e)
