"""
Shared pytest fixtures.

Builds an independent router per test from the testing configuration,
with a few extra routes that exercise the response helpers.
"""

import logging

import pytest
from flask import Blueprint, abort

from service import create_app
from service.config import CORSPolicy, TestingConfig
from service.router import register_blueprint
from service.utils.response import (
    response_authenticate,
    response_bad_request,
    response_created,
    response_internal_error,
    response_success,
    response_write,
)

ACCESS_LOGGER = "http-access"


def build_sample_blueprint() -> Blueprint:
    sample_bp = Blueprint("sample", __name__)

    @sample_bp.route("/items", methods=["GET"])
    def list_items():
        return response_success("items listed")

    @sample_bp.route("/items", methods=["POST"])
    def create_item():
        return response_created()

    @sample_bp.route("/invalid")
    def invalid():
        return response_bad_request("Missing Field X")

    @sample_bp.route("/broken")
    def broken():
        return response_internal_error("")

    @sample_bp.route("/secret")
    def secret():
        return response_authenticate()

    @sample_bp.route("/login-required")
    def login_required():
        abort(401)

    @sample_bp.route("/forbidden")
    def forbidden():
        abort(403)

    @sample_bp.route("/unserializable")
    def unserializable():
        return response_write(200, {"value": object()})

    return sample_bp


@pytest.fixture
def cors_policy():
    return CORSPolicy(
        headers=("Content-Type", "Authorization"),
        origins=("http://allowed.example",),
        methods=("GET", "POST"),
    )


@pytest.fixture
def app(cors_policy):
    app = create_app(TestingConfig, cors_policy=cors_policy)
    register_blueprint(app, build_sample_blueprint())
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def access_logs(caplog):
    caplog.set_level(logging.INFO, logger=ACCESS_LOGGER)

    def records(level=None):
        return [
            r for r in caplog.records
            if r.name == ACCESS_LOGGER and (level is None or r.levelno == level)
        ]

    return records
