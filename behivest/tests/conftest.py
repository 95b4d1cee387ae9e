from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from behivest.app import create_app
from behivest.config import Settings


@pytest.fixture()
def client() -> FlaskClient:
    flask_app = create_app(Settings(log_level="DEBUG"))
    with flask_app.test_client() as test_client:
        yield test_client
