"""
Shared fixtures for the greeting server tests.
"""
import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from greeting import GreetingStore
from users import UserRegistry


@pytest.fixture
def store():
    return GreetingStore("Hello")


@pytest.fixture
def registry():
    return UserRegistry()


@pytest.fixture
def app(store, registry):
    app = create_app(config={"TESTING": True, "GREETING": "Hello"}, greetings=store, registry=registry)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
