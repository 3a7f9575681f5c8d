import os
import random
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from mazemaster import create_app  # noqa: E402


@pytest.fixture(scope="session")
def test_app():
    app = create_app({"TESTING": True})
    return app


@pytest.fixture(autouse=True)
def _push_app_context(test_app):
    ctx = test_app.app_context()
    ctx.push()
    try:
        yield
    finally:
        ctx.pop()


@pytest.fixture()
def client(test_app):
    return test_app.test_client()


@pytest.fixture()
def rng():
    """Seeded generator so randomized engine calls replay identically."""
    return random.Random(1234)


class ScriptedRng:
    """Stand-in generator returning queued values for ``random()`` draws."""

    def __init__(self, *values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.values.pop(0)

    def randint(self, a, b):
        self.calls += 1
        return self.values.pop(0)

    def choice(self, seq):
        self.calls += 1
        return seq[0]


@pytest.fixture()
def scripted_rng():
    return ScriptedRng
