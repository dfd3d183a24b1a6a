import os
import sys

import bcrypt
import pytest

CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.dirname(CURRENT_DIR)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

import config
from core.record_store import UserRecordStore
from models.user import BillingInfo, User


@pytest.fixture(autouse=True)
def clean_gym_environment(monkeypatch):
    """Keeps GYM_* variables from the developer's shell out of the tests"""
    for name in list(os.environ):
        if name.startswith("GYM_"):
            monkeypatch.delenv(name)


@pytest.fixture
def users_file(tmp_path):
    return tmp_path / "users.txt"


@pytest.fixture
def store(users_file):
    """Empty store on a file that does not exist yet"""
    s = UserRecordStore(users_file)
    s.initialize()
    return s


@pytest.fixture
def alice():
    return User("Alice Tan", "alicet", 2, BillingInfo("CARD", "alice@x.com", "555-1111"))


@pytest.fixture
def bob():
    return User("Bob Lim", "boblim", 3, BillingInfo("CASH", "bob@y.org", "555-2222"))


@pytest.fixture
def populated_store(store, alice, bob):
    store.append(alice)
    store.append(bob)
    return store


@pytest.fixture
def settings(tmp_path, users_file):
    # Low cost factor keeps the tests fast
    pin_hash = bcrypt.hashpw(b"1234", bcrypt.gensalt(rounds=4))
    return config.Settings(
        users_file=users_file,
        payslip_folder=tmp_path / "payslips",
        admin_pin_hash=pin_hash,
    )


@pytest.fixture
def scripted_input():
    """
    Returns a factory for fake input functions that answer prompts
    from a list and raise EOFError once the list runs out.
    """
    def make(answers):
        remaining = list(answers)

        def fake_input(prompt=""):
            if not remaining:
                raise EOFError
            return remaining.pop(0)
        return fake_input
    return make
