import os
import sys
import pytest

CURRENT_DIR = os.path.dirname(__file__)
SERVICE_ROOT = os.path.dirname(CURRENT_DIR)
if SERVICE_ROOT not in sys.path:
    sys.path.insert(0, SERVICE_ROOT)

# Must be set before users_service.config is imported
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["STORAGE_BACKEND"] = "sqlalchemy"
os.environ["LIST_WRAPPED"] = "true"

from users_service.application.dto import RegistrationInput
from users_service.application.user_service import UserService
from users_service.domain.entities import Role
from users_service.infrastructure.repositories import InMemoryUserRepository


@pytest.fixture
def repo():
    return InMemoryUserRepository()


@pytest.fixture
def service(repo):
    return UserService(repo=repo)


@pytest.fixture
def jorge():
    return RegistrationInput(
        email="jorge@correo.com",
        name="Jorge",
        last_name1="Reina",
        last_name2="Romero",
        role=Role.PROFESSOR,
    )
