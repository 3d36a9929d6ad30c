from dataclasses import dataclass
from typing import Any

from ..domain.entities import Role


class _Unset:
    """Marker for a patch field that was not supplied."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass
class RegistrationInput:
    email: str | None
    name: str | None
    last_name1: str | None
    last_name2: str | None = None
    role: Role | None = None


@dataclass
class UserPatch:
    email: str = UNSET
    name: str = UNSET
    last_name1: str = UNSET
    last_name2: str | None = UNSET
    role: Role = UNSET

    def is_set(self, field: str) -> bool:
        return getattr(self, field) is not UNSET
