from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    PROFESSOR = "PROFESSOR"
    STUDENT = "STUDENT"
    STAFF = "STAFF"


@dataclass
class User:
    id: int | None
    email: str
    name: str
    last_name1: str
    last_name2: str | None = None
    role: Role | None = None
