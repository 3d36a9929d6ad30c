import threading
from dataclasses import replace

from sqlalchemy import select
from sqlalchemy.orm import Session

from .models import UserORM
from ..domain.entities import User
from ..application.user_service import IUserRepository

def to_domain(u: UserORM) -> User:
    return User(
        id=u.id,
        email=u.email,
        name=u.name,
        last_name1=u.last_name1,
        last_name2=u.last_name2,
        role=u.role,
    )

class SqlUserRepository(IUserRepository):
    def __init__(self, db: Session): self.db = db

    def find_all(self) -> list[User]:
        rows = self.db.scalars(select(UserORM).order_by(UserORM.id)).all()
        return [to_domain(r) for r in rows]

    def find_by_email(self, email: str) -> User | None:
        row = self.db.query(UserORM).filter(UserORM.email == email).first()
        return to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> User | None:
        row = self.db.get(UserORM, user_id)
        return to_domain(row) if row else None

    def exists_by_id(self, user_id: int) -> bool:
        return self.db.query(UserORM.id).filter(UserORM.id == user_id).first() is not None

    def save(self, user: User) -> User:
        row = self.db.get(UserORM, user.id) if user.id is not None else None
        if row is None:
            row = UserORM(id=user.id)
            self.db.add(row)
        row.email = user.email
        row.name = user.name
        row.last_name1 = user.last_name1
        row.last_name2 = user.last_name2
        row.role = user.role
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(row)
        return to_domain(row)

    def delete_by_id(self, user_id: int) -> None:
        row = self.db.get(UserORM, user_id)
        if row is None:
            return
        self.db.delete(row); self.db.commit()


class InMemoryUserRepository(IUserRepository):
    """Dict-backed store; ids are assigned in increasing order.

    Shared by every request; all access holds ``_lock``.
    """

    def __init__(self):
        self._rows: dict[int, User] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def find_all(self) -> list[User]:
        with self._lock:
            return [replace(self._rows[k]) for k in sorted(self._rows)]

    def find_by_email(self, email: str) -> User | None:
        with self._lock:
            for row in self._rows.values():
                if row.email == email:
                    return replace(row)
        return None

    def find_by_id(self, user_id: int) -> User | None:
        with self._lock:
            row = self._rows.get(user_id)
            return replace(row) if row else None

    def exists_by_id(self, user_id: int) -> bool:
        with self._lock:
            return user_id in self._rows

    def save(self, user: User) -> User:
        with self._lock:
            if user.id is None:
                user = replace(user, id=self._next_id)
            self._next_id = max(self._next_id, user.id + 1)
            self._rows[user.id] = replace(user)
            return replace(user)

    def delete_by_id(self, user_id: int) -> None:
        with self._lock:
            self._rows.pop(user_id, None)
