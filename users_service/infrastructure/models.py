from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from ..domain.entities import Role


class Base(DeclarativeBase): pass

class UserORM(Base):
    __tablename__ = "users"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name1: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[Role | None] = mapped_column(Enum(Role, native_enum=False, length=32), nullable=True)

    def __repr__(self) -> str:
        return f"UserORM(id={self.id!r}, email={self.email!r})"
