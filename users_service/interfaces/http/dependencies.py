from fastapi import Depends
from sqlalchemy.orm import Session

from ...application.user_service import IUserRepository, UserService
from ...config import settings
from ...infrastructure.db import get_db
from ...infrastructure.repositories import InMemoryUserRepository, SqlUserRepository

_memory_repo = InMemoryUserRepository()

def get_user_repository(db: Session = Depends(get_db)) -> IUserRepository:
    if settings.STORAGE_BACKEND == "memory":
        return _memory_repo
    return SqlUserRepository(db)

def get_user_service(repo: IUserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(repo=repo)
