import structlog

from ..domain.entities import User
from ..domain.exceptions import DuplicateEmail, NotFound, ValidationFailed
from .dto import RegistrationInput, UserPatch

logger = structlog.get_logger()

# field checked, attribute on RegistrationInput
REQUIRED_FIELDS = (
    ("email", "email"),
    ("name", "name"),
    ("lastName1", "last_name1"),
)


class IUserRepository:
    def find_all(self) -> list[User]: ...
    def find_by_email(self, email: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def exists_by_id(self, user_id: int) -> bool: ...
    def save(self, user: User) -> User: ...
    def delete_by_id(self, user_id: int) -> None: ...


def validate_registration(data: RegistrationInput) -> None:
    """Raise ValidationFailed for the first required field that is empty."""
    for field, attr in REQUIRED_FIELDS:
        value = getattr(data, attr)
        if value is None or value == "":
            raise ValidationFailed(field)


def merge_patch(user: User, patch: UserPatch) -> User:
    """Return a copy of ``user`` with the fields set in ``patch`` replaced."""
    return User(
        id=user.id,
        email=patch.email if patch.is_set("email") else user.email,
        name=patch.name if patch.is_set("name") else user.name,
        last_name1=patch.last_name1 if patch.is_set("last_name1") else user.last_name1,
        last_name2=patch.last_name2 if patch.is_set("last_name2") else user.last_name2,
        role=patch.role if patch.is_set("role") else user.role,
    )


class UserService:
    def __init__(self, repo: IUserRepository):
        self.repo = repo

    def list_all(self) -> list[User]:
        return self.repo.find_all()

    def user_exists(self, email: str) -> bool:
        return self.repo.find_by_email(email) is not None

    def register(self, data: RegistrationInput) -> User:
        try:
            validate_registration(data)
        except ValidationFailed as e:
            logger.warning("user_rejected", reason="validation", field=e.field)
            raise
        if self.user_exists(data.email):
            logger.warning("user_rejected", reason="duplicate_email", email=data.email)
            raise DuplicateEmail(data.email)

        user = User(
            id=None,
            email=data.email,
            name=data.name,
            last_name1=data.last_name1,
            last_name2=data.last_name2,
            role=data.role,
        )
        saved = self.repo.save(user)
        logger.info("user_registered", user_id=saved.id, email=saved.email)
        return saved

    def get_user(self, user_id: int) -> User | None:
        return self.repo.find_by_id(user_id)

    def delete_user_by_id(self, user_id: int) -> None:
        if not self.repo.exists_by_id(user_id):
            raise NotFound(user_id)
        self.repo.delete_by_id(user_id)
        logger.info("user_deleted", user_id=user_id)

    def update_user(self, user_id: int, patch: UserPatch) -> User:
        # No re-validation and no email uniqueness check here, unlike register.
        user = self.repo.find_by_id(user_id)
        if user is None:
            raise NotFound(user_id)
        saved = self.repo.save(merge_patch(user, patch))
        logger.info("user_updated", user_id=saved.id)
        return saved
