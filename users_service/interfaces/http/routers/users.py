from fastapi import APIRouter, Depends, HTTPException, status

from ....application.dto import RegistrationInput, UserPatch
from ....application.user_service import UserService
from ....config import settings
from ....domain.entities import User
from ....domain.exceptions import DuplicateEmail, UserServiceError, ValidationFailed
from ....infrastructure.metrics import user_operations_total
from ..dependencies import get_user_service
from ..schemas import UserCreate, UserListEmbedded, UserListOut, UserOut, UserUpdate

router = APIRouter(prefix="/api/users", tags=["users"])

VALIDATION_MESSAGES = {
    "email": "El correo es obligatorio",
    "name": "El nombre es obligatorio",
    "lastName1": "El primer apellido es obligatorio",
}
DUPLICATE_EMAIL_MESSAGE = "Ya existe un usuario con el correo"
NOT_FOUND_MESSAGE = "El usuario no existe"

# PATCH fields that accept an explicit null
NULLABLE_PATCH_FIELDS = {"last_name2"}


def to_http_error(e: UserServiceError) -> HTTPException:
    if isinstance(e, ValidationFailed):
        return HTTPException(status.HTTP_422_UNPROCESSABLE_ENTITY, VALIDATION_MESSAGES[e.field])
    if isinstance(e, DuplicateEmail):
        return HTTPException(status.HTTP_406_NOT_ACCEPTABLE, DUPLICATE_EMAIL_MESSAGE)
    # NotFound
    return HTTPException(status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE)


def to_out(user: User) -> UserOut:
    return UserOut(
        id=user.id,
        email=user.email,
        name=user.name,
        last_name1=user.last_name1,
        last_name2=user.last_name2,
        role=user.role,
    )


def to_patch(payload: UserUpdate) -> UserPatch:
    values = {}
    for field in payload.model_fields_set:
        value = getattr(payload, field)
        if value is None and field not in NULLABLE_PATCH_FIELDS:
            continue
        values[field] = value
    return UserPatch(**values)


@router.get("", response_model=UserListOut | list[UserOut])
def list_users(service: UserService = Depends(get_user_service)):
    users = [to_out(u) for u in service.list_all()]
    if not settings.LIST_WRAPPED:
        return users
    return UserListOut(embedded=UserListEmbedded(userList=users))

@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, service: UserService = Depends(get_user_service)):
    data = RegistrationInput(
        email=payload.email,
        name=payload.name,
        last_name1=payload.last_name1,
        last_name2=payload.last_name2,
        role=payload.role,
    )
    try:
        user = service.register(data)
    except UserServiceError as e:
        user_operations_total.labels(operation="register", outcome=type(e).__name__).inc()
        raise to_http_error(e)
    user_operations_total.labels(operation="register", outcome="ok").inc()
    return to_out(user)

@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    user = service.get_user(user_id)
    if user is None: raise HTTPException(404, NOT_FOUND_MESSAGE)
    return to_out(user)

@router.patch("/{user_id}", response_model=UserOut)
def update_user(user_id: int, payload: UserUpdate, service: UserService = Depends(get_user_service)):
    try:
        user = service.update_user(user_id, to_patch(payload))
    except UserServiceError as e:
        user_operations_total.labels(operation="update", outcome=type(e).__name__).inc()
        raise to_http_error(e)
    user_operations_total.labels(operation="update", outcome="ok").inc()
    return to_out(user)

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    try:
        service.delete_user_by_id(user_id)
    except UserServiceError as e:
        user_operations_total.labels(operation="delete", outcome=type(e).__name__).inc()
        raise to_http_error(e)
    user_operations_total.labels(operation="delete", outcome="ok").inc()
