from pydantic import BaseModel, ConfigDict, Field

from ...domain.entities import Role

class UserCreate(BaseModel):
    email: str | None = None
    name: str | None = None
    last_name1: str | None = Field(None, alias="lastName1")
    last_name2: str | None = Field(None, alias="lastName2")
    role: Role | None = None
    model_config = ConfigDict(populate_by_name=True)

class UserUpdate(BaseModel):
    email: str | None = None
    name: str | None = None
    last_name1: str | None = Field(None, alias="lastName1")
    last_name2: str | None = Field(None, alias="lastName2")
    role: Role | None = None
    model_config = ConfigDict(populate_by_name=True)

class UserOut(BaseModel):
    id: int
    email: str
    name: str
    last_name1: str = Field(alias="lastName1")
    last_name2: str | None = Field(None, alias="lastName2")
    role: Role | None = None
    model_config = ConfigDict(populate_by_name=True)

class UserListEmbedded(BaseModel):
    userList: list[UserOut]

class UserListOut(BaseModel):
    embedded: UserListEmbedded = Field(alias="_embedded")
    model_config = ConfigDict(populate_by_name=True)
