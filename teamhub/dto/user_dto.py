from datetime import datetime

from pydantic import BaseModel, ConfigDict

from teamhub.constants.role import UserRole
from teamhub.models.user import UserModel


class UserDTO(BaseModel):
    id: str
    email: str
    name: str
    role: UserRole
    createdAt: datetime | None = None

    model_config = ConfigDict(use_enum_values=True)

    @classmethod
    def from_model(cls, user: UserModel) -> "UserDTO":
        return cls(id=str(user.id), email=user.email, name=user.name, role=user.role, createdAt=user.createdAt)


class RegisterUserDTO(BaseModel):
    email: str
    password: str
    name: str
    role: UserRole
