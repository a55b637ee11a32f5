from pydantic import ConfigDict, EmailStr, Field
from typing import ClassVar
from datetime import datetime

from teamhub.constants.role import UserRole
from teamhub.models.common.document import Document
from teamhub.models.common.pyobjectid import PyObjectId


class UserModel(Document):
    """
    Model for users who sign in with email and password.
    ``password`` always holds a hash, never the raw secret.
    """

    collection_name: ClassVar[str] = "users"

    id: PyObjectId | None = Field(None, alias="_id")
    email: EmailStr
    password: str
    name: str
    role: UserRole = Field(UserRole.MEMBER, validate_default=True)
    createdAt: datetime | None = None
    updatedAt: datetime | None = None

    model_config = ConfigDict(use_enum_values=True)
