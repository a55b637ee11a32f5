from datetime import datetime

from pydantic import BaseModel, ConfigDict

from teamhub.constants.team import Gender


class MemberDTO(BaseModel):
    name: str
    gender: Gender
    dateOfBirth: datetime
    contactNo: str

    model_config = ConfigDict(use_enum_values=True, from_attributes=True)
