from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RegisterIn(BaseModel):
    name: str | None = None
    contact: str | None = None


class SaveResultIn(BaseModel):
    prize: str | None = None


class AdminLoginIn(BaseModel):
    password: str | None = None


class CheckUserOut(BaseModel):
    already_played: bool = Field(alias="alreadyPlayed")
    prize: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class SuccessOut(BaseModel):
    success: bool


class SaveResultOut(BaseModel):
    success: bool
    prize: str | None


class SpinOut(BaseModel):
    id: int
    name: str | None
    contact: str | None
    prize: str | None
    timestamp: datetime | None

    model_config = ConfigDict(from_attributes=True)
