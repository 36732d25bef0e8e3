from pydantic import BaseModel, ConfigDict
from sqlmodel import Field, SQLModel


class UserBase(SQLModel):
    username: str = Field(description="The username of the user")
    email: str = Field(description="The email of the user")
    password: str = Field(description="The password of the user")
    role: str = Field(description='The role of the user (e.g., "user" or "admin")')


class User(UserBase, table=True):
    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)


class UserRead(BaseModel):
    """A row as stored; nullable columns and extra columns pass through."""

    model_config = ConfigDict(extra="allow")

    id: int
    username: str | None = None
    email: str | None = None
    password: str | None = None
    role: str | None = None


class UserCreate(UserBase):
    """Body for both create and update; every field is overwritten."""


class Message(SQLModel):
    message: str


class ErrorMessage(SQLModel):
    error: str
