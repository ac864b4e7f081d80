"""
SQLModel database models for users.
"""
import enum
from typing import Optional

from sqlalchemy import Column, String
from sqlalchemy.dialects.postgresql import ENUM
from sqlmodel import Field, SQLModel


class Role(str, enum.Enum):
    standard = "standard"
    admin = "admin"


class User(SQLModel, table=True):
    """Pre-provisioned API user. Never written by this service."""
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=30)
    last_name: str = Field(max_length=30)
    email: str = Field(sa_column=Column(String(254), unique=True, nullable=False))  # email_type domain
    role: Role = Field(sa_column=Column(ENUM(Role, name="role_type", create_type=False), nullable=False))
    api_token: str = Field(max_length=32, unique=True, index=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
