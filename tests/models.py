"""Tables used only by the test suite."""
from typing import Optional
from sqlmodel import SQLModel, Field


class Team(SQLModel, table=True):
    __tablename__ = "team"
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True)


class Member(SQLModel, table=True):
    __tablename__ = "member"
    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(index=True)
    age: int = 0
    team_id: Optional[int] = Field(default=None, foreign_key="team.id")
