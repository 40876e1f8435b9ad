"""Sample record written by ``spa-json demo``."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Person(BaseModel):
    age: float
    name: str
    friends: list[Person] = Field(default_factory=list)


def sample_person() -> Person:
    return Person(
        age=30.0,
        name="sander",
        friends=[Person(age=55.33333, name="Horst Schlämmer")],
    )
