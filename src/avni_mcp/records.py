"""Response records for the Avni REST API.

Each record carries only the fields the tools report back. Unknown JSON
fields are ignored, so the models keep working as the Avni API grows.
Records are frozen pydantic models: equality is structural.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class AvniRecord(BaseModel):
    """Base class for all response records."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class Organisation(AvniRecord):
    id: int
    name: str | None = None


class User(AvniRecord):
    id: int
    username: str | None = None


class AddressLevelType(AvniRecord):
    """A location type such as State or District.

    ``level`` is fractional in Avni (e.g. 2.5 sits between District and
    Block), so it is kept as a float.
    """

    id: int
    name: str | None = None
    level: float | None = None


class Location(AvniRecord):
    id: int
    name: str | None = None


class Catchment(AvniRecord):
    id: int
    name: str | None = None


class UserGroup(AvniRecord):
    id: int
    name: str | None = None


class SubjectType(AvniRecord):
    uuid: str
    name: str | None = None


class Program(AvniRecord):
    uuid: str
    name: str | None = None


class EncounterType(AvniRecord):
    uuid: str
    name: str | None = None
