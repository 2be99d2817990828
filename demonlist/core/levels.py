from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


@dataclass(frozen=True)
class Record:
    percent: int
    user: str
    link: Optional[str] = None
    mobile: bool = False


@dataclass(frozen=True)
class Level:
    id: Union[int, str]
    name: str
    author: str
    creators: List[str]
    verifier: str
    percent_to_qualify: int
    records: List[Record] = field(default_factory=list)
    showcase: Optional[str] = None
    verification: Optional[str] = None
    password: Optional[str] = None
    path: str = ""


class Role(Enum):
    OWNER = "owner"
    ADMIN = "admin"
    HELPER = "helper"
    DEV = "dev"
    TRIAL = "trial"


@dataclass(frozen=True)
class Editor:
    name: str
    role: Role
    link: Optional[str] = None


@dataclass(frozen=True)
class Loaded:
    """A list position whose level file was read successfully."""

    level: Level


@dataclass(frozen=True)
class Failed:
    """A list position whose level file could not be read; ``token`` is its file stem."""

    token: str


Slot = Union[Loaded, Failed]


def record_from_dict(raw: dict) -> Record:
    if not isinstance(raw, dict):
        raise TypeError(f"record: expected a JSON object, got {type(raw).__name__}")
    link = raw.get("link")
    return Record(
        percent=int(raw["percent"]),
        user=str(raw["user"]),
        link=str(link) if link else None,
        mobile=bool(raw.get("mobile", False)),
    )


def level_from_dict(raw: dict, path: str = "") -> Level:
    """Build a Level from a decoded level file.

    Raises KeyError, TypeError or ValueError when a required field is missing
    or has the wrong shape. Records are ordered by percent, highest first.
    """
    if not isinstance(raw, dict):
        raise TypeError(f"{path}: expected a JSON object")
    records = [record_from_dict(r) for r in raw["records"]]
    records.sort(key=lambda r: r.percent, reverse=True)
    return Level(
        id=raw["id"],
        name=str(raw["name"]),
        author=str(raw["author"]),
        creators=[str(c) for c in raw.get("creators", [])],
        verifier=str(raw["verifier"]),
        percent_to_qualify=int(raw["percentToQualify"]),
        records=records,
        showcase=raw.get("showcase") or None,
        verification=raw.get("verification") or None,
        password=raw.get("password") or None,
        path=path,
    )


def editor_from_dict(raw: dict) -> Editor:
    if not isinstance(raw, dict):
        raise TypeError(f"editor: expected a JSON object, got {type(raw).__name__}")
    link = raw.get("link")
    return Editor(
        name=str(raw["name"]),
        role=Role(raw["role"]),
        link=str(link) if link else None,
    )
