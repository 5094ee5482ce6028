"""JSON-file storage shared by every panel: users, trash, courses and enrolments."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

PathLike = Union[str, Path]

USERS_FILE = "info.json"
TRASH_FILE = "restore.json"
COURSES_FILE = "doroos.json"
ENROLMENTS_FILE = "daneshjoo.json"

_USER_FIELDS = ("username", "password", "name", "lastname")


class StoreError(Exception):
    """Raised when a data file or a record in it cannot be understood."""


@dataclass
class User:
    """An account of the system, as kept in the users file."""

    username: str
    password: str
    name: str = ""
    lastname: str = ""

    def to_record(self, panel: int) -> dict[str, Any]:
        """Return the JSON record for this user with the given panel number."""
        return {
            "username": self.username,
            "password": self.password,
            "name": self.name,
            "lastname": self.lastname,
            "paneloption": int(panel),
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "User":
        """Build a user from a stored record."""
        try:
            values = [str(record[field]) for field in _USER_FIELDS]
        except KeyError as exc:
            raise StoreError(f"record lacks field {exc}") from None
        except TypeError:
            raise StoreError(f"not a user record: {record!r}") from None
        return cls(*values)


def ensure_file(path: PathLike) -> None:
    """Create an empty file at *path* unless one is already there."""
    Path(path).touch(exist_ok=True)


def load_records(path: PathLike) -> list[Any]:
    """Read the JSON array stored at *path*; a missing or empty file holds none."""
    file_path = Path(path)
    if not file_path.exists():
        return []
    text = file_path.read_text(encoding="utf-8")
    if not text.strip():
        return []
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise StoreError(f"cannot parse {file_path}: {exc}") from exc
    if not isinstance(data, list):
        raise StoreError(f"{file_path} does not hold a JSON array")
    return data


def save_records(path: PathLike, records: list[Any]) -> None:
    """Write *records* to *path* as a JSON array indented by four spaces."""
    Path(path).write_text(
        json.dumps(records, indent=4, ensure_ascii=False), encoding="utf-8"
    )


def append_user(path: PathLike, user: User, panel: int) -> None:
    """Add *user* with its panel number to the end of the file at *path*."""
    records = load_records(path)
    records.append(user.to_record(panel))
    save_records(path, records)