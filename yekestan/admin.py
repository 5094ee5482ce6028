"""The administrator's panel: managing accounts and inspecting courses."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, TextIO

from yekestan.store import (
    COURSES_FILE,
    ENROLMENTS_FILE,
    TRASH_FILE,
    USERS_FILE,
    PathLike,
    StoreError,
    User,
    append_user,
    ensure_file,
    load_records,
    save_records,
)

_EDITABLE_FIELDS = ("name", "lastname", "password")

_MENU = (
    "what do you want to do?",
    "1-add new ostad or daneshjoo",
    "2-show list karbaran",
    "3-virayesh karbaran",
    "4-hazf karbar",
    "5-restore karbar",
    "6-show ettelaat doroos",
    "7-show nomreh ostad",
    "8-exit",
)


class _Console:
    """Reads whitespace-separated words and whole lines from a text stream."""

    def __init__(self, inp: TextIO, out: TextIO) -> None:
        self._inp = inp
        self._out = out
        self._rest: Optional[str] = None

    def say(self, *lines: object) -> None:
        for line in lines:
            self._out.write(f"{line}\n")

    def _next_line(self) -> str:
        line = self._inp.readline()
        if not line:
            raise EOFError("input exhausted")
        return line.rstrip("\r\n")

    def word(self) -> str:
        while not (self._rest or "").strip():
            self._rest = self._next_line()
        stripped = self._rest.lstrip()
        token = stripped.split(None, 1)[0]
        self._rest = stripped[len(token):]
        return token

    def line(self) -> str:
        rest, self._rest = self._rest, None
        if rest:
            return rest[1:]
        return self._next_line()

    def integer(self) -> int:
        return int(self.word())

    def number(self) -> float:
        return float(self.word())


def _run_menu(
    console: _Console,
    menu: tuple[str, ...],
    actions: dict[int, Callable[[_Console], Optional[bool]]],
    exit_option: int,
) -> None:
    """Show *menu* until the exit option is chosen or input ends."""
    try:
        while True:
            console.say(*menu)
            try:
                option = console.integer()
            except ValueError:
                continue
            if option == exit_option:
                return
            action = actions.get(option)
            if action is None:
                continue
            try:
                if action(console):
                    return
            except StoreError:
                console.say("dobareh parse")
            except (ValueError, IndexError) as exc:
                console.say(exc)
    except EOFError:
        return


@dataclass
class Admin:
    """The administrator, working on the data files in *data_dir*."""

    data_dir: PathLike = "."

    def _path(self, filename: str) -> Path:
        return Path(self.data_dir) / filename

    def user_names(self) -> list[str]:
        """Return the names of all users, in stored order."""
        return [record.get("name") for record in load_records(self._path(USERS_FILE))]

    def _usernames(self) -> list[str]:
        return [
            record.get("username") for record in load_records(self._path(USERS_FILE))
        ]

    def edit_user(self, username: str, field: str, value: str) -> bool:
        """Change the name, lastname or password of a user; return whether found."""
        if field not in _EDITABLE_FIELDS:
            raise ValueError(f"cannot edit field {field!r}")
        path = self._path(USERS_FILE)
        records = load_records(path)
        for record in records:
            if record.get("username") == username:
                record[field] = value
                save_records(path, records)
                return True
        return False

    def delete_user(self, username: str) -> bool:
        """Move a user to the trash file; return whether the user was found."""
        path = self._path(USERS_FILE)
        records = load_records(path)
        found = False
        for position, record in enumerate(records):
            if record.get("username") == username:
                user = User.from_record(record)
                append_user(
                    self._path(TRASH_FILE), user, int(record.get("paneloption", 0))
                )
                del records[position]
                found = True
                break
        save_records(path, records)
        return found

    def restore_users(self) -> list[User]:
        """Move every user in the trash back to the users file and empty the trash."""
        trash = self._path(TRASH_FILE)
        ensure_file(trash)
        records = load_records(trash)
        restored = []
        for record in records:
            user = User.from_record(record)
            append_user(self._path(USERS_FILE), user, int(record.get("paneloption", 0)))
            restored.append(user)
        trash.write_text("", encoding="utf-8")
        return restored

    def courses_text(self) -> str:
        """Return the whole courses file as indented JSON."""
        return json.dumps(
            load_records(self._path(COURSES_FILE)), indent=4, ensure_ascii=False
        )

    def professor_ratings(self, username: str, course_name: str) -> list[float]:
        """Return the ratings the student gave to the professor of the course."""
        return [
            float(record.get("nomreh_ostad", 0))
            for record in load_records(self._path(ENROLMENTS_FILE))
            if record.get("username") == username and record.get("dars") == course_name
        ]

    def _list_dialog(self, console: _Console) -> None:
        console.say("asami:", *self.user_names())

    def _edit_dialog(self, console: _Console) -> bool:
        console.say("what do ypu want to change:", "1-name", "2-latname", "3-password")
        option = console.integer()
        console.say("Enter the username of karbar that you wanna change:")
        username = console.word()
        if username not in self._usernames():
            return False
        if not 1 <= option <= len(_EDITABLE_FIELDS):
            console.say("dalghak enghgadr eshtebah nazan digeh ah!!!!!")
            return True
        field = _EDITABLE_FIELDS[option - 1]
        console.say(f"{field} jadid")
        self.edit_user(username, field, console.word())
        return False

    def _delete_dialog(self, console: _Console) -> None:
        console.say("Enter the username of karbar that you wanna delete:")
        if not self.delete_user(console.word()):
            console.say("user not found!")

    def _restore_dialog(self, console: _Console) -> None:
        if not self.restore_users():
            console.say("don't have any karbar in trashfile")

    def _courses_dialog(self, console: _Console) -> None:
        console.say(self.courses_text())

    def _ratings_dialog(self, console: _Console) -> None:
        console.say("Enter username daneshjoo nomrehdahandeh")
        username = console.word()
        console.say("Enter dars:")
        course_name = console.word()
        console.say(*self.professor_ratings(username, course_name))

    def run(self, inp: Optional[TextIO] = None, out: Optional[TextIO] = None) -> None:
        """Drive the administrator's menu from *inp*, writing to *out*."""
        console = _Console(inp or sys.stdin, out or sys.stdout)
        console.say("welcome boss!")
        actions: dict[int, Callable[[_Console], Optional[bool]]] = {
            2: self._list_dialog,
            3: self._edit_dialog,
            4: self._delete_dialog,
            5: self._restore_dialog,
            6: self._courses_dialog,
            7: self._ratings_dialog,
        }
        _run_menu(console, _MENU, actions, exit_option=8)