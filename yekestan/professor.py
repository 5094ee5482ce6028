"""The professor's panel: creating courses, grading and reading answers."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Optional, TextIO

from yekestan.admin import _Console, _run_menu
from yekestan.course import Course, CourseFullError
from yekestan.store import (
    COURSES_FILE,
    ENROLMENTS_FILE,
    PathLike,
    ensure_file,
    load_records,
    save_records,
)

_MENU = (
    "what do you want to do?",
    "1-namayesh list daneshjooha",
    "2-create new dars",
    "3-sabt nomreh dars",
    "4-create ettelaeieh",
    "5-gharardadan taklif",
    "6-sabt nomreh taklif",
    "7-show javab taklif",
    "8-exit",
)


@dataclass
class Professor:
    """A professor, working on the data files in *data_dir*."""

    data_dir: PathLike = "."
    course: Optional[Course] = field(default=None)

    def __post_init__(self) -> None:
        if self.course is None:
            self.course = Course(data_dir=self.data_dir)

    def _path(self, filename: str) -> Path:
        return Path(self.data_dir) / filename

    def students_of(self, course_name: str) -> list[str]:
        """Return the usernames of the students enrolled in the course."""
        return [
            record.get("username")
            for record in load_records(self._path(ENROLMENTS_FILE))
            if record.get("dars") == course_name
        ]

    def create_course(self, name: str, info: str, capacity: int) -> Course:
        """Create a course, add it to the courses file and make it current."""
        self.course = Course(
            name=name, info=info, capacity=int(capacity), data_dir=self.data_dir
        )
        path = self._path(COURSES_FILE)
        ensure_file(path)
        records = load_records(path)
        records.append(
            {
                "darsname": name,
                "darsinfo": info,
                "zarfiat": int(capacity),
                "ettelaeieh": [],
                "taklif": [],
            }
        )
        save_records(path, records)
        return self.course

    def answers(self, username: str, course_name: str) -> list[Any]:
        """Return the assignment answers the student handed in for the course."""
        found: list[Any] = []
        for record in load_records(self._path(ENROLMENTS_FILE)):
            if record.get("dars") == course_name and record.get("username") == username:
                found.extend(record.get("taklif", []))
        return found

    def _students_dialog(self, console: _Console) -> None:
        console.say("Enter dars mored nazar:")
        console.say(*self.students_of(console.word()))

    def _new_course_dialog(self, console: _Console) -> None:
        console.say("Enter name dars:")
        name = console.word()
        console.say("Enter dars info:")
        info = console.line()
        console.say("Enter zarfiat dars:")
        capacity = console.integer()
        self.create_course(name, info, capacity)

    def _course_grade_dialog(self, console: _Console) -> None:
        console.say("username daneshjoo:")
        username = console.word()
        console.say("Enter darsname:")
        course_name = console.word()
        console.say("Enter nomreh:")
        self.course.set_course_grade(username, course_name, console.number())

    def _announcement_dialog(self, console: _Console) -> None:
        console.say("Enter etteleieh:")
        text = console.line()
        console.say("Enter name dars:")
        try:
            self.course.add_announcement(console.word(), text)
        except CourseFullError:
            console.say("basseh digeh ah!! zarfiat por shodeh!")

    def _assignment_dialog(self, console: _Console) -> None:
        console.say("Enter soal mored nazar:")
        description = console.line()
        console.say("Enter tarikh shoroo:")
        start = console.word()
        console.say("Enter tarikh payan:")
        end = console.word()
        console.say("Enter namedars")
        course_name = console.word()
        try:
            self.course.add_assignment(course_name, description, start, end)
        except CourseFullError:
            console.say("basseh digeh ah!! zarfiat por shodeh!")

    def _assignment_grade_dialog(self, console: _Console) -> None:
        console.say("Enter name dars:")
        course_name = console.word()
        console.say("Enter shomareh taklif")
        number = console.integer()
        console.say("Enter nomreh taklif")
        grade = console.number()
        console.say("Enter username daneshjoo:")
        username = console.word()
        self.course.set_assignment_grade(course_name, number, grade, username)

    def _answers_dialog(self, console: _Console) -> None:
        console.say("Enter username daneshjoo:")
        username = console.word()
        console.say("Enter name dars:")
        console.say(*self.answers(username, console.word()))

    def run(self, inp: Optional[TextIO] = None, out: Optional[TextIO] = None) -> None:
        """Drive the professor's menu from *inp*, writing to *out*."""
        console = _Console(inp or sys.stdin, out or sys.stdout)
        console.say("Welcom ostad!")
        actions: dict[int, Callable[[_Console], Optional[bool]]] = {
            1: self._students_dialog,
            2: self._new_course_dialog,
            3: self._course_grade_dialog,
            4: self._announcement_dialog,
            5: self._assignment_dialog,
            6: self._assignment_grade_dialog,
            7: self._answers_dialog,
        }
        _run_menu(console, _MENU, actions, exit_option=8)