"""The student's panel: browsing courses, enrolling, handing in work and grades."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, TextIO

from yekestan.admin import _Console, _run_menu
from yekestan.course import CourseFullError
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
    "1-namayesh list doroos",
    "2-namayesh doroos darayeh zarfiatkhali",
    "3-entekhabvahed",
    "4-moshakhasat doroos",
    "5-moshahedeh nomarat takalif",
    "6-nomrehdehi be ostad",
    "7-tahviltaklif",
    "8-moshahedeh nomreh",
    "9-exit",
)


@dataclass
class Student:
    """A student, working on the data files in *data_dir*."""

    username: str
    password: str = ""
    name: str = ""
    lastname: str = ""
    data_dir: PathLike = "."

    def _path(self, filename: str) -> Path:
        return Path(self.data_dir) / filename

    def _is_mine(self, record: dict[str, Any], course_name: str) -> bool:
        return record.get("username") == self.username and record.get("dars") == course_name

    def course_names(self) -> list[str]:
        """Return the names of all courses, in stored order."""
        return [record.get("darsname") for record in load_records(self._path(COURSES_FILE))]

    def open_courses(self) -> list[tuple[str, int]]:
        """Return the name and remaining capacity of every course not yet full."""
        return [
            (record.get("darsname"), record.get("zarfiat", 0))
            for record in load_records(self._path(COURSES_FILE))
            if record.get("zarfiat", 0) != 0
        ]

    def enroll(self, course_name: str) -> bool:
        """Take a seat in the named course; return whether the course exists.

        Raises CourseFullError when the course has no seat left.
        """
        courses_path = self._path(COURSES_FILE)
        courses = load_records(courses_path)
        matches = [record for record in courses if record.get("darsname") == course_name]
        if not matches:
            return False
        for record in matches:
            if record.get("zarfiat", 0) <= 0:
                raise CourseFullError("in dars zarfiat khali nadarad!")
            record["zarfiat"] = int(record["zarfiat"]) - 1
            save_records(courses_path, courses)
            enrolments_path = self._path(ENROLMENTS_FILE)
            ensure_file(enrolments_path)
            enrolments = load_records(enrolments_path)
            if not any(self._is_mine(entry, course_name) for entry in enrolments):
                enrolments.append(
                    {
                        "username": self.username,
                        "dars": course_name,
                        "taklif": [],
                        "nomrehdars": 0,
                        "nomreh_taklif": [],
                        "nomreh_ostad": 0,
                    }
                )
            save_records(enrolments_path, enrolments)
        return True

    def my_courses(self) -> list[dict[str, Any]]:
        """Return the full records of the courses this student is enrolled in."""
        courses = load_records(self._path(COURSES_FILE))
        return [
            course
            for entry in load_records(self._path(ENROLMENTS_FILE))
            if entry.get("username") == self.username
            for course in courses
            if course.get("darsname") == entry.get("dars")
        ]

    def announcements(self) -> list[tuple[str, list[str]]]:
        """Return every course's name with the announcements posted to it."""
        return [
            (record.get("darsname"), list(record.get("ettelaeieh", [])))
            for record in load_records(self._path(COURSES_FILE))
        ]

    def assignment_grades(self, course_name: str) -> list[Any]:
        """Return this student's assignment grades in the named course."""
        grades: list[Any] = []
        for entry in load_records(self._path(ENROLMENTS_FILE)):
            if self._is_mine(entry, course_name):
                grades.extend(entry.get("nomreh_taklif", []))
        return grades

    def submit_assignment(self, course_name: str, answer: str) -> bool:
        """Hand in *answer* as the assignment of the named course; return whether enrolled."""
        path = self._path(ENROLMENTS_FILE)
        records = load_records(path)
        found = False
        for entry in records:
            if self._is_mine(entry, course_name):
                answers = entry.setdefault("taklif", [])
                if answers:
                    answers[0] = answer
                else:
                    answers.append(answer)
                found = True
        save_records(path, records)
        return found

    def rate_professor(self, course_name: str, grade: float) -> bool:
        """Give the professor of the named course a grade; return whether enrolled."""
        path = self._path(ENROLMENTS_FILE)
        records = load_records(path)
        found = False
        for entry in records:
            if self._is_mine(entry, course_name):
                entry["nomreh_ostad"] = grade
                found = True
        save_records(path, records)
        return found

    def course_grade(self, course_name: str) -> list[Any]:
        """Return this student's final grade for the named course, once per enrolment."""
        return [
            entry.get("nomrehdars")
            for entry in load_records(self._path(ENROLMENTS_FILE))
            if self._is_mine(entry, course_name)
        ]

    def _list_dialog(self, console: _Console) -> None:
        console.say(*self.course_names())

    def _open_dialog(self, console: _Console) -> None:
        console.say("doroos daraye zarfiat khali:")
        for name, capacity in self.open_courses():
            console.say(f"namedars: {name}\tzarfiat: {capacity}")

    def _enroll_dialog(self, console: _Console) -> None:
        console.say("Enter darsi ke mikhay bardari:")
        try:
            self.enroll(console.word())
        except CourseFullError as exc:
            console.say(exc)

    def _details_dialog(self, console: _Console) -> None:
        import json

        for course in self.my_courses():
            console.say(json.dumps(course, indent=4, ensure_ascii=False))

    def _grades_dialog(self, console: _Console) -> None:
        console.say("Enter darsi ke mikhay nomarat taklifesho bebini:")
        console.say(*self.assignment_grades(console.word()))

    def _rate_dialog(self, console: _Console) -> None:
        console.say("be ostad kodoom dars mikhay nmreh bedi?")
        course_name = console.word()
        console.say("Enter nomreh ostad")
        self.rate_professor(course_name, console.number())

    def _submit_dialog(self, console: _Console) -> None:
        console.say("Enter namedars:")
        course_name = console.word()
        console.say("Enter pasokh taklif:(be tartib vared kardan)")
        self.submit_assignment(course_name, console.word())

    def _course_grade_dialog(self, console: _Console) -> None:
        console.say("nomreh che darsi mikhay bebini?")
        console.say(*self.course_grade(console.word()))

    def run(self, inp: Optional[TextIO] = None, out: Optional[TextIO] = None) -> None:
        """Drive the student's menu from *inp*, writing to *out*."""
        console = _Console(inp or sys.stdin, out or sys.stdout)
        console.say(f"welcome to your panel {self.username}")
        actions: dict[int, Callable[[_Console], Optional[bool]]] = {
            1: self._list_dialog,
            2: self._open_dialog,
            3: self._enroll_dialog,
            4: self._details_dialog,
            5: self._grades_dialog,
            6: self._rate_dialog,
            7: self._submit_dialog,
            8: self._course_grade_dialog,
        }
        _run_menu(console, _MENU, actions, exit_option=9)