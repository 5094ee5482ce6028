"""Courses as a professor manages them: assignments, grades and announcements."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from yekestan.store import (
    COURSES_FILE,
    ENROLMENTS_FILE,
    PathLike,
    load_records,
    save_records,
)

MAX_ASSIGNMENTS = 10
MAX_ANNOUNCEMENTS = 10


class CourseFullError(Exception):
    """Raised when a course holds as many assignments or announcements as it can."""


@dataclass
class Assignment:
    """One homework of a course."""

    start: str = ""
    end: str = ""
    description: str = ""
    grade: Optional[float] = None


@dataclass
class Course:
    """A course and the files in which its data is kept."""

    name: str = ""
    info: str = ""
    capacity: int = 0
    data_dir: PathLike = "."
    grade: Optional[float] = None
    assignments: list[Assignment] = field(default_factory=list)
    _announcements: list[str] = field(default_factory=list, repr=False)

    @property
    def _courses_path(self) -> Path:
        return Path(self.data_dir) / COURSES_FILE

    @property
    def _enrolments_path(self) -> Path:
        return Path(self.data_dir) / ENROLMENTS_FILE

    def add_assignment(
        self, course_name: str, description: str, start: str, end: str
    ) -> bool:
        """Add an assignment to the named course; return whether the course exists."""
        if len(self.assignments) >= MAX_ASSIGNMENTS:
            raise CourseFullError(
                f"a course holds at most {MAX_ASSIGNMENTS} assignments"
            )
        self.name = course_name
        assignment = Assignment(start=start, end=end, description=description)
        records = load_records(self._courses_path)
        found = False
        for record in records:
            if record.get("darsname") == course_name:
                record.setdefault("taklif", []).append(
                    {
                        "tarikh_shoroo": start,
                        "tarikh_payan": end,
                        "sharh_taklif": description,
                    }
                )
                self.assignments.append(assignment)
                found = True
                break
        save_records(self._courses_path, records)
        return found

    def set_assignment_grade(
        self, course_name: str, number: int, grade: float, username: str
    ) -> None:
        """Record a student's grade for assignment *number* of the named course."""
        if not 0 <= number < MAX_ASSIGNMENTS:
            raise IndexError(f"assignment number must be below {MAX_ASSIGNMENTS}")
        self.name = course_name
        if number < len(self.assignments):
            self.assignments[number].grade = grade
        records = load_records(self._enrolments_path)
        for record in records:
            if record.get("dars") == course_name and record.get("username") == username:
                grades = record.setdefault("nomreh_taklif", [])
                if len(grades) <= number:
                    grades.extend([None] * (number + 1 - len(grades)))
                grades[number] = grade
        save_records(self._enrolments_path, records)

    def set_course_grade(self, username: str, course_name: str, grade: float) -> None:
        """Record a student's final grade for the named course."""
        self.grade = grade
        records = load_records(self._enrolments_path)
        for record in records:
            if record.get("dars") == course_name and record.get("username") == username:
                record["nomrehdars"] = grade
                break
        save_records(self._enrolments_path, records)

    def add_announcement(self, course_name: str, text: str) -> bool:
        """Post an announcement to the named course; return whether the course exists."""
        if len(self._announcements) >= MAX_ANNOUNCEMENTS:
            raise CourseFullError(
                f"a course holds at most {MAX_ANNOUNCEMENTS} announcements"
            )
        self._announcements.append(text)
        self.name = course_name
        records: list[Any] = load_records(self._courses_path)
        found = False
        for record in records:
            if record.get("darsname") == course_name:
                record.setdefault("ettelaeieh", []).append(text)
                found = True
                break
        save_records(self._courses_path, records)
        return found

    def announcements(self) -> tuple[str, ...]:
        """Return the announcements posted through this object, oldest first."""
        return tuple(self._announcements)