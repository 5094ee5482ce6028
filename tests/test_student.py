import io

import pytest

from yekestan.admin import Admin
from yekestan.course import Course, CourseFullError
from yekestan.professor import Professor
from yekestan.store import COURSES_FILE, ENROLMENTS_FILE, load_records
from yekestan.student import Student


@pytest.fixture
def data_dir(tmp_path):
    professor = Professor(data_dir=tmp_path)
    professor.create_course("math", "algebra", 2)
    professor.create_course("physics", "mechanics", 0)
    return tmp_path


@pytest.fixture
def student(data_dir):
    return Student("ali", data_dir=data_dir)


def _capacity(data_dir, name):
    for record in load_records(data_dir / COURSES_FILE):
        if record["darsname"] == name:
            return record["zarfiat"]
    raise AssertionError(name)


def test_course_names(student):
    assert student.course_names() == ["math", "physics"]


def test_open_courses_excludes_full(student):
    assert student.open_courses() == [("math", 2)]


def test_enroll_takes_seat_and_adds_record(student, data_dir):
    assert student.enroll("math") is True
    assert _capacity(data_dir, "math") == 1
    assert load_records(data_dir / ENROLMENTS_FILE) == [
        {
            "username": "ali",
            "dars": "math",
            "taklif": [],
            "nomrehdars": 0,
            "nomreh_taklif": [],
            "nomreh_ostad": 0,
        }
    ]


def test_enroll_twice_keeps_one_record(student, data_dir):
    student.enroll("math")
    student.enroll("math")
    assert _capacity(data_dir, "math") == 0
    assert len(load_records(data_dir / ENROLMENTS_FILE)) == 1


def test_enroll_full_course_raises(student, data_dir):
    with pytest.raises(CourseFullError):
        student.enroll("physics")
    assert load_records(data_dir / ENROLMENTS_FILE) == []


def test_enroll_unknown_course(student):
    assert student.enroll("history") is False


def test_my_courses(student):
    student.enroll("math")
    courses = student.my_courses()
    assert [course["darsname"] for course in courses] == ["math"]
    assert courses[0]["darsinfo"] == "algebra"


def test_submit_assignment_replaces_first_answer(student, data_dir):
    student.enroll("math")
    assert student.submit_assignment("math", "first") is True
    assert student.submit_assignment("math", "second") is True
    assert Professor(data_dir=data_dir).answers("ali", "math") == ["second"]


def test_submit_without_enrolment(student):
    assert student.submit_assignment("math", "answer") is False


def test_rate_professor_visible_to_admin(student, data_dir):
    student.enroll("math")
    assert student.rate_professor("math", 17.5) is True
    assert Admin(data_dir=data_dir).professor_ratings("ali", "math") == [17.5]


def test_course_grade(student, data_dir):
    student.enroll("math")
    Course(data_dir=data_dir).set_course_grade("ali", "math", 19.0)
    assert student.course_grade("math") == [19.0]


def test_assignment_grades(student, data_dir):
    student.enroll("math")
    Course(data_dir=data_dir).set_assignment_grade("math", 0, 15.0, "ali")
    assert student.assignment_grades("math") == [15.0]


def test_announcements(student, data_dir):
    Course(data_dir=data_dir).add_announcement("math", "exam on monday")
    assert student.announcements() == [("math", ["exam on monday"]), ("physics", [])]


def test_run_lists_and_enrolls(student, data_dir):
    out = io.StringIO()
    student.run(io.StringIO("1\n3\nmath\n9\n"), out)
    text = out.getvalue()
    assert text.startswith("welcome to your panel ali\n")
    assert "math\nphysics\n" in text
    assert _capacity(data_dir, "math") == 1


def test_run_reports_full_course(student):
    out = io.StringIO()
    student.run(io.StringIO("3\nphysics\n9\n"), out)
    assert "in dars zarfiat khali nadarad!" in out.getvalue()