# yekestan

A small course-management library. Administrators manage user accounts.
Professors create courses, post announcements and assignments, and record
grades. Students enroll in courses, hand in answers and rate their professors.
All state lives in plain JSON files in a data directory. The data directory is
the current directory unless you give another one.

## Data files

| File             | Contents                                                          |
|------------------|-------------------------------------------------------------------|
| `info.json`      | users: `username`, `password`, `name`, `lastname`, `paneloption`  |
| `restore.json`   | users deleted by an administrator, kept for restoring             |
| `doroos.json`    | courses: `darsname`, `darsinfo`, `zarfiat` (free places), `ettelaeieh` (announcements), `taklif` (assignments) |
| `daneshjoo.json` | enrolments: `username`, `dars`, `taklif` (answers), `nomrehdars`, `nomreh_taklif`, `nomreh_ostad` |

If a file is missing or empty, it counts as holding no records. After every
change, the file is written again as JSON indented by four spaces. If a file
does not hold a JSON array, `yekestan.store.StoreError` is raised.

## Modules

### `yekestan.store`

- `User`: a dataclass with `username`, `password`, `name` and `lastname`.
  - `User.to_record(panel)` builds the stored record.
  - `User.from_record(record)` reads a stored record back. It raises
    `StoreError` if a field is missing.
- `ensure_file(path)` creates an empty file if none exists.
- `load_records(path)` reads the records in a file.
- `save_records(path, records)` writes the records to a file.
- `append_user(path, user, panel)` adds one user to the end of a file.

### `yekestan.course`

`Course(name, info, capacity, data_dir)` is the course a professor is working on.

- `add_assignment(course_name, description, start, end)` adds an assignment to
  the named course in `doroos.json`.
- `add_announcement(course_name, text)` posts an announcement to the named
  course in `doroos.json`.
- Both of these return whether the course was found.
- A `Course` object accepts at most ten assignments and at most ten
  announcements. After that, both methods raise `CourseFullError`.
- `set_assignment_grade(course_name, number, grade, username)` stores a
  student's grade for assignment `number` in `daneshjoo.json`.
  - `number` must be from 0 to 9; otherwise `IndexError` is raised.
  - If the grade list is too short, it is padded with `null`.
- `set_course_grade(username, course_name, grade)` stores a student's final
  grade for the course.
- `announcements()` returns the announcements posted through this object.

`Assignment` holds one assignment's start date, end date, description and grade.

### `yekestan.admin`

`Admin(data_dir)` provides:

- `user_names()` returns the names of all users.
- `edit_user(username, field, value)` changes one field of a user. `field` must
  be `name`, `lastname` or `password`; any other value raises `ValueError`.
- `delete_user(username)` moves the user to `restore.json`.
- `restore_users()` moves every user in `restore.json` back to `info.json`,
  empties `restore.json` and returns the restored users.
- `courses_text()` returns the whole courses file as indented JSON.
- `professor_ratings(username, course_name)` returns the ratings a student gave
  the professor of a course.

### `yekestan.professor`

`Professor(data_dir)` provides:

- `students_of(course_name)` returns the usernames of the students enrolled in
  a course.
- `create_course(name, info, capacity)` appends a new course to `doroos.json`
  and makes it the current `course`.
- `answers(username, course_name)` returns the answers a student handed in for
  a course.

### `yekestan.student`

`Student(username, password, name, lastname, data_dir)` provides:

- `course_names()` returns the names of all courses.
- `open_courses()` returns the name and free places of each course whose
  capacity is not zero.
- `enroll(course_name)` takes one place in the course and records the
  enrolment once.
  - It returns `False` if the course does not exist.
  - It raises `CourseFullError` if the course has no place left.
- `my_courses()` returns the full records of the courses the student is
  enrolled in.
- `announcements()` returns each course's name together with its announcements.
- `assignment_grades(course_name)` and `course_grade(course_name)` return the
  student's grades.
- `submit_assignment(course_name, answer)` stores the answer as the first entry
  of the answer list.
- `rate_professor(course_name, grade)` stores the student's rating of the
  professor.

## Interactive panels

`Admin`, `Professor` and `Student` each have a `run(inp=None, out=None)` method.
It drives that role's numbered text menu: it reads choices and answers from
`inp` (standard input by default) and writes prompts and results to `out`
(standard output by default).

A session ends in either of these cases:

- the exit option is chosen (8 for the administrator and the professor, 9 for
  the student);
- the input runs out.

Entering an unparsable file or bad input does not end the session: a message
is printed and the menu is shown again. Because `inp` and `out` can be
`io.StringIO` objects, a session can be scripted:

```python
import io
from yekestan.student import Student

out = io.StringIO()
Student("ali", data_dir="data").run(io.StringIO("1\n9\n"), out)
print(out.getvalue())
```

## What it does not do

- There is no sign-in or sign-up screen, and there is no command to start the
  program. You create a panel object yourself and call its `run` method.
- The administrator's menu shows an option for adding a new user, but choosing
  it does nothing. To add users, use `yekestan.store.append_user`.
- Passwords are stored and compared as plain text.

## Tests

The test suite uses pytest. Install it with the `test` extra.