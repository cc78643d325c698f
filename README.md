# coursehub

`coursehub` models a small academic system. It covers:

- people: students and teachers;
- courses, each with a board of discussion posts and comments;
- sections of students;
- course offerings for each teacher and section;
- semesters;
- a register of enrollments with grades.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
coursehub
```

The command runs a fixed demonstration and takes no options apart from
`--help`. The demonstration:

1. creates two courses, two students, two teachers and two sections;
2. enrolls the students and updates their grades;
3. prints the enrollments by student and by course;
4. adds a post and a comment to each course and prints the posts;
5. prints the details of one section.

## Library overview

### `coursehub.textutils`

Plain string helpers:

- `trim(text)` strips spaces, tabs and newlines from both ends.
- `split(text, delim)` splits at a single-character delimiter. Empty parts are kept. A delimiter that is not a single character raises `ValueError`.
- `tokenize(text, delims)` splits at any character in `delims`.
- `find_first(text, sub)` and `find_last(text, sub)` return an index, or -1 when `sub` is not found.
- `find_all(text, sub)` returns every start index, overlapping matches included.
- `insert_at(text, index, sub)` and `remove_at(text, index)` raise `IndexError` when the position is out of range.
- `remove_first(text, ch)` and `remove_last(text, ch)` raise `ValueError` when the character is missing. `remove_all(text, ch)` removes every occurrence.
- `to_upper(text)` and `to_lower(text)` change ASCII letters only.
- `int_to_string(value)` raises `TypeError` for anything that is not an `int`.

### `coursehub.people`

The dataclasses `Date`, `Name`, `Address`, `Person`, `Student` and `Teacher`.

- `Student` adds `roll_number` and `gpa` to `Person`.
- `Teacher` adds `teacher_id`, `designation` and `salary` to `Person`.
- Each class has a `display()` method. It prints the record and returns the printed text.

### `coursehub.academics`

The classes `Comment`, `Post`, `Course`, `Section`, `TeacherSection`, `OfferedCourse` and `Semester`.

- `Course.add_post()` returns the new `Post`.
- `Course.add_comment()` attaches a comment to the post whose id it names. If the course has no such post, it raises `PostNotFoundError`.
- Two `Section` objects compare equal when their name and batch are equal. Their students are not compared.
- `OfferedCourse.remove_offering()` raises `IndexError` when the index is out of range.
- The `display...` methods print their text and return it.

### `coursehub.enrollment`

The classes `EnrollmentRecord` and `Enrollments`.

- Enrolling the same student in the same offering twice raises `AlreadyEnrolledError`.
- Updating the grade of an enrollment that does not exist raises `NotEnrolledError`.
- `get_grade()` returns `"N/A"` when the enrollment has no grade and when there is no such enrollment.
- `enroll_student()` and `update_grade()` print a confirmation line.
- `student_courses()` and `course_students()` return lists of records.

## Example

```python
from coursehub.people import Address, Date, Name, Student
from coursehub.academics import Course, Section
from coursehub.enrollment import Enrollments

student = Student(
    email="ahmed@example.com",
    birth_date=Date(14, 4, 2000),
    full_name=Name("Ahmed", "Mehmood"),
    address=Address("Lahore", "Pakistan"),
    roll_number="BSCS-24-001",
    gpa=3.8,
)
section = Section("CS23A", 2023)
section.add_student(student)

course = Course("CS101", "Introduction to Programming", 3)
course.add_post("23333", student, "hy how are you!")

register = Enrollments()
register.enroll_student("BSCS-24-001", "CS101", "TCS001", section)
register.update_grade("BSCS-24-001", "CS101", "TCS001", section, "A")
print(register.get_grade("BSCS-24-001", "CS101", "TCS001", section))  # A
```

## What it does not do

All records exist only in memory while the program runs. Nothing is saved to disk or to a database, and nothing is loaded from one. The `coursehub` command only runs the fixed demonstration. It does not offer an interactive way to manage courses, students or enrollments.