import pytest

from coursehub.academics import Section
from coursehub.enrollment import (
    AlreadyEnrolledError,
    EnrollmentRecord,
    Enrollments,
    NotEnrolledError,
)
from coursehub.people import Student


@pytest.fixture
def section_a():
    return Section("CS23A", 2023)


@pytest.fixture
def section_b():
    return Section("CS23B", 2023)


@pytest.fixture
def book(section_a, section_b):
    enrollments = Enrollments()
    enrollments.enroll_student("BSCS-24-001", "CS101", "TCS001", section_a)
    enrollments.enroll_student("BSCS-24-001", "CS102", "TCS001", section_b)
    enrollments.enroll_student("BSCS-24-002", "CS101", "TCS002", section_b)
    return enrollments


def test_enroll_prints_success(capsys, section_a):
    enrollments = Enrollments()
    record = enrollments.enroll_student("S1", "C1", "T1", section_a)
    out = capsys.readouterr().out
    assert out == "Student S1 successfully enrolled in course C1\n"
    assert record.grade == "N/A"
    assert len(enrollments) == 1


def test_duplicate_enrollment_raises(book, section_a):
    with pytest.raises(AlreadyEnrolledError):
        book.enroll_student("BSCS-24-001", "CS101", "TCS001", section_a)
    assert len(book) == 3


def test_section_equality_ignores_students(book):
    other = Section("CS23A", 2023)
    other.add_student(Student(roll_number="X"))
    assert book.is_enrolled("BSCS-24-001", "CS101", "TCS001", other)
    assert not book.is_enrolled("BSCS-24-001", "CS101", "TCS001", Section("CS23A", 2024))


def test_grade_defaults_and_updates(book, section_a):
    assert book.get_grade("BSCS-24-001", "CS101", "TCS001", section_a) == "N/A"
    book.update_grade("BSCS-24-001", "CS101", "TCS001", section_a, "A")
    assert book.get_grade("BSCS-24-001", "CS101", "TCS001", section_a) == "A"


def test_unknown_grade_is_na(book, section_a):
    assert book.get_grade("nobody", "CS101", "TCS001", section_a) == "N/A"


def test_update_grade_unknown_raises(book, section_b):
    with pytest.raises(NotEnrolledError):
        book.update_grade("BSCS-24-001", "CS101", "TCS001", section_b, "A")


def test_student_courses(book):
    courses = [r.course_id for r in book.student_courses("BSCS-24-001")]
    assert courses == ["CS101", "CS102"]
    assert book.student_courses("missing") == []


def test_course_students(book, section_b):
    records = book.course_students("CS101", "TCS002", section_b)
    assert [r.student_id for r in records] == ["BSCS-24-002"]
    assert book.course_students("CS101", "TCS001", section_b) == []


def test_iteration_keeps_order(book):
    assert [r.student_id for r in book] == ["BSCS-24-001", "BSCS-24-001", "BSCS-24-002"]


def test_display_all_empty(capsys):
    Enrollments().display_all()
    assert capsys.readouterr().out == "===== All Enrollments =====\nNo enrollments found.\n"


def test_record_display(capsys, section_a):
    EnrollmentRecord("S1", "C1", "T1", section_a, "B+").display()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Student ID: S1",
        "Course ID: C1",
        "Teacher ID: T1",
        "Section: Section: CS23A",
        "Batch Number: 2023",
        "Grade: B+",
    ]


def test_display_all_numbers_records(capsys, book):
    capsys.readouterr()
    book.display_all()
    out = capsys.readouterr().out
    assert "Enrollment #1:" in out
    assert "Enrollment #3:" in out
    assert "Enrollment #4:" not in out


def test_display_student_missing(capsys):
    Enrollments().display_student("S9")
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Enrollments for Student S9", "No enrollments found for student S9"]


def test_display_course(capsys, book):
    capsys.readouterr()
    book.display_course("CS101")
    out = capsys.readouterr().out
    assert out.startswith(" Enrollments for Course CS101\n")
    assert "Student: BSCS-24-001" in out
    assert "Student: BSCS-24-002" in out
    assert "No enrollments found" not in out