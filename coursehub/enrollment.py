"""Enrollment of students in course offerings and their grades."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from coursehub.academics import Section

NO_GRADE = "N/A"


class AlreadyEnrolledError(ValueError):
    """Raised when a student is enrolled twice in the same offering."""


class NotEnrolledError(LookupError):
    """Raised when a grade is set for an enrollment that does not exist."""


@dataclass
class EnrollmentRecord:
    """One student's enrollment in a course taught by a teacher to a section."""

    student_id: str = ""
    course_id: str = ""
    teacher_id: str = ""
    section: Section = field(default_factory=Section)
    grade: str = NO_GRADE

    def matches(
        self, student_id: str, course_id: str, teacher_id: str, section: Section
    ) -> bool:
        """Tell whether this record is for the given student and offering."""
        return (
            self.student_id == student_id
            and self.course_id == course_id
            and self.teacher_id == teacher_id
            and self.section == section
        )

    def display(self) -> None:
        """Print the record."""
        print(f"Student ID: {self.student_id}")
        print(f"Course ID: {self.course_id}")
        print(f"Teacher ID: {self.teacher_id}")
        print("Section: ", end="")
        self.section.display_details()
        print(f"Grade: {self.grade}")


@dataclass
class Enrollments:
    """All enrollment records, in the order they were made."""

    records: list[EnrollmentRecord] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[EnrollmentRecord]:
        return iter(self.records)

    def _find(
        self, student_id: str, course_id: str, teacher_id: str, section: Section
    ) -> EnrollmentRecord | None:
        return next(
            (
                record
                for record in self.records
                if record.matches(student_id, course_id, teacher_id, section)
            ),
            None,
        )

    def enroll_student(
        self, student_id: str, course_id: str, teacher_id: str, section: Section
    ) -> EnrollmentRecord:
        """Enroll a student in an offering and return the new record."""
        if self.is_enrolled(student_id, course_id, teacher_id, section):
            raise AlreadyEnrolledError(
                f"Student {student_id} is already enrolled in course {course_id}"
            )
        record = EnrollmentRecord(student_id, course_id, teacher_id, section)
        self.records.append(record)
        print(f"Student {student_id} successfully enrolled in course {course_id}")
        return record

    def update_grade(
        self,
        student_id: str,
        course_id: str,
        teacher_id: str,
        section: Section,
        grade: str,
    ) -> None:
        """Set the grade of an existing enrollment."""
        record = self._find(student_id, course_id, teacher_id, section)
        if record is None:
            raise NotEnrolledError(
                f"Student {student_id} is not enrolled in course {course_id}"
            )
        record.grade = grade
        print("Grade updated !")

    def get_grade(
        self, student_id: str, course_id: str, teacher_id: str, section: Section
    ) -> str:
        """Return the grade of an enrollment, or ``"N/A"`` if there is none."""
        record = self._find(student_id, course_id, teacher_id, section)
        return NO_GRADE if record is None else record.grade

    def is_enrolled(
        self, student_id: str, course_id: str, teacher_id: str, section: Section
    ) -> bool:
        """Tell whether the student is enrolled in the offering."""
        return self._find(student_id, course_id, teacher_id, section) is not None

    def student_courses(self, student_id: str) -> list[EnrollmentRecord]:
        """Return every enrollment of one student."""
        return [r for r in self.records if r.student_id == student_id]

    def course_students(
        self, course_id: str, teacher_id: str, section: Section
    ) -> list[EnrollmentRecord]:
        """Return every enrollment in one offering."""
        return [
            r
            for r in self.records
            if r.course_id == course_id
            and r.teacher_id == teacher_id
            and r.section == section
        ]

    def display_all(self) -> None:
        """Print every enrollment."""
        print("===== All Enrollments =====")
        if not self.records:
            print("No enrollments found.")
            return
        for number, record in enumerate(self.records, start=1):
            print(f"Enrollment #{number}:")
            record.display()
            print("-----------------------")

    def display_student(self, student_id: str) -> None:
        """Print the enrollments of one student."""
        print(f"Enrollments for Student {student_id}")
        records = self.student_courses(student_id)
        for record in records:
            print(f"Course: {record.course_id}")
            print(f"Teacher: {record.teacher_id}")
            print("Section: ", end="")
            record.section.display_details()
            print(f"Grade: {record.grade}")
            print("-----------------------")
        if not records:
            print(f"No enrollments found for student {student_id}")

    def display_course(self, course_id: str) -> None:
        """Print the enrollments in one course, across all its offerings."""
        print(f" Enrollments for Course {course_id}")
        records = [r for r in self.records if r.course_id == course_id]
        for record in records:
            print(f"Student: {record.student_id}")
            print(f"Teacher: {record.teacher_id}")
            print("Section: ", end="")
            record.section.display_details()
            print(f"Grade: {record.grade}")
            print("-----------------------")
        if not records:
            print(f"No enrollments found for course {course_id}")