"""Demonstration run of enrollments, grades and course discussion boards."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from coursehub.academics import Comment, Course, OfferedCourse, Section, Semester
from coursehub.enrollment import Enrollments
from coursehub.people import Address, Date, Name, Student, Teacher


def main(argv: Sequence[str] | None = None) -> int:
    """Build a small set of records and print what the system does with them."""
    parser = argparse.ArgumentParser(
        prog="coursehub",
        description="Run a demonstration of course enrollment and discussion.",
    )
    parser.parse_args(argv)

    course1 = Course("CS101", "Introduction to Programming", 3)
    course2 = Course("CS102", "Data Structures", 4)

    student1 = Student(
        email="ahmed@example.com",
        birth_date=Date(14, 4, 2000),
        full_name=Name("Ahmed", "Mehmood"),
        address=Address("Lahore", "Pakistan"),
        roll_number="BSCS-24-001",
        gpa=3.8,
    )
    student2 = Student(
        email="sara@example.com",
        birth_date=Date(23, 7, 2001),
        full_name=Name("Sara", "Ali"),
        address=Address("Islamabad", "Pakistan"),
        roll_number="BSCS-24-002",
        gpa=3.5,
    )

    section1 = Section("CS23A", 2023)
    section2 = Section("CS23B", 2023)
    section1.add_student(student1)
    section2.add_student(student2)

    teacher1 = Teacher(
        email="sarah@example.com",
        birth_date=Date(5, 9, 1985),
        full_name=Name("Sarah", "Khan"),
        address=Address("Karachi", "Pakistan"),
        teacher_id="TCS001",
        designation="Professor",
        salary=85000.0,
    )
    teacher2 = Teacher(
        email="ali@example.com",
        birth_date=Date(12, 3, 1978),
        full_name=Name("Ali", "Ahmed"),
        address=Address("Lahore", "Pakistan"),
        teacher_id="TCS002",
        designation="Associate Professor",
        salary=75000.0,
    )

    offer1 = OfferedCourse(course1.course_id, course1.course_name, course1.credit_hour)
    offer2 = OfferedCourse(course2.course_id, course2.course_name, course2.credit_hour)
    offer1.add_offering(teacher1.teacher_id, section1)
    offer1.add_offering(teacher2.teacher_id, section2)
    offer2.add_offering(teacher1.teacher_id, section2)
    Semester("Fall2023", offer1)

    print("TESTING ENROLLCOURSES CLASS")
    enrollments = Enrollments()
    print("1. Initial enrollment state:")
    enrollments.display_all()

    print("\n2. Enrolling students in courses:")
    enrollments.enroll_student("BSCS-24-001", "CS101", "TCS001", section1)
    enrollments.enroll_student("BSCS-24-001", "CS102", "TCS001", section2)
    enrollments.enroll_student("BSCS-24-002", "CS101", "TCS002", section2)

    print("\n3. All enrollments after adding students:")
    enrollments.display_all()

    print("\n4. Updating grades:")
    enrollments.update_grade("BSCS-24-001", "CS101", "TCS001", section1, "A")
    enrollments.update_grade("BSCS-24-001", "CS102", "TCS001", section2, "B+")
    enrollments.update_grade("BSCS-24-002", "CS101", "TCS002", section2, "A-")

    print("\n5. Displaying enrollments for student1 (Ahmed):")
    enrollments.display_student("BSCS-24-001")
    print("\n6. Displaying enrollments for course1 (CS101):")
    enrollments.display_course("CS101")

    print("\n7. Displaying posts for course1 (CS101):")
    course1.add_post("23333", student1, "hy how are you!")
    course1.add_comment(Comment("45678", "23333", student1, "I am fine how are you !"))
    course1.display_posts()

    print("\n8. Displaying posts for course2 (CS102):")
    course2.add_post("12345", student2, "Hello everyone!")
    course2.add_comment(Comment("67890", "12345", student2, "Welcome to the course!"))
    course2.display_posts()

    print("\n9. Displaying section1 (CS23A) details:")
    section1.display_details()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())