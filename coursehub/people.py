"""People in the course records: students, teachers and their details."""

from __future__ import annotations

from dataclasses import dataclass, field


def _number(value: float) -> str:
    """Format a number the way the records show it (six significant digits)."""
    return f"{value:g}"


def _show(text: str) -> str:
    """Print ``text`` when there is any and hand it back."""
    if text:
        print(text)
    return text


@dataclass
class Date:
    """A calendar date kept as plain day, month and year numbers."""

    day: int = 1
    month: int = 1
    year: int = 1900

    def __str__(self) -> str:
        return f"Date (dd/mm/yyyy) : {self.day} / {self.month} / {self.year}"

    def display(self) -> str:
        """Print the date and return the printed text."""
        return _show(str(self))


@dataclass
class Name:
    """A person's first and last name."""

    first_name: str = "N/A"
    last_name: str = "N/A"

    def __str__(self) -> str:
        return f"Name : {self.first_name} {self.last_name}"

    def display(self) -> str:
        """Print the full name and return the printed text."""
        return _show(str(self))


@dataclass
class Address:
    """A city and country."""

    city: str = "N/A"
    country: str = "N/A"

    def __str__(self) -> str:
        return f"Address : {self.city} {self.country}"

    def display(self) -> str:
        """Print the address and return the printed text."""
        return _show(str(self))


@dataclass
class Person:
    """Someone known to the system by e-mail address."""

    email: str = "N/A"
    birth_date: Date = field(default_factory=Date)
    full_name: Name = field(default_factory=Name)
    address: Address = field(default_factory=Address)

    def __str__(self) -> str:
        return "\n".join(
            [
                str(self.full_name),
                f"Email : {self.email}",
                str(self.birth_date),
                str(self.address),
            ]
        )

    def display(self) -> str:
        """Print name, e-mail, birth date and address; return the printed text."""
        return _show(str(self))


@dataclass
class Student(Person):
    """A student, identified by roll number."""

    email: str = ""
    roll_number: str = ""
    gpa: float = 0.0

    def __str__(self) -> str:
        return "\n".join(
            [
                super().__str__(),
                f"Roll Number: {self.roll_number}",
                f"GPA: {_number(self.gpa)}",
            ]
        )

    def display(self) -> str:
        """Print the person's details, roll number and GPA; return the text."""
        return _show(str(self))


@dataclass
class Teacher(Person):
    """A teacher, identified by teacher id."""

    teacher_id: str = ""
    designation: str = "designation"
    salary: float = 0.0

    def __str__(self) -> str:
        return "\n".join(
            [
                f"Teacher ID: {self.teacher_id}",
                super().__str__(),
                f"Designation: {self.designation}",
                f"Salary: {_number(self.salary)}",
            ]
        )

    def display(self) -> str:
        """Print teacher id, personal details, designation and salary."""
        return _show(str(self))