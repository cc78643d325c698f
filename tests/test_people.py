import pytest

from coursehub.people import Address, Date, Name, Person, Student, Teacher


@pytest.fixture
def ahmed():
    return Student(
        email="ahmed@example.com",
        birth_date=Date(14, 4, 2000),
        full_name=Name("Ahmed", "Mehmood"),
        address=Address("Lahore", "Pakistan"),
        roll_number="BSCS-24-001",
        gpa=3.8,
    )


@pytest.fixture
def sarah():
    return Teacher(
        email="sarah@example.com",
        birth_date=Date(5, 9, 1985),
        full_name=Name("Sarah", "Khan"),
        address=Address("Karachi", "Pakistan"),
        teacher_id="TCS001",
        designation="Professor",
        salary=85000.0,
    )


def test_date_defaults_and_display(capsys):
    date = Date()
    assert (date.day, date.month, date.year) == (1, 1, 1900)
    date.display()
    assert capsys.readouterr().out == "Date (dd/mm/yyyy) : 1 / 1 / 1900\n"


def test_name_and_address_defaults():
    assert Name() == Name("N/A", "N/A")
    assert Address() == Address("N/A", "N/A")


def test_name_display(capsys):
    Name("Sara", "Ali").display()
    assert capsys.readouterr().out.strip() == "Name : Sara Ali"


def test_address_display(capsys):
    Address("Islamabad", "Pakistan").display()
    assert capsys.readouterr().out.strip() == "Address : Islamabad Pakistan"


def test_person_defaults():
    person = Person()
    assert person.email == "N/A"
    assert person.birth_date == Date()
    assert person.full_name == Name()
    assert person.address == Address()


def test_person_display_order(capsys):
    Person(email="x@example.com").display()
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 4
    assert lines[0].startswith("Name : ")
    assert lines[1] == "Email : x@example.com"
    assert lines[2].startswith("Date (dd/mm/yyyy) : ")
    assert lines[3].startswith("Address : ")


def test_student_defaults():
    student = Student()
    assert student.email == ""
    assert student.roll_number == ""
    assert student.gpa == 0.0


def test_student_display(capsys, ahmed):
    ahmed.display()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Name : Ahmed Mehmood"
    assert lines[1] == "Email : ahmed@example.com"
    assert lines[-2] == "Roll Number: BSCS-24-001"
    assert lines[-1] == "GPA: 3.8"


def test_copies_are_independent(ahmed):
    from dataclasses import replace

    copy = replace(ahmed, roll_number="BSCS-24-002")
    assert ahmed.roll_number == "BSCS-24-001"
    assert copy.email == ahmed.email
    assert copy != ahmed


def test_teacher_defaults():
    teacher = Teacher()
    assert teacher.email == "N/A"
    assert teacher.designation == "designation"
    assert teacher.salary == 0.0
    assert teacher.teacher_id == ""


def test_teacher_display(capsys, sarah):
    sarah.display()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Teacher ID: TCS001"
    assert lines[1] == "Name : Sarah Khan"
    assert lines[-2] == "Designation: Professor"
    assert lines[-1] == "Salary: 85000"
    assert len(lines) == 7


def test_student_is_person(ahmed):
    assert isinstance(ahmed, Person)
    assert ahmed.full_name.first_name == "Ahmed"