"""Courses, their discussion posts, sections, offerings and semesters."""

from __future__ import annotations

from dataclasses import dataclass, field

from coursehub.people import Person, Student


def _show(text: str) -> str:
    """Print ``text`` when there is any and hand it back."""
    if text:
        print(text)
    return text


class PostNotFoundError(LookupError):
    """Raised when a comment refers to a post the course does not have."""


@dataclass
class Comment:
    """A comment on a course post."""

    comment_id: str = ""
    post_id: str = ""
    author: Person = field(default_factory=Person)
    content: str = ""

    def __str__(self) -> str:
        return "\n".join(
            [
                f"Comment ID: {self.comment_id}",
                f"Post ID: {self.post_id}",
                f"Comment Author Gmail: {self.author.email}",
                f"Content: {self.content}",
            ]
        )

    def display(self) -> str:
        """Print the comment and return the printed text."""
        return _show(str(self))


@dataclass
class Post:
    """A discussion post with the comments made on it."""

    post_id: str = "NA"
    author: Person = field(default_factory=Person)
    content: str = "NA"
    comments: list[Comment] = field(default_factory=list)

    def add_comment(self, comment: Comment) -> None:
        """Attach a comment to this post."""
        self.comments.append(comment)

    def __str__(self) -> str:
        lines = [
            f"Post ID: {self.post_id}",
            f"Post Author gmail: {self.author.email}",
            f"Content: {self.content}",
        ]
        if self.comments:
            lines.append("-----------  Comments: -----------")
            lines.extend(str(comment) for comment in self.comments)
        else:
            lines.append("No Comments yet")
        return "\n".join(lines)

    def display(self) -> str:
        """Print the post and its comments; return the printed text."""
        return _show(str(self))


@dataclass
class Course:
    """A course and its discussion board."""

    course_id: str = "NA"
    course_name: str = "NA"
    credit_hour: int = 0
    posts: list[Post] = field(default_factory=list)

    def _summary(self) -> str:
        return "\n".join(
            [
                f"Course Id : {self.course_id}",
                f"Course Name : {self.course_name}",
                f"Credit Hour : {self.credit_hour}",
            ]
        )

    def display(self) -> str:
        """Print the course id, name and credit hours; return the text."""
        return _show(self._summary())

    def add_post(self, post_id: str, author: Person, content: str) -> Post:
        """Start a new post on the course board and return it."""
        post = Post(post_id, author, content)
        self.posts.append(post)
        return post

    def display_posts(self) -> str:
        """Print every post on the board and return the printed text."""
        return _show("\n".join(str(post) for post in self.posts))

    def add_comment(self, comment: Comment) -> None:
        """Attach ``comment`` to the first post whose id it names."""
        for post in self.posts:
            if post.post_id == comment.post_id:
                post.add_comment(comment)
                return
        raise PostNotFoundError(f"post id {comment.post_id!r} not found")


@dataclass(eq=False)
class Section:
    """A named section of a batch, with its students.

    Sections compare equal when name and batch match; students are ignored.
    """

    name: str = "NA"
    batch: int = 0
    students: list[Student] = field(default_factory=list)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return self.batch == other.batch and self.name == other.name

    def add_student(self, student: Student) -> None:
        """Add a student to the section."""
        self.students.append(student)

    def remove_student(self, student_id: str) -> None:
        """Remove the first student with roll number ``student_id``, if any."""
        for index, student in enumerate(self.students):
            if student.roll_number == student_id:
                del self.students[index]
                return

    def _students_text(self) -> str:
        return "\n".join(str(student) for student in self.students)

    def _details_text(self) -> str:
        return f"Section: {self.name}\nBatch Number: {self.batch}"

    def display_students(self) -> str:
        """Print every student in the section and return the printed text."""
        return _show(self._students_text())

    def display_details(self) -> str:
        """Print the section name and batch number; return the text."""
        return _show(self._details_text())

    def student_count(self) -> int:
        """Return how many students the section has."""
        return len(self.students)


@dataclass
class TeacherSection:
    """A teacher assigned to teach a section."""

    teacher_id: str = ""
    section: Section = field(default_factory=Section)


@dataclass
class OfferedCourse(Course):
    """A course together with the teacher/section pairs that offer it."""

    offerings: list[TeacherSection] = field(default_factory=list)

    def add_offering(self, teacher_id: str, section: Section) -> None:
        """Offer the course by ``teacher_id`` to ``section``."""
        self.offerings.append(TeacherSection(teacher_id, section))

    def remove_offering(self, index: int) -> None:
        """Remove the offering at ``index``."""
        if not 0 <= index < len(self.offerings):
            raise IndexError(f"invalid offering index {index}")
        del self.offerings[index]

    def display_details(self) -> str:
        """Print the course details and the number of offerings."""
        return _show(
            f"{self._summary()}\nNumber of Offerings: {len(self.offerings)}"
        )

    def _offerings_text(self) -> str:
        if not self.offerings:
            return "No offerings available for this course."
        return "\n".join(
            f"\nOffering #{number}:\n"
            f"Teacher ID: {offering.teacher_id}\n"
            f"{offering.section._details_text()}"
            for number, offering in enumerate(self.offerings, start=1)
        )

    def display_offerings(self) -> str:
        """Print each offering's teacher and section; return the text."""
        return _show(self._offerings_text())

    def list_students_by_teacher(self, teacher_id: str) -> str:
        """Print the students of every section taught by ``teacher_id``."""
        blocks = []
        for offering in self.offerings:
            if offering.teacher_id == teacher_id:
                blocks.append(f"Students for Teacher ID: {teacher_id}")
                students = offering.section._students_text()
                if students:
                    blocks.append(students)
        if not blocks:
            blocks.append(f"No offering found for Teacher ID: {teacher_id}")
        return _show("\n".join(blocks))


@dataclass
class Semester:
    """A semester and the course offered in it."""

    sem_id: str
    offered_course: OfferedCourse

    def display(self) -> str:
        """Print the semester id and the offerings of its course."""
        return _show(
            f"Semester ID: {self.sem_id}\n"
            f"{self.offered_course._offerings_text()}"
        )