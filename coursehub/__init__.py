"""Courses, sections, people, discussion posts and student enrollments."""

__version__ = "0.1.0"