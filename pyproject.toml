[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursehub"
version = "0.1.0"
description = "A small model of courses, sections, people, discussion posts and student enrollments."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "courses", "enrollment", "students", "grades"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coursehub = "coursehub.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["coursehub"]

[tool.pytest.ini_options]
addopts = "-ra"
