[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yekestan"
version = "0.1.0"
description = "Course management for admins, professors and students, kept in JSON files"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "courses", "assignments", "grades", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
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

[tool.hatch.build.targets.wheel]
packages = ["yekestan"]

[tool.pytest.ini_options]
addopts = "-ra"
