[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studentinfo"
version = "0.1.0"
description = "Student, course and enrollment records with in-memory and CSV-file student repositories"
requires-python = ">=3.10"
dependencies = []
keywords = ["students", "courses", "enrollment", "repository", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["studentinfo"]

[tool.pytest.ini_options]
addopts = "-ra"
