"""Plain data records for students, courses and enrolments."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Student:
    """A student identified by ``student_id``."""

    student_id: str = ""
    full_name: str = ""
    level: int = 0


@dataclass
class Course:
    """A course offered by the institution."""

    course_id: str = ""
    course_name: str = ""
    course_code: str = ""
    description: str = ""


@dataclass
class EnrollmentRecord:
    """A student's enrolment in a course for a given term."""

    student_id: str = ""
    course_id: str = ""
    term: str = ""
    grade: int = 0