"""Student, course and enrolment records, and in-memory and CSV-file student repositories."""

__version__ = "0.1.0"
__all__ = ["models", "repositories"]