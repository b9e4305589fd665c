"""Storage back ends for student records."""

from __future__ import annotations

import abc
import os
from dataclasses import replace
from types import TracebackType

from .models import Student

_CSV_HEADER = "StudentId,FullName,Level"


class StudentRepositoryError(RuntimeError):
    """Raised when a repository operation cannot be carried out."""


class StudentRepository(abc.ABC):
    """The operations every student repository provides."""

    @abc.abstractmethod
    def add_student(self, student: Student) -> None:
        """Add a new student."""

    @abc.abstractmethod
    def get_student(self, student_id: str) -> Student:
        """Return the student with this id, or raise StudentRepositoryError."""

    @abc.abstractmethod
    def delete_student(self, student_id: str) -> None:
        """Remove the student with this id, or raise StudentRepositoryError."""

    @abc.abstractmethod
    def update_student(self, student: Student) -> None:
        """Replace the stored student that has the same id."""

    @abc.abstractmethod
    def contains_student(self, student_id: str) -> bool:
        """Tell whether a student with this id is stored."""

    @abc.abstractmethod
    def all_students(self) -> list[Student]:
        """Return every stored student, or raise if there are none."""

    def __contains__(self, student_id: object) -> bool:
        return isinstance(student_id, str) and self.contains_student(student_id)


def _not_found(student_id: str) -> StudentRepositoryError:
    return StudentRepositoryError(f"Student with ID '{student_id}' not found.")


def _cannot_delete(student_id: str) -> StudentRepositoryError:
    return StudentRepositoryError(
        f"Cannot delete. Student with ID '{student_id}' not found."
    )


def _cannot_update(student_id: str) -> StudentRepositoryError:
    return StudentRepositoryError(
        f"Cannot update. Student with ID '{student_id}' not found."
    )


class InMemoryStudentRepository(StudentRepository):
    """Students kept in a dictionary keyed by id."""

    def __init__(self) -> None:
        self._students: dict[str, Student] = {}

    def add_student(self, student: Student) -> None:
        if student.student_id in self._students:
            raise StudentRepositoryError(
                f"Student with ID '{student.student_id}' already in."
            )
        self._students[student.student_id] = replace(student)

    def get_student(self, student_id: str) -> Student:
        try:
            return replace(self._students[student_id])
        except KeyError:
            raise _not_found(student_id) from None

    def delete_student(self, student_id: str) -> None:
        try:
            del self._students[student_id]
        except KeyError:
            raise _cannot_delete(student_id) from None

    def update_student(self, student: Student) -> None:
        if student.student_id not in self._students:
            raise _cannot_update(student.student_id)
        self._students[student.student_id] = replace(student)

    def contains_student(self, student_id: str) -> bool:
        return student_id in self._students

    def all_students(self) -> list[Student]:
        if not self._students:
            raise StudentRepositoryError("No students in memory")
        return [replace(s) for s in self._students.values()]


class FileStudentRepository(StudentRepository):
    """Students loaded from and written back to a CSV file.

    The file starts with a header line; every following line holds
    ``id,name,level``. Changes are written back by :meth:`save`,
    by :meth:`close`, or on leaving a ``with`` block.
    """

    def __init__(self, file_path: str | os.PathLike[str]) -> None:
        self.file_path = os.fspath(file_path)
        self._students: list[Student] = []
        self._closed = False
        self._load()

    def _load(self) -> None:
        try:
            handle = open(self.file_path, encoding="utf-8")
        except OSError:
            raise StudentRepositoryError(
                f"can not open: {self.file_path}!"
            ) from None
        with handle:
            next(handle, None)  # header line
            for line in handle:
                line = line.rstrip("\r\n")
                if not line.strip():
                    continue
                fields = line.split(",")
                if len(fields) < 3:
                    raise StudentRepositoryError(f"malformed record: {line!r}")
                student_id, name, level_text = fields[:3]
                try:
                    level = int(level_text)
                except ValueError:
                    raise StudentRepositoryError(
                        f"invalid level {level_text!r} for student '{student_id}'"
                    ) from None
                self._students.append(Student(student_id, name, level))

    def _index_of(self, student_id: str) -> int | None:
        return next(
            (i for i, s in enumerate(self._students) if s.student_id == student_id),
            None,
        )

    def add_student(self, student: Student) -> None:
        self._students.append(replace(student))

    def get_student(self, student_id: str) -> Student:
        index = self._index_of(student_id)
        if index is None:
            raise _not_found(student_id)
        return replace(self._students[index])

    def delete_student(self, student_id: str) -> None:
        index = self._index_of(student_id)
        if index is None:
            raise _cannot_delete(student_id)
        del self._students[index]

    def update_student(self, student: Student) -> None:
        index = self._index_of(student.student_id)
        if index is None:
            raise _cannot_update(student.student_id)
        self._students[index] = replace(student)

    def contains_student(self, student_id: str) -> bool:
        return self._index_of(student_id) is not None

    def all_students(self) -> list[Student]:
        if not self._students:
            raise StudentRepositoryError("No students in file")
        return [replace(s) for s in self._students]

    def save(self) -> None:
        """Overwrite the file with the students currently held."""
        with open(self.file_path, "w", encoding="utf-8", newline="") as handle:
            handle.write(_CSV_HEADER + "\n")
            for s in self._students:
                handle.write(f"{s.student_id},{s.full_name},{s.level}\n")

    def close(self) -> None:
        """Save to the file and drop the in-memory copy."""
        if self._closed:
            return
        self.save()
        self._students.clear()
        self._closed = True

    def __enter__(self) -> FileStudentRepository:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()