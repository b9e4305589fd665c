# studentinfo

A small library for keeping student records. It has two modules.

- `studentinfo.models` holds the dataclasses `Student`, `Course` and `EnrollmentRecord`.
  - `Student` has the fields `student_id`, `full_name` and `level`.
  - `Course` has the fields `course_id`, `course_name`, `course_code` and `description`.
  - `EnrollmentRecord` has the fields `student_id`, `course_id`, `term` and `grade`. `grade` defaults to 0.
- `studentinfo.repositories` holds the student repositories.
  - `StudentRepository` is the abstract interface.
  - `InMemoryStudentRepository` keeps students in a dictionary keyed by ID.
  - `FileStudentRepository` keeps students in a CSV file.
  - Every failure raises `StudentRepositoryError`, which is a subclass of `RuntimeError`.

## Installation

```
pip install .
```

To install with the test dependencies as well:

```
pip install ".[test]"
```

## Repository operations

Every repository has these methods:

| Method | Behaviour |
| --- | --- |
| `add_student(student)` | Stores a student. |
| `get_student(student_id)` | Returns the student. Raises `StudentRepositoryError` with the message `Student with ID '<id>' not found.` if there is none. |
| `delete_student(student_id)` | Removes the student. Raises if the student is missing. |
| `update_student(student)` | Replaces the stored student that has the same `student_id`. Raises if the student is missing. |
| `contains_student(student_id)` | Returns `True` or `False`. The `in` operator does the same check: `"S039482" in repo`. |
| `all_students()` | Returns a list of every student. Raises if the repository is empty. |

Repositories store copies of the students you pass in, and they return copies. Changing a returned `Student` does not change the stored record.

## In memory

```python
from studentinfo.models import Student
from studentinfo.repositories import InMemoryStudentRepository, StudentRepositoryError

repo = InMemoryStudentRepository()
repo.add_student(Student("S039482", "James Smith", 3))

repo.contains_student("S039482")        # True
repo.get_student("S039482").full_name   # "James Smith"

try:
    repo.get_student("S039486")
except StudentRepositoryError as err:
    print(err)  # Student with ID 'S039486' not found.
```

`InMemoryStudentRepository.add_student` raises `StudentRepositoryError` if a student with the same ID is already stored. When the repository is empty, `all_students()` raises with the message `No students in memory`.

## Backed by a CSV file

The file must already exist. If it cannot be opened, the constructor raises `StudentRepositoryError` with the message `can not open: <path>!`.

The file format:

- The first line is a header, and it is skipped when the file is read.
- Each line after the header holds `id,name,level`.
- Blank lines are ignored.
- A line with fewer than three fields raises `StudentRepositoryError`. So does a level that is not an integer.

The file is read when the repository is created. Changes are written back at these points:

- `save()` overwrites the file. It writes the header `StudentId,FullName,Level` and then one line per student.
- `close()` saves and then drops the in-memory copy. Calling it again does nothing.
- Leaving a `with` block calls `close()`.

```python
from studentinfo.models import Student
from studentinfo.repositories import FileStudentRepository

with FileStudentRepository("students.csv") as repo:
    repo.add_student(Student("S712345", "Jennifer Garcia", 2))
    for student in repo.all_students():
        print(student.student_id, student.full_name, student.level)
```

`FileStudentRepository.add_student` does not check for duplicate IDs. It appends the student. When the repository holds no students, `all_students()` raises with the message `No students in file`.

Names that contain commas are written as they are, with no quoting. Such a name cannot be read back correctly.

## What the package does not do

- There is no command-line program or other user interface. The package is a library only.
- Only students have repositories. `Course` and `EnrollmentRecord` are plain data records. The package has no storage, lookup or enrolment logic for them.

## Running the tests

```
pytest
```