from studentinfo.models import Course, EnrollmentRecord, Student


def test_student_fields():
    s = Student("S039482", "James Smith", 3)
    assert s.student_id == "S039482"
    assert s.full_name == "James Smith"
    assert s.level == 3


def test_student_defaults():
    s = Student()
    assert (s.student_id, s.full_name, s.level) == ("", "", 0)


def test_student_is_mutable_and_comparable():
    s = Student("S1", "A", 1)
    s.full_name = "B"
    s.level = 2
    assert s == Student("S1", "B", 2)


def test_course_fields():
    c = Course("C1", "Algebra", "MATH101", "Intro")
    assert c.course_id == "C1"
    assert c.course_name == "Algebra"
    assert c.course_code == "MATH101"
    assert c.description == "Intro"


def test_course_defaults():
    assert Course() == Course("", "", "", "")


def test_enrollment_grade_defaults_to_zero():
    e = EnrollmentRecord("S1", "C1", "2025S")
    assert e.grade == 0
    assert (e.student_id, e.course_id, e.term) == ("S1", "C1", "2025S")


def test_enrollment_set_grade():
    e = EnrollmentRecord("S1", "C1", "2025S")
    e.grade = 88
    assert e == EnrollmentRecord("S1", "C1", "2025S", 88)