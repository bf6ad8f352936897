"""Submission checks for the page forms.

Each ``validate_*`` function takes the submitted values keyed like the wire
payload and returns the message of the first rule that fails, or None.
Uniqueness rules scan the full current list through ``existing``, a callable
that is only invoked when the number itself is well formed. Nothing holds the
number between this scan and the insert, so two concurrent submissions can
both pass.
"""
import re
from datetime import datetime
from decimal import Decimal, InvalidOperation

from .schemas import parse_datetime

STUDENT_NUMBER = re.compile(r"^N\d{4}$")
EMPLOYEE_NUMBER = re.compile(r"^T\d{3}$")


def _is_future(value):
    parsed = parse_datetime(value)
    return parsed is not None and parsed > datetime.now()


def _date_problem(value, future, invalid):
    if _is_future(value):
        return future
    if parse_datetime(value) is None:
        return invalid
    return None


def _name_problem(first, last, both, first_only, last_only):
    if not first and not last:
        return both
    if not first:
        return first_only
    if not last:
        return last_only
    return None


def _taken(records, attr, value, exclude_id=None):
    return any(getattr(r, attr) == value and r.id != exclude_id for r in records)


def _positive(value):
    try:
        number = Decimal(str(value).strip())
        return number.is_finite() and number > 0
    except InvalidOperation:
        return False


def _teacher_id(value):
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


# ---------- Students ----------
def validate_student_create(form, existing):
    number = form.get("StudentNumber")
    if number and not STUDENT_NUMBER.match(number):
        return "Student number should start with 'N' followed by 4 digits. Eg: N1234"
    if number and _taken(existing(), "student_number", number):
        return "This student number has already been taken by another student"
    enrol = form.get("EnrolDate")
    if enrol:
        problem = _date_problem(enrol, "Enrol Date cannot be in the future.",
                                "Invalid enrol date format.")
        if problem:
            return problem
    return _name_problem(form.get("StudentFName"), form.get("StudentLName"),
                         "Student first and last name cannot be empty",
                         "Student first name cannot be empty",
                         "Student last name cannot be empty")


def validate_student_update(student_id, form, existing):
    number = form.get("StudentNumber")
    if not number:
        return "Student number cannot be empty."
    if not STUDENT_NUMBER.match(number):
        return "Student number must start with 'N' followed by 4 digits (e.g., N1234)."
    if _taken(existing(), "student_number", number, exclude_id=student_id):
        return "This student number is already taken by another student."
    enrol = form.get("EnrolDate")
    if not enrol:
        return "Enrol Date cannot be empty."
    problem = _date_problem(enrol, "Enrol Date cannot be in the future.",
                            "Invalid enrol date format.")
    if problem:
        return problem
    return _name_problem(form.get("StudentFName"), form.get("StudentLName"),
                         "Student first and last names cannot both be empty.",
                         "Student first name cannot be empty.",
                         "Student last name cannot be empty.")


# ---------- Teachers ----------
def validate_teacher_create(form, existing):
    # no salary rule here, unlike validate_teacher_update
    number = form.get("EmployeeNumber")
    if number and not EMPLOYEE_NUMBER.match(number):
        return "Employee number should start with 'T' followed by 3 digits. Eg: T123"
    if number and _taken(existing(), "employee_number", number):
        return "This employee number has already been taken by the teacher"
    hired = form.get("HireDate")
    if hired:
        problem = _date_problem(hired, "Hire Date cannot be in future.",
                                "Invalid hire date format.")
        if problem:
            return problem
    return _name_problem(form.get("TeacherFName"), form.get("TeacherLName"),
                         "Teacher first and last name cannot be empty",
                         "Teacher first name cannot be empty",
                         "Teacher last name cannot be empty")


def validate_teacher_update(teacher_id, form, existing):
    number = form.get("EmployeeNumber")
    if not number:
        return "Employee number cannot be empty."
    if not EMPLOYEE_NUMBER.match(number):
        return "Employee number must start with 'T' followed by 3 digits (e.g., T123)."
    if _taken(existing(), "employee_number", number, exclude_id=teacher_id):
        return "This employee number is already taken."
    hired = form.get("HireDate")
    if not hired:
        return "Hire date cannot be empty."
    problem = _date_problem(hired, "Hire date cannot be in the future.",
                            "Invalid hire date format.")
    if problem:
        return problem
    if not _positive(form.get("Salary")):
        return "Salary must be greater than zero."
    return _name_problem(form.get("TeacherFName"), form.get("TeacherLName"),
                         "Both first and last names cannot be empty.",
                         "First name cannot be empty.",
                         "Last name cannot be empty.")


# ---------- Courses ----------
def validate_course_create(form):
    for key, label in (("StartDate", "start"), ("FinishDate", "finish")):
        value = form.get(key)
        if value:
            problem = _date_problem(value, f"Course {label} date cannot be in future.",
                                    f"Invalid course {label} date format.")
            if problem:
                return problem
    if not form.get("CourseName"):
        return "Course name cannot be empty"
    return None


def validate_course_update(form):
    for key, label in (("StartDate", "start"), ("FinishDate", "finish")):
        value = form.get(key)
        if not value:
            return f"Course {label} date cannot be empty."
        problem = _date_problem(value, f"Course {label} date cannot be in the future.",
                                f"Invalid course {label} date format.")
        if problem:
            return problem
    if not form.get("CourseName"):
        return "Course name cannot be empty."
    if not form.get("CourseCode"):
        return "Course code cannot be empty."
    if _teacher_id(form.get("TeacherId")) == 0:
        return "Teacher ID cannot be empty or invalid."
    return None
