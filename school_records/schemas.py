"""Column mapping for the three record types.

An ``EntitySchema`` ties a model to the keys used on the wire (JSON bodies and
HTML forms share them) and to the pattern each date column is written out in.
Dates are read back leniently; see ``INPUT_FORMATS``.
"""
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Optional

from .errors import PayloadError
from .models import Course, Student, Teacher

TEXT, INT, DECIMAL, DATE, DATETIME = "text", "int", "decimal", "date", "datetime"

INPUT_FORMATS = (
    "%Y-%m-%d", "%Y/%m/%d",
    "%Y-%m-%d %H:%M:%S", "%Y/%m/%d %H:%M:%S",
    "%Y-%m-%d %H:%M", "%Y/%m/%d %H:%M",
    "%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M",
)
_PLACEHOLDERS = {"%Y": "yyyy", "%m": "MM", "%d": "dd", "%H": "HH", "%M": "mm", "%S": "ss"}


def parse_datetime(value):
    """Return ``value`` as a datetime, or None if it is empty or unreadable.

    Date-only input resolves to midnight.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str):
        return None
    text = value.strip()
    for fmt in INPUT_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


@dataclass(frozen=True)
class Field:
    attr: str
    key: str
    label: str
    kind: str = TEXT
    fmt: Optional[str] = None  # output pattern for DATE / DATETIME

    def load(self, value):
        if self.kind == TEXT:
            return None if value is None else str(value)
        if self.kind == INT:
            if value in (None, ""):
                return 0
            if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
                raise PayloadError(f"{self.label} must be a whole number.")
            try:
                return int(value)
            except (TypeError, ValueError):
                raise PayloadError(f"{self.label} must be a whole number.")
        if self.kind == DECIMAL:
            if value in (None, ""):
                return Decimal(0)
            try:
                number = Decimal(str(value))
            except InvalidOperation:
                raise PayloadError(f"{self.label} must be a number.")
            if not number.is_finite():
                raise PayloadError(f"{self.label} must be a number.")
            return number
        if value in (None, ""):
            return None
        parsed = parse_datetime(value)
        if parsed is None:
            raise PayloadError(f"{self.label} is not a valid date.")
        return parsed.date() if self.kind == DATE else parsed

    def dump(self, value):
        if self.kind in (DATE, DATETIME):
            return value.strftime(self.fmt) if value else ""
        if self.kind == DECIMAL:
            return float(value or 0)
        if self.kind == TEXT:
            return "" if value is None else value
        return value

    @property
    def empty(self):
        return 0 if self.kind in (INT, DECIMAL) else None

    @property
    def placeholder(self):
        text = self.fmt or ""
        for directive, shown in _PLACEHOLDERS.items():
            text = text.replace(directive, shown)
        return text


@dataclass(frozen=True)
class EntitySchema:
    name: str
    model: type
    id_key: str
    fields: tuple

    def load(self, data):
        """Map a wire payload onto model attributes. The id is never taken."""
        return {f.attr: f.load(data.get(f.key)) for f in self.fields}

    def dump(self, obj):
        if obj is None:
            return self.empty()
        record = {self.id_key: obj.id}
        for f in self.fields:
            record[f.key] = f.dump(getattr(obj, f.attr))
        return record

    def empty(self):
        record = {self.id_key: 0}
        for f in self.fields:
            record[f.key] = f.empty
        return record


class TeacherSchema(EntitySchema):

    def dump(self, obj):
        record = super().dump(obj)
        if obj is not None:
            record["CoursesByTeacher"] = [COURSE.dump(c) for c in obj.courses]
        return record

    def empty(self):
        record = super().empty()
        record["CoursesByTeacher"] = []
        return record


STUDENT = EntitySchema("student", Student, "StudentId", (
    Field("first_name", "StudentFName", "First name"),
    Field("last_name", "StudentLName", "Last name"),
    Field("student_number", "StudentNumber", "Student number"),
    Field("enrol_date", "EnrolDate", "Enrol date", DATE, "%Y/%m/%d"),
))

COURSE = EntitySchema("course", Course, "CourseId", (
    Field("code", "CourseCode", "Course code"),
    Field("teacher_id", "TeacherId", "Teacher ID", INT),
    Field("start_date", "StartDate", "Start date", DATE, "%Y-%m-%d"),
    Field("finish_date", "FinishDate", "Finish date", DATE, "%Y-%m-%d"),
    Field("name", "CourseName", "Course name"),
))

TEACHER = TeacherSchema("teacher", Teacher, "TeacherId", (
    Field("first_name", "TeacherFName", "First name"),
    Field("last_name", "TeacherLName", "Last name"),
    Field("employee_number", "EmployeeNumber", "Employee number"),
    Field("hire_date", "HireDate", "Hire date", DATETIME, "%Y/%m/%d %H:%M:%S"),
    Field("salary", "Salary", "Salary", DECIMAL),
))
