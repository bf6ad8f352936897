from ..extensions import db
from .people import Student, Teacher
from .course import Course

__all__ = ["db", "Student", "Teacher", "Course"]
