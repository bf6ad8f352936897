"""Shared fixtures: an app on in-memory SQLite with the tables created."""
import pytest

from school_records import create_app
from school_records.extensions import db


@pytest.fixture
def app():
    app = create_app("config.TestConfig")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def student_data():
    return {
        "StudentFName": "Sarah",
        "StudentLName": "Valdez",
        "StudentNumber": "N1678",
        "EnrolDate": "2018/06/18",
    }


@pytest.fixture
def teacher_data():
    return {
        "TeacherFName": "Alexander",
        "TeacherLName": "Bennett",
        "EmployeeNumber": "T378",
        "HireDate": "2016/08/05 00:00:00",
        "Salary": 55.3,
    }


@pytest.fixture
def course_data():
    return {
        "CourseCode": "http5110",
        "TeacherId": 0,
        "StartDate": "2019-01-15",
        "FinishDate": "2019-04-30",
        "CourseName": "Web Development",
    }
