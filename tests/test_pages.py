"""Page flows: validate, persist, redirect, and the read-once error message."""
from datetime import date, timedelta

from school_records.extensions import db
from school_records.repositories import courses, students, teachers

TOMORROW = (date.today() + timedelta(days=1)).strftime("%Y/%m/%d")


def as_form(data):
    return {key: str(value) for key, value in data.items()}


def test_list_pages_render(client):
    for page in ("StudentPage", "TeacherPage", "CoursePage"):
        resp = client.get(f"/{page}/List")
        assert resp.status_code == 200
        assert "Nothing here yet." in resp.get_data(as_text=True)


def test_index_redirects_to_students(client):
    resp = client.get("/")
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/StudentPage/List")


def test_create_student_redirects_to_show(client, student_data):
    resp = client.post("/StudentPage/Create", data=student_data)
    [student] = students.list()
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith(f"/StudentPage/Show/{student.id}")

    page = client.get(f"/StudentPage/Show/{student.id}").get_data(as_text=True)
    assert "Sarah" in page and "2018/06/18" in page


def test_future_enrol_date_is_flashed_once(client, student_data):
    resp = client.post("/StudentPage/Create", data=dict(student_data, EnrolDate=TOMORROW))
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/StudentPage/Validation")
    assert students.list() == []

    first = client.get("/StudentPage/Validation").get_data(as_text=True)
    assert "Enrol Date cannot be in the future." in first
    second = client.get("/StudentPage/Validation").get_data(as_text=True)
    assert "Enrol Date cannot be in the future." not in second
    assert "Nothing to report." in second


def test_duplicate_student_number_rejected(client, student_data):
    client.post("/StudentPage/Create", data=student_data)
    page = client.post("/StudentPage/Create", data=student_data, follow_redirects=True)
    assert "This student number has already been taken by another student" in page.get_data(as_text=True)
    assert len(students.list()) == 1


def test_update_student(client, student_data):
    sid = students.create(student_data)
    resp = client.post(f"/StudentPage/Update/{sid}",
                       data=dict(student_data, StudentLName="Lopez", EnrolDate="2019-09-03"))
    assert resp.headers["Location"].endswith(f"/StudentPage/Show/{sid}")
    assert students.find(sid).last_name == "Lopez"


def test_update_student_rejects_blank_enrol_date(client, student_data):
    sid = students.create(student_data)
    page = client.post(f"/StudentPage/Update/{sid}", data=dict(student_data, EnrolDate=""),
                       follow_redirects=True)
    assert "Enrol Date cannot be empty." in page.get_data(as_text=True)
    assert students.find(sid).enrol_date is not None


def test_delete_confirm_then_delete(client, student_data):
    sid = students.create(student_data)
    assert "Sarah" in client.get(f"/StudentPage/DeleteConfirm/{sid}").get_data(as_text=True)
    resp = client.post(f"/StudentPage/Delete/{sid}")
    assert resp.headers["Location"].endswith("/StudentPage/List")
    assert students.find(sid) is None


def test_show_missing_record(client):
    page = client.get("/CoursePage/Show/42").get_data(as_text=True)
    assert "No course with id 42." in page


def test_teacher_create_then_show_lists_courses(client, teacher_data, course_data):
    form = dict(teacher_data, HireDate="2016-08-05", Salary="")
    resp = client.post("/TeacherPage/Create", data=form)
    [teacher] = teachers.list()
    assert resp.headers["Location"].endswith(f"/TeacherPage/Show/{teacher.id}")
    courses.create(dict(course_data, TeacherId=teacher.id))

    page = client.get(f"/TeacherPage/Show/{teacher.id}").get_data(as_text=True)
    assert "Courses taught" in page and "Web Development" in page


def test_teacher_update_requires_positive_salary(client, teacher_data):
    tid = teachers.create(teacher_data)
    page = client.post(f"/TeacherPage/Update/{tid}", data=dict(teacher_data, Salary="0"),
                       follow_redirects=True)
    assert "Salary must be greater than zero." in page.get_data(as_text=True)


def test_teacher_list_filters_by_hire_date(client, teacher_data):
    teachers.create(dict(teacher_data, TeacherFName="Early", HireDate="2010/01/01"))
    teachers.create(dict(teacher_data, TeacherFName="Late", EmployeeNumber="T379",
                         HireDate="2018/06/01"))

    page = client.post("/TeacherPage/List",
                       data={"StartDate": "2017-01-01", "EndDate": "2019-01-01"}).get_data(as_text=True)
    assert "Late" in page and "Early" not in page

    page = client.post("/TeacherPage/List", data={"StartDate": "2017-01-01"}).get_data(as_text=True)
    assert "Late" in page and "Early" in page


def test_course_create_and_update(client, course_data):
    resp = client.post("/CoursePage/Create", data=as_form(course_data))
    [course] = courses.list()
    assert resp.headers["Location"].endswith(f"/CoursePage/Show/{course.id}")

    page = client.post(f"/CoursePage/Update/{course.id}", data=as_form(course_data), follow_redirects=True)
    assert "Teacher ID cannot be empty or invalid." in page.get_data(as_text=True)

    resp = client.post(f"/CoursePage/Update/{course.id}", data=as_form(dict(course_data, TeacherId="3")))
    assert resp.headers["Location"].endswith(f"/CoursePage/Show/{course.id}")
    assert courses.find(course.id).teacher_id == 3


def test_unstorable_value_goes_to_validation(client, course_data):
    page = client.post("/CoursePage/Create", data=as_form(dict(course_data, TeacherId="abc")),
                       follow_redirects=True)
    assert "Teacher ID must be a whole number." in page.get_data(as_text=True)
    assert courses.list() == []


def test_edit_form_is_prefilled(client, teacher_data):
    tid = teachers.create(teacher_data)
    page = client.get(f"/TeacherPage/Edit/{tid}").get_data(as_text=True)
    assert 'value="T378"' in page
    assert 'value="2016/08/05 00:00:00"' in page


def test_store_failure_on_a_page_is_plain_text_500(client, student_data):
    db.drop_all()

    resp = client.get("/StudentPage/List")
    assert resp.status_code == 500
    assert resp.mimetype == "text/plain"
    assert resp.get_data(as_text=True) == "Database error"

    db.create_all()
    resp = client.post("/StudentPage/Create", data=student_data)
    assert resp.status_code == 302
    assert client.get("/StudentPage/List").status_code == 200
    assert len(students.list()) == 1
