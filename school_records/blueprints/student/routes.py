from flask import current_app, redirect, render_template, url_for
from ...repositories import students
from ...schemas import STUDENT
from ...validation import validate_student_create, validate_student_update
from ..common import form_payload, reject, render_validation
from . import bp

PAGE = "student"

@bp.get("/List", endpoint="list")
def list_students():
    items = [STUDENT.dump(s) for s in students.list()]
    return render_template("list.html", page=PAGE, schema=STUDENT, title="Students", records=items)

@bp.get("/Show/<int:id>", endpoint="show")
def show_student(id):
    return render_template("show.html", page=PAGE, schema=STUDENT, title="Student",
                           record=STUDENT.dump(students.find(id)), id=id)

@bp.get("/New", endpoint="new")
def new_student():
    return render_template("form.html", page=PAGE, schema=STUDENT, title="New Student",
                           action=url_for("student.create"), record={})

@bp.get("/Validation", endpoint="validation")
def validation():
    return render_validation(PAGE, "Student")

@bp.post("/Create", endpoint="create")
def create_student():
    data = form_payload(STUDENT)
    error = validate_student_create(data, students.list)
    if error:
        return reject(PAGE, error)
    sid = students.create(data)
    current_app.logger.info("Student %s created", sid)
    return redirect(url_for("student.show", id=sid))

@bp.get("/DeleteConfirm/<int:id>", endpoint="delete_confirm")
def delete_confirm(id):
    return render_template("delete_confirm.html", page=PAGE, schema=STUDENT, title="Student",
                           record=STUDENT.dump(students.find(id)), id=id)

@bp.post("/Delete/<int:id>", endpoint="delete")
def delete_student(id):
    outcome = students.delete(id)
    current_app.logger.info("Delete student %s: %s", id, outcome.value)
    return redirect(url_for("student.list"))

@bp.get("/Edit/<int:id>", endpoint="edit")
def edit_student(id):
    return render_template("form.html", page=PAGE, schema=STUDENT, title="Update Student",
                           action=url_for("student.update", id=id),
                           record=STUDENT.dump(students.find(id)))

@bp.post("/Update/<int:id>", endpoint="update")
def update_student(id):
    data = form_payload(STUDENT)
    error = validate_student_update(id, data, students.list)
    if error:
        return reject(PAGE, error)
    students.update(id, data)
    return redirect(url_for("student.show", id=id))
