from flask import current_app, redirect, render_template, url_for
from ...repositories import courses
from ...schemas import COURSE
from ...validation import validate_course_create, validate_course_update
from ..common import form_payload, reject, render_validation
from . import bp

PAGE = "course"

@bp.get("/List", endpoint="list")
def list_courses():
    items = [COURSE.dump(c) for c in courses.list()]
    return render_template("list.html", page=PAGE, schema=COURSE, title="Courses", records=items)

@bp.get("/Show/<int:id>", endpoint="show")
def show_course(id):
    return render_template("show.html", page=PAGE, schema=COURSE, title="Course",
                           record=COURSE.dump(courses.find(id)), id=id)

@bp.get("/New", endpoint="new")
def new_course():
    return render_template("form.html", page=PAGE, schema=COURSE, title="New Course",
                           action=url_for("course.create"), record={})

@bp.get("/Validation", endpoint="validation")
def validation():
    return render_validation(PAGE, "Course")

@bp.post("/Create", endpoint="create")
def create_course():
    # start/finish order and the teacher id are not checked on create
    data = form_payload(COURSE)
    error = validate_course_create(data)
    if error:
        return reject(PAGE, error)
    cid = courses.create(data)
    current_app.logger.info("Course %s created", cid)
    return redirect(url_for("course.show", id=cid))

@bp.get("/DeleteConfirm/<int:id>", endpoint="delete_confirm")
def delete_confirm(id):
    return render_template("delete_confirm.html", page=PAGE, schema=COURSE, title="Course",
                           record=COURSE.dump(courses.find(id)), id=id)

@bp.post("/Delete/<int:id>", endpoint="delete")
def delete_course(id):
    outcome = courses.delete(id)
    current_app.logger.info("Delete course %s: %s", id, outcome.value)
    return redirect(url_for("course.list"))

@bp.get("/Edit/<int:id>", endpoint="edit")
def edit_course(id):
    return render_template("form.html", page=PAGE, schema=COURSE, title="Update Course",
                           action=url_for("course.update", id=id),
                           record=COURSE.dump(courses.find(id)))

@bp.post("/Update/<int:id>", endpoint="update")
def update_course(id):
    data = form_payload(COURSE)
    error = validate_course_update(data)
    if error:
        return reject(PAGE, error)
    courses.update(id, data)
    return redirect(url_for("course.show", id=id))
