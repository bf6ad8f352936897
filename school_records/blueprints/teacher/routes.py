from flask import current_app, redirect, render_template, request, url_for
from ...repositories import teachers
from ...schemas import TEACHER, parse_datetime
from ...validation import validate_teacher_create, validate_teacher_update
from ..common import form_payload, reject, render_validation
from . import bp

PAGE = "teacher"

def hired_between(items, start, end):
    """Teachers hired in [start, end]; the list is unchanged unless both bounds parse."""
    lo, hi = parse_datetime(start), parse_datetime(end)
    if lo is None or hi is None:
        return items
    return [t for t in items if t.hire_date is not None and lo <= t.hire_date <= hi]

@bp.route("/List", methods=["GET", "POST"], endpoint="list")
def list_teachers():
    start = (request.form.get("StartDate") or "").strip()
    end = (request.form.get("EndDate") or "").strip()
    items = teachers.list()
    if request.method == "POST":
        items = hired_between(items, start, end)
    return render_template("list.html", page=PAGE, schema=TEACHER, title="Teachers",
                           records=[TEACHER.dump(t) for t in items],
                           hire_filter={"StartDate": start, "EndDate": end})

@bp.get("/Show/<int:id>", endpoint="show")
def show_teacher(id):
    return render_template("show.html", page=PAGE, schema=TEACHER, title="Teacher",
                           record=TEACHER.dump(teachers.find(id)), id=id)

@bp.get("/New", endpoint="new")
def new_teacher():
    return render_template("form.html", page=PAGE, schema=TEACHER, title="New Teacher",
                           action=url_for("teacher.create"), record={})

@bp.get("/Validation", endpoint="validation")
def validation():
    return render_validation(PAGE, "Teacher")

@bp.post("/Create", endpoint="create")
def create_teacher():
    data = form_payload(TEACHER)
    error = validate_teacher_create(data, teachers.list)
    if error:
        return reject(PAGE, error)
    tid = teachers.create(data)
    current_app.logger.info("Teacher %s created", tid)
    return redirect(url_for("teacher.show", id=tid))

@bp.get("/DeleteConfirm/<int:id>", endpoint="delete_confirm")
def delete_confirm(id):
    return render_template("delete_confirm.html", page=PAGE, schema=TEACHER, title="Teacher",
                           record=TEACHER.dump(teachers.find(id)), id=id)

@bp.post("/Delete/<int:id>", endpoint="delete")
def delete_teacher(id):
    # courses keep their teacher id
    outcome = teachers.delete(id)
    current_app.logger.info("Delete teacher %s: %s", id, outcome.value)
    return redirect(url_for("teacher.list"))

@bp.get("/Edit/<int:id>", endpoint="edit")
def edit_teacher(id):
    return render_template("form.html", page=PAGE, schema=TEACHER, title="Update Teacher",
                           action=url_for("teacher.update", id=id),
                           record=TEACHER.dump(teachers.find(id)))

@bp.post("/Update/<int:id>", endpoint="update")
def update_teacher(id):
    data = form_payload(TEACHER)
    error = validate_teacher_update(id, data, teachers.list)
    if error:
        return reject(PAGE, error)
    teachers.update(id, data)
    return redirect(url_for("teacher.show", id=id))
