from flask import jsonify, request
from ...errors import PayloadError
from ...repositories import DeleteResult, courses, students, teachers
from ...schemas import COURSE, STUDENT, TEACHER
from . import bp

def _payload():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise PayloadError("Request body must be a JSON object.")
    return data

def _delete_message(name, entity_id, outcome):
    if outcome is DeleteResult.REMOVED:
        text = f"The {name} with given id {entity_id} has been removed from the DB"
    else:
        text = f"The {name} with given id {entity_id} is not found"
    return text, 200, {"Content-Type": "text/plain; charset=utf-8"}

# ---------- Students ----------
@bp.get("/Student/ListStudents")
def list_students():
    return jsonify([STUDENT.dump(s) for s in students.list()])

@bp.get("/Student/FindStudent/<int:id>")
def find_student(id):
    return jsonify(STUDENT.dump(students.find(id)))

@bp.post("/Student/AddStudent")
def add_student():
    return jsonify(students.create(_payload()))

@bp.delete("/Student/DeleteStudent/<int:id>")
def delete_student(id):
    return _delete_message("student", id, students.delete(id))

@bp.put("/Student/UpdateStudent/<int:id>")
def update_student(id):
    return jsonify(STUDENT.dump(students.update(id, _payload())))

# ---------- Teachers ----------
@bp.get("/Teacher/ListTeachers")
def list_teachers():
    return jsonify([TEACHER.dump(t) for t in teachers.list()])

@bp.get("/Teacher/ListCourses")
def list_teacher_courses():
    return jsonify([COURSE.dump(c) for c in teachers.courses.list()])

@bp.get("/Teacher/FindTeacher/<int:id>")
def find_teacher(id):
    return jsonify(TEACHER.dump(teachers.find(id)))

@bp.post("/Teacher/AddTeacher")
def add_teacher():
    return jsonify(teachers.create(_payload()))

@bp.delete("/Teacher/DeleteTeacher/<int:id>")
def delete_teacher(id):
    return _delete_message("teacher", id, teachers.delete(id))

@bp.put("/Teacher/UpdateTeacher/<int:id>")
def update_teacher(id):
    return jsonify(TEACHER.dump(teachers.update(id, _payload())))

# ---------- Courses ----------
@bp.get("/Course/ListCourses")
def list_courses():
    return jsonify([COURSE.dump(c) for c in courses.list()])

@bp.get("/Course/FindCourse/<int:id>")
def find_course(id):
    return jsonify(COURSE.dump(courses.find(id)))

@bp.post("/Course/AddCourse")
def add_course():
    return jsonify(courses.create(_payload()))

@bp.delete("/Course/DeleteCourse/<int:id>")
def delete_course(id):
    return _delete_message("course", id, courses.delete(id))

@bp.put("/Course/UpdateCourse/<int:id>")
def update_course(id):
    return jsonify(COURSE.dump(courses.update(id, _payload())))
