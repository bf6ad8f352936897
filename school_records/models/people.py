from ..extensions import db

class Student(db.Model):
    __tablename__ = "students"
    id = db.Column("studentid", db.Integer, primary_key=True)
    first_name = db.Column("studentfname", db.String(64))
    last_name = db.Column("studentlname", db.String(64))
    student_number = db.Column("studentnumber", db.String(16))   # N####, uniqueness checked on submit
    enrol_date = db.Column("enroldate", db.Date)

class Teacher(db.Model):
    __tablename__ = "teachers"
    id = db.Column("teacherid", db.Integer, primary_key=True)
    first_name = db.Column("teacherfname", db.String(64))
    last_name = db.Column("teacherlname", db.String(64))
    employee_number = db.Column("employeenumber", db.String(16))  # T###
    hire_date = db.Column("hiredate", db.DateTime)
    salary = db.Column("salary", db.Numeric(10, 2), nullable=False, default=0)

    # not a relationship: filled in by TeacherRepository from the course list
    courses = ()
