from ..extensions import db

class Course(db.Model):
    __tablename__ = "courses"
    id = db.Column("courseid", db.Integer, primary_key=True)
    code = db.Column("coursecode", db.String(32))
    # plain integer, a course may point at a teacher that does not exist
    teacher_id = db.Column("teacherid", db.Integer, nullable=False, default=0)
    start_date = db.Column("startdate", db.Date)
    finish_date = db.Column("finishdate", db.Date)
    name = db.Column("coursename", db.String(128))
