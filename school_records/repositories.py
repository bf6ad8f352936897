"""Store access for students, teachers and courses.

One ``Repository`` per table, driven by its ``EntitySchema``. Every write is a
single statement committed on its own; nothing spans statements, so the
read-back done by ``update`` is a separate round trip.
"""
import enum
from collections import defaultdict

from flask import current_app
from sqlalchemy import delete, select, update

from .extensions import db
from .schemas import COURSE, STUDENT, TEACHER


class DeleteResult(enum.Enum):
    REMOVED = "removed"
    NOT_FOUND = "not found"


class Repository:

    def __init__(self, schema):
        self.schema = schema
        self.model = schema.model

    def list(self):
        # store order, callers must not rely on it
        return db.session.scalars(select(self.model)).all()

    def find(self, entity_id):
        """Row with this id, or None."""
        return db.session.get(self.model, entity_id)

    def create(self, data):
        obj = self.model(**self.schema.load(data))
        db.session.add(obj)
        db.session.commit()
        current_app.logger.debug("Created %s %s", self.schema.name, obj.id)
        return obj.id

    def delete(self, entity_id):
        result = db.session.execute(
            delete(self.model).where(self.model.id == entity_id)
            .execution_options(synchronize_session=False)
        )
        db.session.commit()
        if result.rowcount > 0:
            current_app.logger.debug("Deleted %s %s", self.schema.name, entity_id)
            return DeleteResult.REMOVED
        return DeleteResult.NOT_FOUND

    def update(self, entity_id, data):
        """Overwrite every column of the row, then read it back.

        There is no existence check: an unknown id updates nothing and the
        read-back returns None.
        """
        values = {getattr(self.model, attr): value
                  for attr, value in self.schema.load(data).items()}
        result = db.session.execute(
            update(self.model).where(self.model.id == entity_id).values(values)
            .execution_options(synchronize_session=False)
        )
        db.session.commit()
        current_app.logger.debug("Updated %s %s (%d row(s))",
                                 self.schema.name, entity_id, result.rowcount)
        return self.find(entity_id)


class TeacherRepository(Repository):
    """Teachers with ``courses`` filled in from a full course listing.

    The listing is indexed by teacher id once per call instead of being
    rescanned for every teacher.
    """

    def __init__(self, courses):
        super().__init__(TEACHER)
        self.courses = courses

    def _attach_courses(self, teachers):
        by_teacher = defaultdict(list)
        for course in self.courses.list():
            by_teacher[course.teacher_id].append(course)
        for teacher in teachers:
            teacher.courses = list(by_teacher.get(teacher.id, ()))
        return teachers

    def list(self):
        return self._attach_courses(super().list())

    def find(self, entity_id):
        teacher = super().find(entity_id)
        if teacher is not None:
            self._attach_courses([teacher])
        return teacher


students = Repository(STUDENT)
courses = Repository(COURSE)
teachers = TeacherRepository(courses)
