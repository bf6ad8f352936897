import click
from flask import Flask, redirect, url_for
from .extensions import db, migrate
from .errors import register_error_handlers

def register_commands(app):
    @app.cli.command("init-db")
    def init_db():
        """Create the students, teachers and courses tables."""
        db.create_all()
        click.echo("Initialized the database.")

def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    db.init_app(app)
    migrate.init_app(app, db)

    from . import models  # noqa: F401

    from .blueprints.api import bp as api_bp
    from .blueprints.student import bp as student_bp
    from .blueprints.teacher import bp as teacher_bp
    from .blueprints.course import bp as course_bp
    app.register_blueprint(api_bp, url_prefix="/api")
    app.register_blueprint(student_bp, url_prefix="/StudentPage")
    app.register_blueprint(teacher_bp, url_prefix="/TeacherPage")
    app.register_blueprint(course_bp, url_prefix="/CoursePage")
    register_error_handlers(app)
    register_commands(app)

    @app.get("/")
    def index():
        return redirect(url_for("student.list"))

    return app
