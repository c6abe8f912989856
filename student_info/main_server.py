# main_server.py (Student service, REST + Swagger)
import logging

from flask import Blueprint, Flask, current_app, jsonify, request
from flasgger import Swagger

from .college_client import CollegeClient
from .config import db_config, load_config
from .logging_config import setup_logging
from .mapping import pair_to_json, student_from_json, student_to_json
from .student_services import StudentServices
from .student_store import MySQLStudentStore, StoreError

logger = logging.getLogger(__name__)

SERVICES_KEY = "student_services"

bp = Blueprint("student", __name__, url_prefix="/student")


def services() -> StudentServices:
    return current_app.extensions[SERVICES_KEY]


# ---------------------------------------------------
# STUDENT ENDPOINTS (store CRUD)
#   student(id, name, address, age, collegeId)
# ---------------------------------------------------
@bp.post("/")
def save_student():
    """
    Create or replace a student
    ---
    tags: [Student]
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          properties:
            id: {type: string, description: "omit to let the store assign one"}
            name: {type: string, example: "Alice Smith"}
            address: {type: string, example: "12 High St"}
            age: {type: string, example: "21"}
            collegeId: {type: string, example: "42"}
    responses:
      200:
        description: The stored student
      400:
        description: Body is not a JSON object
    """
    data = request.get_json(force=True, silent=True)
    try:
        student = student_from_json(data)
    except ValueError as e:
        return jsonify(error=str(e)), 400
    saved = services().save_student(student)
    return jsonify(student_to_json(saved))


@bp.get("/name/<name>")
def get_student_by_name(name):
    """
    Get a student by name
    ---
    tags: [Student]
    parameters:
      - in: path
        name: name
        type: string
        required: true
    responses:
      200:
        description: The student
      404:
        description: Not found
    """
    student = services().get_student_by_name(name)
    if student is None:
        return jsonify(error="NOT_FOUND"), 404
    return jsonify(student_to_json(student))


@bp.get("/api/all")
def get_all_students():
    """
    List all students
    ---
    tags: [Student]
    responses:
      200:
        description: List of students
    """
    return jsonify([student_to_json(s) for s in services().get_all_students()])


@bp.delete("/<student_id>")
def delete_student(student_id):
    """
    Delete a student (absent ids are not an error)
    ---
    tags: [Student]
    parameters:
      - in: path
        name: student_id
        type: string
        required: true
    responses:
      204:
        description: Deleted
    """
    services().delete_student(student_id)
    return "", 204


@bp.put("/update/<name>")
def update_student_by_name(name):
    """
    Look up a student by name (no fields are changed)
    ---
    tags: [Student]
    parameters:
      - in: path
        name: name
        type: string
        required: true
    responses:
      200:
        description: The student
      404:
        description: Not found
    """
    student = services().update_student_by_name(name)
    if student is None:
        logger.info("Student record not found with name: %s", name)
        return jsonify(error="NOT_FOUND"), 404
    logger.info("Student record found with name: %s", name)
    return jsonify(student_to_json(student))


# ---------------------------------------------------
# COLLEGE ENRICHMENT (calls the college service per student)
# ---------------------------------------------------
def _students_with_college(college_id):
    result = services().get_students_by_college_id(college_id)
    if not result:
        return "", 204
    return jsonify([pair_to_json(p) for p in result])


@bp.get("/std/<college_id>")
def get_students_by_college_id(college_id):
    """
    Students of a college, each paired with its college details
    ---
    tags: [Enrichment]
    parameters:
      - in: path
        name: college_id
        type: string
        required: true
    responses:
      200:
        description: >
          List of {student, college}. When the college service is down the
          college is a placeholder named "College Service Unavailable".
      204:
        description: No students for this college
    """
    return _students_with_college(college_id)


@bp.get("/college/<college_id>")
def get_students_by_college_id_alias(college_id):
    """
    Same as /student/std/{college_id}
    ---
    tags: [Enrichment]
    parameters:
      - in: path
        name: college_id
        type: string
        required: true
    responses:
      200:
        description: List of {student, college}
      204:
        description: No students for this college
    """
    return _students_with_college(college_id)


@bp.get("/byCollegeOnly/<college_id>")
def get_students_by_college_id_only(college_id):
    """
    Students of a college without contacting the college service
    ---
    tags: [Enrichment]
    parameters:
      - in: path
        name: college_id
        type: string
        required: true
    responses:
      200:
        description: List of students
    """
    students = services().get_students_by_college_id_only(college_id)
    return jsonify([student_to_json(s) for s in students])


def handle_store_error(e):
    return jsonify(error=str(e)), 500


# ---------------------------------------------------
# App factory (composition root)
# ---------------------------------------------------
def create_app(config=None, store=None, college_client=None):
    """Build the Flask app and wire the store and college client into it.

    Anything not passed in is built from ``config`` (``load_config()``
    when omitted).
    """
    config = config or load_config()
    setup_logging(config.get("LOG_LEVEL", "INFO"))

    if store is None:
        store = MySQLStudentStore(db_config(config))
    if college_client is None:
        college_client = CollegeClient(
            config["COLLEGE_SERVICE_URL"],
            timeout=float(config["COLLEGE_TIMEOUT"]),
        )

    app = Flask(__name__)
    app.config["SERVICE_CONFIG"] = config
    app.extensions[SERVICES_KEY] = StudentServices(store, college_client)
    app.register_blueprint(bp)
    app.register_error_handler(StoreError, handle_store_error)
    Swagger(app, template={
        "swagger": "2.0",
        "info": {"title": "Student Info Service", "version": "1.0.0"},
        "basePath": "/",
        "schemes": ["http"],
    })
    return app


# ---------------------------------------------------
# Run
# ---------------------------------------------------
def main():
    config = load_config()
    app = create_app(config)
    app.extensions[SERVICES_KEY].store.init_schema()
    port = int(config["SERVER_PORT"])
    logger.info("Swagger UI: http://localhost:%d/apidocs", port)
    try:
        app.run(host=config["SERVER_HOST"], port=port, debug=False)
    finally:
        app.extensions[SERVICES_KEY].college_client.close()


if __name__ == "__main__":
    main()
