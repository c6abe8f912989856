# micro_server.py (College service, REST + Swagger)
# Stand-in for the independently deployed college service the student
# service enriches against. Colleges live in memory only.
import logging
import threading

from flask import Flask, request, jsonify
from flasgger import Swagger

from .config import load_config
from .logging_config import setup_logging
from .mapping import college_from_json, college_to_json

logger = logging.getLogger(__name__)


class CollegeRegistry:
    def __init__(self):
        self._colleges = {}  # id -> College
        self._next_id = 1
        self._lock = threading.Lock()

    def add(self, college):
        with self._lock:
            if college.id is None:
                college.id = self._next_id
            self._next_id = max(self._next_id, college.id + 1)
            self._colleges[college.id] = college
            return college

    def get(self, college_id):
        return self._colleges.get(college_id)

    def all(self):
        return sorted(self._colleges.values(), key=lambda c: c.id)


def create_app(registry=None):
    registry = registry if registry is not None else CollegeRegistry()

    app = Flask(__name__)
    Swagger(app, template={
        "swagger": "2.0",
        "info": {"title": "College Service", "version": "1.0.0"},
        "basePath": "/",
        "schemes": ["http"],
    })

    @app.post("/college/")
    def save_college():
        """
        Create or replace a college
        ---
        tags: [College]
        consumes:
          - application/json
        parameters:
          - in: body
            name: body
            required: true
            schema:
              type: object
              properties:
                id: {type: integer, example: 42}
                collegeName: {type: string, example: "City College"}
                address: {type: string, example: "1 College Rd"}
                university: {type: string, example: "State University"}
        responses:
          200:
            description: The stored college
          400:
            description: Invalid payload
        """
        data = request.get_json(force=True, silent=True)
        try:
            college = college_from_json(data)
        except ValueError as e:
            return jsonify(error=str(e)), 400
        return jsonify(college_to_json(registry.add(college)))

    @app.get("/college/")
    def list_colleges():
        """
        List colleges
        ---
        tags: [College]
        responses:
          200:
            description: List of colleges
        """
        return jsonify([college_to_json(c) for c in registry.all()])

    @app.get("/college/<college_id>")
    def get_college(college_id):
        """
        Get a college by id
        ---
        tags: [College]
        parameters:
          - in: path
            name: college_id
            type: integer
            required: true
        responses:
          200:
            description: The college
          404:
            description: Not found
        """
        try:
            key = int(college_id)
        except ValueError:
            return jsonify(error="NOT_FOUND"), 404
        college = registry.get(key)
        if college is None:
            return jsonify(error="NOT_FOUND"), 404
        return jsonify(college_to_json(college))

    return app


def main():
    config = load_config()
    setup_logging(config["LOG_LEVEL"])
    port = int(config["COLLEGE_SERVER_PORT"])
    logger.info("College service Swagger UI: http://localhost:%d/apidocs", port)
    create_app().run(host=config["SERVER_HOST"], port=port, debug=False)


if __name__ == "__main__":
    main()
