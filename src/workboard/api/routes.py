# src/workboard/api/routes.py

"""
HTTP handlers: one per (path, method).

Each handler performs exactly one repository call, then builds the envelope
from the copied-out entities. Serialization never happens under the store lock.
"""

from __future__ import annotations

import logging

from flask import Blueprint, jsonify, request

from .. import __version__
from ..core.ports import WorkboardRepo
from .envelope import ApiResponse, listed, single
from .schemas import CreateProjectRequest, CreateTaskRequest, CreateUserRequest, decode_request

logger = logging.getLogger(__name__)

FEATURES = [
    "User management",
    "Project tracking",
    "Task listing",
    "Aggregate statistics",
    "Thread-safe in-memory store",
    "CORS enabled",
]


def _reply(resp: ApiResponse):
    return jsonify(resp.to_dict())


def create_api_blueprint(repo: WorkboardRepo, *, task_create_enabled: bool = False) -> Blueprint:
    """
    Build the API blueprint bound to `repo`.

    The repository is injected here (composition root decides which one),
    so every app instance, and every test, can own its own store.
    """
    bp = Blueprint("api", __name__)

    endpoints = [
        "GET /",
        "GET /users",
        "POST /users",
        "GET /projects",
        "POST /projects",
        "GET /tasks",
        "GET /stats",
    ]
    if task_create_enabled:
        endpoints.append("POST /tasks")

    @bp.get("/")
    def welcome():
        data = {"version": __version__, "features": list(FEATURES), "endpoints": list(endpoints)}
        return _reply(ApiResponse(success=True, message="Welcome to the Workboard API", data=data))

    # ---- users ----

    @bp.get("/users")
    def list_users():
        return _reply(listed(repo.list_users(), "Users retrieved successfully"))

    @bp.post("/users")
    def create_user():
        req = decode_request(CreateUserRequest, request.get_data(cache=True))
        user = repo.create_user(name=req.name, email=req.email, role=req.role)
        logger.info("User created id=%s", user.id)
        return _reply(single(user, "User created successfully"))

    # ---- projects ----

    @bp.get("/projects")
    def list_projects():
        return _reply(listed(repo.list_projects(), "Projects retrieved successfully"))

    @bp.post("/projects")
    def create_project():
        req = decode_request(CreateProjectRequest, request.get_data(cache=True))
        project = repo.create_project(
            title=req.title,
            description=req.description,
            technologies=req.technologies,
            owner_id=req.owner_id,
        )
        logger.info("Project created id=%s owner=%s", project.id, project.owner_id)
        return _reply(single(project, "Project created successfully"))

    # ---- tasks ----

    @bp.get("/tasks")
    def list_tasks():
        return _reply(listed(repo.list_tasks(), "Tasks retrieved successfully"))

    if task_create_enabled:

        @bp.post("/tasks")
        def create_task():
            req = decode_request(CreateTaskRequest, request.get_data(cache=True))
            task = repo.create_task(
                project_id=req.project_id,
                title=req.title,
                description=req.description,
                priority=req.priority,
                assigned_to=req.assigned_to,
                due_date=req.due_date,
            )
            logger.info("Task created id=%s project=%s", task.id, task.project_id)
            return _reply(single(task, "Task created successfully"))

    # ---- stats ----

    @bp.get("/stats")
    def stats():
        summary = repo.stats()
        return _reply(single(summary, "Statistics retrieved successfully"))

    return bp
