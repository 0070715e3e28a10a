"""
Task Store API Server

FastAPI-based server providing:
- REST API for task CRUD (list, create, update, delete)
- Health check endpoint
- CORS for browser clients on any origin
"""

import json
import time
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from task_store.config import ConfigProperties
from task_store.core import TaskStore
from task_store.models import utc_now_iso
from task_store.utils.exceptions import TaskNotFoundError
from task_store.utils.logger import get_logger

logger = get_logger(__name__)

ENDPOINTS = [
    ("GET", "/api/tasks"),
    ("POST", "/api/tasks"),
    ("PUT", "/api/tasks/:id"),
    ("DELETE", "/api/tasks/:id"),
    ("HEALTH", "/api/health"),
]


# ============================================================================
# APP SETUP
# ============================================================================

def create_app(store: Optional[TaskStore] = None, cors_origins: Optional[List[str]] = None) -> FastAPI:
    """
    Build the API application around a task store.

    Args:
        store: Store owned by this app; a seeded store is created when omitted.
        cors_origins: Allowed origins; defaults to ``cors.allow_origins``.
    """
    if store is None:
        store = TaskStore(seed=ConfigProperties.get_seed_enabled())

    app = FastAPI(
        title="Task Store API",
        description="In-memory task list with CRUD endpoints",
        version="1.0.0",
    )
    app.state.task_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins or ConfigProperties.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_request_timing(request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.log_exception(f"{request.method} {request.url.path} failed", exc)
            raise
        logger.log_performance(
            f"{request.method} {request.url.path}",
            time.perf_counter() - started,
            success=response.status_code < 500,
            metadata={"status_code": response.status_code},
        )
        return response

    @app.exception_handler(TaskNotFoundError)
    async def task_not_found_handler(request: Request, exc: TaskNotFoundError):
        return JSONResponse(status_code=404, content={"error": exc.message})

    app.include_router(router)
    return app


def get_store(request: Request) -> TaskStore:
    return request.app.state.task_store


async def get_payload(request: Request) -> Dict[str, Any]:
    """
    Client fields from the request body.

    Only JSON content types are parsed. A missing, non-JSON, malformed or
    non-object body yields an empty record instead of an error.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type != "application/json" and not content_type.endswith("+json"):
        return {}
    body = await request.body()
    if not body:
        return {}
    try:
        payload = json.loads(body)
    except ValueError:
        logger.warning(f"{request.method} {request.url.path} - ignoring malformed JSON body")
        return {}
    return payload if isinstance(payload, dict) else {}


# ============================================================================
# TASK API
# ============================================================================

router = APIRouter()


@router.get("/api/tasks")
async def list_tasks(store: TaskStore = Depends(get_store)):
    tasks = store.list_all()
    logger.info(f"GET /api/tasks - returning {len(tasks)} tasks")
    return tasks


@router.post("/api/tasks", status_code=201)
async def create_task(
    payload: Dict[str, Any] = Depends(get_payload),
    store: TaskStore = Depends(get_store),
):
    task = store.create(payload)
    logger.info(f"POST /api/tasks - task created: {task.get('title')}", extra={"task_id": task["id"]})
    return task


@router.put("/api/tasks/{task_id}")
async def update_task(
    task_id: str,
    payload: Dict[str, Any] = Depends(get_payload),
    store: TaskStore = Depends(get_store),
):
    try:
        task = store.update(task_id, payload)
    except TaskNotFoundError:
        logger.warning(f"PUT /api/tasks/{task_id} - task not found")
        raise
    logger.info(f"PUT /api/tasks/{task_id} - task updated: {task.get('title')}")
    logger.debug(f"PUT /api/tasks/{task_id} - new updated_at: {task['updated_at']}")
    return task


@router.delete("/api/tasks/{task_id}", status_code=204)
async def delete_task(task_id: str, store: TaskStore = Depends(get_store)):
    before = len(store)
    store.delete(task_id)
    logger.info(f"DELETE /api/tasks/{task_id} - tasks: {before} -> {len(store)}")
    return Response(status_code=204)


@router.get("/api/health")
async def health():
    return {"status": "OK", "timestamp": utc_now_iso()}


app = create_app()


# ============================================================================
# ENTRYPOINT
# ============================================================================

def start_server(host: Optional[str] = None, port: Optional[int] = None):
    """Start the API server."""
    import uvicorn

    host = host or ConfigProperties.get_server_host()
    port = port or ConfigProperties.get_server_port()
    logger.info(f"Server starting on {host}:{port}", extra={"host": host, "port": port})
    print(f"\n{'='*60}")
    print(f"  Task Store API: http://localhost:{port}")
    print(f"  Endpoints:")
    for method, path in ENDPOINTS:
        print(f"    {method:<7}http://localhost:{port}{path}")
    print(f"{'='*60}\n")
    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    start_server()
