# src/todolist/web/app.py

"""
Browser front end.

Serves a single page plus a small JSON API over the shared AppState. Handlers
are coroutines with no await points, so each add/toggle/delete/clear (including
the write to the local store) finishes before the next request is handled.

The store write blocks the event loop for its duration. That serialization is
intended: one local user, and the max+1 id allocation needs a single writer.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from ..core.errors import EmptyInputError
from ..core.state import AppState
from ..tasks import task_api
from ..tasks.task_codec import task_to_dict
from ..tasks.task_store import EMPTY_MESSAGE

logger = logging.getLogger(__name__)


class AddTaskRequest(BaseModel):
    text: str


def _tasks_payload(state: AppState) -> list[dict[str, Any]]:
    return [task_to_dict(t) for t in state.tasks]


def create_app(state: AppState) -> FastAPI:
    app = FastAPI(title=str(getattr(state.settings, "app_name", "todolist")))

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def index() -> str:
        return PAGE_HTML

    @app.get("/api/tasks")
    async def get_tasks() -> dict[str, Any]:
        return {"tasks": _tasks_payload(state)}

    @app.post("/api/tasks", status_code=201)
    async def add_task(body: AddTaskRequest) -> dict[str, Any]:
        try:
            task = task_api.add(state, body.text.strip())
        except EmptyInputError as exc:
            raise HTTPException(status_code=422, detail="Task text cannot be empty.") from exc
        logger.info("Web add id=%s", task.id)
        return {"task": task_to_dict(task), "tasks": _tasks_payload(state)}

    @app.post("/api/tasks/clear-completed")
    async def clear_completed() -> dict[str, Any]:
        removed = task_api.clear_completed(state)
        logger.info("Web clear-completed removed=%d", removed)
        return {"tasks": _tasks_payload(state)}

    @app.post("/api/tasks/{task_id}/toggle")
    async def toggle_task(task_id: int) -> dict[str, Any]:
        task_api.toggle(state, task_id)
        return {"tasks": _tasks_payload(state)}

    @app.delete("/api/tasks/{task_id}")
    async def delete_task(task_id: int) -> dict[str, Any]:
        task_api.delete(state, task_id)
        return {"tasks": _tasks_payload(state)}

    return app


PAGE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>To-Do List</title>
  <style>
    body { font-family: sans-serif; max-width: 32rem; margin: 3rem auto; padding: 0 1rem; }
    .input-row { display: flex; gap: .5rem; margin-bottom: 1rem; }
    .input-row input { flex: 1; padding: .4rem; }
    ul { list-style: none; padding: 0; }
    .task-item { display: flex; align-items: center; gap: .5rem; padding: .3rem 0; }
    .task-text { flex: 1; }
    .task-item.completed .task-text { text-decoration: line-through; color: #888; }
    .empty-message { color: #888; font-style: italic; }
  </style>
</head>
<body>
  <h1>To-Do List</h1>
  <div class="input-row">
    <input id="taskInput" type="text" placeholder="What needs to be done?" autofocus>
    <button id="addBtn">Add</button>
  </div>
  <ul id="taskList"></ul>
  <button id="clearCompleted">Clear completed</button>
  <script>
    const taskInput = document.getElementById("taskInput");
    const taskList = document.getElementById("taskList");

    async function call(method, url, body) {
      const opts = { method, headers: {} };
      if (body !== undefined) {
        opts.headers["Content-Type"] = "application/json";
        opts.body = JSON.stringify(body);
      }
      const resp = await fetch(url, opts);
      if (!resp.ok) {
        console.error("Request failed:", method, url, resp.status);
        return;
      }
      const data = await resp.json();
      render(data.tasks);
    }

    function render(tasks) {
      taskList.innerHTML = "";
      if (tasks.length === 0) {
        const li = document.createElement("li");
        li.className = "empty-message";
        li.textContent = "__EMPTY__";
        taskList.appendChild(li);
        return;
      }
      for (const task of tasks) {
        const li = document.createElement("li");
        li.className = "task-item" + (task.completed ? " completed" : "");

        const checkbox = document.createElement("input");
        checkbox.type = "checkbox";
        checkbox.checked = task.completed;
        checkbox.addEventListener("change", () => call("POST", `/api/tasks/${task.id}/toggle`));

        const text = document.createElement("span");
        text.className = "task-text";
        text.textContent = task.text;

        const del = document.createElement("button");
        del.textContent = "Delete";
        del.addEventListener("click", () => call("DELETE", `/api/tasks/${task.id}`));

        li.append(checkbox, text, del);
        taskList.appendChild(li);
      }
    }

    function addTask() {
      const text = taskInput.value.trim();
      if (text === "") {
        return;
      }
      taskInput.value = "";
      call("POST", "/api/tasks", { text });
    }

    document.getElementById("addBtn").addEventListener("click", addTask);
    taskInput.addEventListener("keypress", (e) => { if (e.key === "Enter") addTask(); });
    document.getElementById("clearCompleted").addEventListener(
      "click", () => call("POST", "/api/tasks/clear-completed"));

    call("GET", "/api/tasks");
  </script>
</body>
</html>
""".replace("__EMPTY__", EMPTY_MESSAGE)
