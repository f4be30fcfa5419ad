"""
Task models for todo-cli.

This module provides the task record and the task collection.
"""

from .todo_task import StoredTodoTask, TodoTask
from .task_list import TaskList

__all__ = [
    "StoredTodoTask",
    "TodoTask",
    "TaskList",
]
