"""Application services."""

from tracker.services.progress_service import ProgressService, TaskResult
from tracker.services.task_gate import TaskGate

__all__ = ["ProgressService", "TaskGate", "TaskResult"]
