from .executor import Dispatcher
from .types import CollaboratorFailure, ExecutorError, TaskResult

__all__ = ["Dispatcher", "TaskResult", "ExecutorError", "CollaboratorFailure"]
