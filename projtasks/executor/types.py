from dataclasses import dataclass


@dataclass(frozen=True)
class TaskResult:
    task_id: str
    argv: tuple[str, ...]
    returncode: int
    duration_s: float

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ExecutorError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class CollaboratorFailure(ExecutorError):
    """The external tool for a task could not be located or executed."""

    def __init__(self, task_id: str, program: str, returncode: int, reason: str):
        super().__init__(f"{task_id}: cannot run '{program}': {reason}")
        self.task_id = task_id
        self.program = program
        self.returncode = returncode
        self.reason = reason
