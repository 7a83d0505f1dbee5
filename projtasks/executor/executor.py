import logging
import subprocess
import time

from projtasks.config import ProjectConfig

from .types import CollaboratorFailure, TaskResult

logger = logging.getLogger(__name__)

# Shell conventions for "command not found" / "found but not executable".
EXIT_NOT_FOUND = 127
EXIT_NOT_EXECUTABLE = 126

TERMINATE_GRACE_S = 5.0


class Dispatcher:
    def __init__(self, project: ProjectConfig):
        self.project = project

    def dispatch(self, task_id: str) -> TaskResult:
        """
        Run one task to completion and return its result.

        Raises UnknownTask before anything is spawned if `task_id` is not in
        the project. The child inherits cwd, environment and the standard
        streams; its exit code is returned as is.
        """
        task = self.project.get_task(task_id)
        argv = task.argv()
        logger.info("Running %s: %s", task_id, " ".join(argv))

        start = time.monotonic()
        proc = _spawn(task_id, argv)
        with proc:
            try:
                returncode = proc.wait()
            except BaseException:
                _stop(proc)
                raise
        duration = time.monotonic() - start

        logger.info(
            "%s finished in %.3fs, exit code = %d", task_id, duration, returncode
        )
        return TaskResult(task_id, tuple(argv), returncode, duration)


def _spawn(task_id: str, argv: list[str]) -> subprocess.Popen:
    try:
        return subprocess.Popen(argv)
    except FileNotFoundError as exc:
        raise CollaboratorFailure(
            task_id, argv[0], EXIT_NOT_FOUND, exc.strerror or str(exc)
        ) from exc
    except OSError as exc:
        raise CollaboratorFailure(
            task_id, argv[0], EXIT_NOT_EXECUTABLE, exc.strerror or str(exc)
        ) from exc


def _stop(proc: subprocess.Popen) -> None:
    if proc.poll() is not None:
        return

    logger.warning("Interrupted, stopping child process %d", proc.pid)
    proc.terminate()
    try:
        proc.wait(timeout=TERMINATE_GRACE_S)
    except subprocess.TimeoutExpired:
        logger.warning("Child process %d did not exit, killing it", proc.pid)
        proc.kill()
        proc.wait()
