from dataclasses import dataclass, field
from typing import Mapping


@dataclass(frozen=True)
class TaskConfig:
    id: str
    program: str
    args: tuple[str, ...]
    description: str = ""

    def argv(self) -> list[str]:
        return [self.program, *self.args]


@dataclass(frozen=True)
class ProjectConfig:
    tasks: Mapping[str, TaskConfig]

    def __iter__(self):
        for tasks_id in sorted(self.tasks):
            yield self.tasks[tasks_id]

    def __len__(self):
        return len(self.tasks)

    def has_task(self, id: str) -> bool:
        return id in self.tasks

    def get_task(self, id: str) -> TaskConfig:
        if not self.has_task(id):
            raise UnknownTask(id)

        return self.tasks[id]

    def tasks_ids(self) -> list[str]:
        return sorted(self.tasks.keys())


@dataclass(frozen=True)
class ToolsConfig:
    ctags: str = "ctags"
    pygount: str = "pygount"


@dataclass(frozen=True)
class Settings:
    tools: ToolsConfig = field(default_factory=ToolsConfig)
    log_level: str = "WARNING"


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnknownTask(ConfigError):
    def __init__(self, task_id: str):
        super().__init__(f"Unknown task: '{task_id}'")
        self.task_id = task_id
