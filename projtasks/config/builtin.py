"""Static task table: the only tasks this tool knows about."""

from types import MappingProxyType

from .types import ProjectConfig, TaskConfig, ToolsConfig

# JSON data at any depth below the root, and the build output tree.
TAGS_EXCLUDES: tuple[str, ...] = ("*/*.json", "target/*")

LINES_FOLDERS_TO_SKIP: tuple[str, ...] = ("target", "data", "__pycache__", ".git")
# The generated index file itself and rendered docs.
LINES_NAMES_TO_SKIP: tuple[str, ...] = ("tags", "*.html")


def tags_task(program: str = "ctags") -> TaskConfig:
    args = ("-R", *(f"--exclude={pattern}" for pattern in TAGS_EXCLUDES), ".")
    return TaskConfig(
        "tags",
        program,
        args,
        "Build a symbol index of the source tree",
    )


def lines_task(program: str = "pygount") -> TaskConfig:
    args = (
        "--format=summary",
        "--folders-to-skip=" + ",".join(LINES_FOLDERS_TO_SKIP),
        "--names-to-skip=" + ",".join(LINES_NAMES_TO_SKIP),
    )
    return TaskConfig(
        "lines",
        program,
        args,
        "Summarize line counts of hand-written source",
    )


def build_project(tools: ToolsConfig | None = None) -> ProjectConfig:
    tools = tools or ToolsConfig()
    tasks = [tags_task(tools.ctags), lines_task(tools.pygount)]
    return ProjectConfig(tasks=MappingProxyType({task.id: task for task in tasks}))


DEFAULT_TASKS = build_project()
