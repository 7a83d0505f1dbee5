import json
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from .types import ConfigError, Settings, ToolsConfig, UnsupportedConfigFormatError

SETTINGS_FILENAMES = (
    "projtasks.yml",
    "projtasks.yaml",
    "projtasks.toml",
    "projtasks.json",
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def find_settings(cwd: str | Path = ".") -> Path | None:
    base = Path(cwd)
    for name in SETTINGS_FILENAMES:
        candidate = base / name
        if candidate.is_file():
            return candidate
    return None


def load_settings(path: str | Path) -> Settings:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Config file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Config path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    settings = _build_settings(raw_file)
    return settings


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    text = path.read_text(encoding="utf-8")
    match fmt:
        case "yaml":
            try:
                raw_file = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise ConfigError(f"{path}: invalid YAML") from exc
            # An empty YAML document means "all defaults".
            if raw_file is None:
                raw_file = {}
        case "toml":
            try:
                raw_file = tomllib.loads(text)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"{path}: invalid TOML") from exc
        case "json":
            try:
                raw_file = json.loads(text)
            except json.JSONDecodeError as exc:
                raise ConfigError(f"{path}: invalid JSON") from exc
        case _:
            raise AssertionError("Unreachable")

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: parsed succesfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_settings(raw: Mapping[str, Any]) -> Settings:
    keys = {"tools", "log_level"}

    for key in raw.keys():
        if key not in keys:
            raise ConfigError(f"Can't process: {key}")

    tools = ToolsConfig()
    log_level = Settings().log_level

    if "tools" in raw:
        tools = _build_tools_config(raw["tools"])

    if "log_level" in raw:
        if not isinstance(raw["log_level"], str):
            raise ConfigError("'log_level' should be a string")

        log_level = raw["log_level"].strip().upper()

        if log_level not in LOG_LEVELS:
            raise ConfigError(
                f"Unknown log_level: {raw['log_level']}\n Expected one of: {', '.join(LOG_LEVELS)}"
            )

    return Settings(tools=tools, log_level=log_level)


def _build_tools_config(raw: Any) -> ToolsConfig:
    if not isinstance(raw, Mapping):
        raise ConfigError(f"'tools' must be a mapping, got {type(raw)}")

    programs = {}

    for tool, program in raw.items():
        if tool not in ("ctags", "pygount"):
            raise ConfigError(f"tools: unknown tool '{tool}'")

        if not isinstance(program, str):
            raise ConfigError(f"tools: {tool} should be a string")

        if len(program.strip()) < 1:
            raise ConfigError(f"tools: {tool} can't be empty")

        programs[tool] = program.strip()

    return ToolsConfig(**programs)
