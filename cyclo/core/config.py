from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from cyclo.core.errors import ConfigError
from cyclo.utils.files import DEFAULT_EXTENSIONS


CONFIG_FILE_NAMES = [
    ".cyclo.yaml",
    ".cyclo.yml",
    ".cyclo.json",
]

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": 1,
    "analysis": {
        "extensions": list(DEFAULT_EXTENSIONS),
        "include_hidden": False,
        "jobs": 1,
    },
    "output": {
        "path": "cyclo.js",
        "variable": "jsondata",
        "colorscale": "Greens",
    },
    "debug": {
        "enabled": False,
        "path": "debug.txt",
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _validate(data: Dict[str, Any], source: str) -> Dict[str, Any]:
    for section in ("analysis", "output", "debug"):
        if not isinstance(data.get(section, {}), dict):
            raise ConfigError(f"{source}: '{section}' must be a mapping")
    analysis = data.get("analysis", {})
    extensions = analysis.get("extensions", [])
    if not isinstance(extensions, list) or not all(isinstance(ext, str) for ext in extensions):
        raise ConfigError(f"{source}: 'analysis.extensions' must be a list of strings")
    jobs = analysis.get("jobs", 1)
    if isinstance(jobs, bool) or not isinstance(jobs, int):
        raise ConfigError(f"{source}: 'analysis.jobs' must be an integer, got {jobs!r}")
    if not isinstance(analysis.get("include_hidden", False), bool):
        raise ConfigError(f"{source}: 'analysis.include_hidden' must be true or false")
    return data


def find_config(start_path: str = ".") -> Optional[str]:
    """Search ``start_path`` and its parents for a cyclo config file."""
    current = Path(start_path).resolve()
    while True:
        for name in CONFIG_FILE_NAMES:
            candidate = current / name
            if candidate.is_file():
                return str(candidate)
        if current == current.parent:
            return None
        current = current.parent


@dataclass(frozen=True)
class Config:
    data: Dict[str, Any]

    @classmethod
    def default(cls) -> "Config":
        return cls(DEFAULT_CONFIG)

    @classmethod
    def load(cls, path: str | None) -> "Config":
        if not path:
            return cls.default()
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {path}")
        raw = config_path.read_text(encoding="utf-8")
        try:
            if config_path.suffix.lower() in {".json"}:
                overrides = json.loads(raw)
            else:
                overrides = yaml.safe_load(raw) or {}
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise ConfigError(f"Malformed config file {path}: {exc}") from exc
        if not isinstance(overrides, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return cls(_validate(_deep_merge(DEFAULT_CONFIG, overrides), path))

    def with_overrides(self, overrides: Dict[str, Any]) -> "Config":
        return Config(_validate(_deep_merge(self.data, overrides), "overrides"))

    def analysis(self) -> Dict[str, Any]:
        return self.data.get("analysis", {})

    def extensions(self) -> List[str]:
        return list(self.analysis().get("extensions", DEFAULT_EXTENSIONS))

    def include_hidden(self) -> bool:
        return bool(self.analysis().get("include_hidden", False))

    def jobs(self) -> int:
        return max(1, self.analysis().get("jobs", 1))

    def output(self) -> Dict[str, Any]:
        return self.data.get("output", {})

    def debug(self) -> Dict[str, Any]:
        return self.data.get("debug", {})


def default_config_text() -> str:
    return yaml.safe_dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False)
