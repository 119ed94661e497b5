"""Loading and validation of the YAML configuration file."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Mapping

import yaml


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or is malformed."""


def _scalar_text(value: Any, key: str) -> str:
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        raise ConfigError(f"failed to decode config: '{key}' must be a string")
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _text_list(value: Any, key: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"failed to decode config: '{key}' must be a list")
    return [_scalar_text(item, key) for item in value]


@dataclass
class Rule:
    """How to collect files from one directory into a Markdown section."""

    base_dir: str = ""
    include: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)
    exclude_dirs: list[str] = field(default_factory=list)
    section_heading: str = ""
    description: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "Rule":
        """Build a rule from a decoded YAML mapping."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError("failed to decode config: each rule must be a mapping")
        return cls(
            base_dir=_scalar_text(data.get("base_dir"), "base_dir"),
            include=_text_list(data.get("include"), "include"),
            exclude=_text_list(data.get("exclude"), "exclude"),
            exclude_dirs=_text_list(data.get("exclude_dirs"), "exclude_dirs"),
            section_heading=_scalar_text(data.get("section_heading"), "section_heading"),
            description=_scalar_text(data.get("description"), "description"),
        )


@dataclass
class Config:
    """Maps output file names to the rules that define their content."""

    outputs: dict[str, list[Rule]] = field(default_factory=dict)


def load_config(config_path: str | os.PathLike[str]) -> Config:
    """Read and parse a YAML configuration file."""
    try:
        with open(config_path, "rb") as handle:
            raw = handle.read()
    except OSError as exc:
        raise ConfigError(f"failed to open config file: {exc}") from exc

    try:
        document = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"failed to decode config: {exc}") from exc

    if document is None:
        raise ConfigError("failed to decode config: document is empty")
    if not isinstance(document, dict):
        raise ConfigError("failed to decode config: top level must be a mapping")

    outputs = document.get("outputs")
    if outputs is None:
        raise ConfigError("'outputs' section missing in configuration")
    if not isinstance(outputs, dict):
        raise ConfigError("failed to decode config: 'outputs' must be a mapping")

    parsed: dict[str, list[Rule]] = {}
    for name, rules in outputs.items():
        if rules is None:
            rules = []
        if not isinstance(rules, list):
            raise ConfigError(
                f"failed to decode config: rules for '{name}' must be a list"
            )
        parsed[str(name)] = [Rule.from_mapping(rule) for rule in rules]
    return Config(outputs=parsed)