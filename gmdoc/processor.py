"""Collect source files and render them into Markdown documents."""

from __future__ import annotations

import os
import stat
from fnmatch import fnmatchcase
from typing import Iterable, Iterator, Sequence

from gmdoc.config import Config, Rule

LANGUAGES: dict[str, str] = {
    ".py": "python",
    ".js": "javascript",
    ".ts": "typescript",
    ".jsx": "javascript",
    ".tsx": "typescript",
    ".html": "html",
    ".css": "css",
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".java": "java",
    ".c": "c",
    ".cpp": "cpp",
    ".cs": "csharp",
    ".rb": "ruby",
    ".go": "go",
    ".php": "php",
    ".sh": "bash",
    ".bat": "batch",
    ".sql": "sql",
    ".swift": "swift",
    ".kt": "kotlin",
    ".rs": "rust",
    ".xml": "xml",
    ".ini": "ini",
    ".md": "markdown",
    ".txt": "plaintext",
    ".svelte": "svelte",
    ".tf": "hcl",
    ".tfvars": "hcl",
}

DEFAULT_LANGUAGE = "plaintext"

_SEPARATORS = os.sep + (os.altsep or "")


def _base_name(path: str) -> str:
    if not path:
        return "."
    stripped = path.rstrip(_SEPARATORS)
    if not stripped:
        return os.sep
    return os.path.basename(stripped)


def _extension(path: str) -> str:
    name = _base_name(os.fspath(path))
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def _matches(pattern: str, name: str) -> bool:
    if "[^" in pattern:
        pattern = pattern.replace("[^", "[!")
    return fnmatchcase(name, pattern)


def language_for(path: str | os.PathLike[str]) -> str:
    """Return the code-fence language for a file, by its extension."""
    return LANGUAGES.get(_extension(os.fspath(path)), DEFAULT_LANGUAGE)


def matches_any(path: str | os.PathLike[str], patterns: Iterable[str]) -> bool:
    """Tell whether the last element of path matches any glob pattern."""
    name = _base_name(os.fspath(path))
    return any(_matches(pattern, name) for pattern in patterns)


def _walk(
    path: str,
    include: Sequence[str],
    exclude: Sequence[str],
    exclude_dirs: Sequence[str],
) -> Iterator[str]:
    mode = os.lstat(path).st_mode
    if stat.S_ISDIR(mode):
        if matches_any(path, exclude_dirs):
            return
        for name in sorted(os.listdir(path)):
            child = os.path.normpath(os.path.join(path, name))
            yield from _walk(child, include, exclude, exclude_dirs)
        return
    if matches_any(path, exclude):
        return
    if matches_any(path, include):
        yield path


def gather_files(
    base_dir: str | os.PathLike[str],
    include_patterns: Sequence[str],
    exclude_patterns: Sequence[str],
    exclude_dirs: Sequence[str],
) -> list[str]:
    """Walk base_dir in lexical order and return the files that qualify.

    A file qualifies when its name matches an include pattern and no
    exclude pattern; directories whose name matches exclude_dirs are
    skipped together with their contents.
    """
    return list(
        _walk(os.fspath(base_dir), include_patterns, exclude_patterns, exclude_dirs)
    )


def render_file(file_path: str | os.PathLike[str]) -> str:
    """Return a file's content wrapped in a fenced Markdown code block."""
    with open(file_path, "rb") as handle:
        content = handle.read().decode("utf-8", errors="surrogateescape")
    return f"```{language_for(file_path)}\n{content}\n```"


def _relative(base_dir: str, path: str) -> str:
    try:
        return os.path.relpath(path, base_dir or os.curdir)
    except ValueError:
        return ""


def render_rules(rules: Iterable[Rule]) -> str:
    """Render the Markdown text for one output document.

    A file picked up by several rules appears only the first time.
    """
    parts: list[str] = []
    seen: set[str] = set()
    for rule in rules:
        files = gather_files(rule.base_dir, rule.include, rule.exclude, rule.exclude_dirs)
        if rule.section_heading:
            parts.append(f"## {rule.section_heading}\n\n")
        if rule.description:
            parts.append(f"> NOTE: {rule.description}\n\n")
        for path in files:
            if path in seen:
                continue
            seen.add(path)
            content = render_file(path)
            parts.append(f"### File: `{_relative(rule.base_dir, path)}`\n")
            parts.append(content + "\n\n")
    return "".join(parts)


def process_rules(rules: Iterable[Rule], output_file: str | os.PathLike[str]) -> None:
    """Render the rules and write the result to output_file."""
    text = render_rules(rules)
    with open(
        output_file, "w", encoding="utf-8", errors="surrogateescape", newline=""
    ) as handle:
        handle.write(text)


def process_outputs(config: Config, output_dir: str | os.PathLike[str]) -> None:
    """Write every output document named in the configuration into output_dir."""
    os.makedirs(output_dir, exist_ok=True)
    for name, rules in config.outputs.items():
        process_rules(rules, os.path.join(output_dir, name))