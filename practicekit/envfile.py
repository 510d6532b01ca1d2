"""Reading KEY=VALUE settings from a dotenv-style file."""

from __future__ import annotations

from pathlib import Path

DEFAULT_ENV_PATH = Path(".env")


def parse_env(text: str) -> dict[str, str]:
    """Parse ``KEY=VALUE`` lines into a mapping.

    Everything from a ``#`` to the end of its line is a comment, and blank
    lines are ignored. The key ends at the first ``=``; the value is the
    rest of the line, kept as written. A line with no ``=`` is an error.
    """
    env: dict[str, str] = {}
    for number, line in enumerate(text.split("\n"), start=1):
        content = line.split("#", 1)[0]
        if not content.strip():
            continue
        key, separator, value = content.partition("=")
        if not separator:
            raise ValueError(f"line {number}: expected KEY=VALUE, got {content!r}")
        env[key] = value
    return env


def source_env(path: str | Path = DEFAULT_ENV_PATH) -> dict[str, str]:
    """Read and parse the settings file at ``path``."""
    return parse_env(Path(path).read_text(encoding="utf-8"))