"""Shader source definitions and lookup of shader files."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable


class ShaderSourceError(OSError):
    """Raised when a shader's source cannot be loaded."""


class ShaderStage(Enum):
    VERTEX = "vertex"
    PIXEL = "pixel"
    COMPUTE = "compute"


def _read(path: Path) -> str | None:
    if not path.exists():
        return None
    try:
        return path.read_text()
    except (OSError, UnicodeDecodeError):
        return None


class IncludeHandler:
    """Resolves shader sources: absolute paths directly, relative ones via search paths."""

    def __init__(self, search_paths: Iterable[str | Path] = ("./shaders/", "./")) -> None:
        self._search_paths = [Path(p) for p in search_paths]

    def load_source(self, path: str | Path) -> str | None:
        """Return the text of ``path``, or None if it cannot be found or read."""
        path = Path(path)
        if path.is_absolute():
            return _read(path)
        for base in self._search_paths:
            candidate = base / path
            if candidate.exists():
                return _read(candidate)
        return None


class ShaderFileDefinition:
    """A shader whose source lives in a file."""

    def __init__(self, path: str | Path, target_profile: str) -> None:
        self.path = Path(path)
        self.entry_point = "main"
        self.target_profile = target_profile

    def set_entry_point(self, entry_point: str) -> ShaderFileDefinition:
        """Change the entry point; returns the definition."""
        self.entry_point = entry_point
        return self

    def file_name(self) -> str:
        return self.path.name

    def code(self, include_handler: IncludeHandler) -> str:
        """Load the source through ``include_handler``."""
        data = include_handler.load_source(self.path)
        if data is None:
            raise ShaderSourceError(f"Failed to load source {self.path}")
        return data


class RawShaderDefinition:
    """A shader whose source is given as text."""

    def __init__(self, filename: str, target_profile: str, data: str) -> None:
        self.filename = filename
        self.data = data
        self.entry_point = "main"
        self.target_profile = target_profile

    def set_entry_point(self, entry_point: str) -> RawShaderDefinition:
        """Change the entry point; returns the definition."""
        self.entry_point = entry_point
        return self

    def file_name(self) -> str:
        return self.filename

    def code(self, include_handler: IncludeHandler) -> str:
        """Return the source text; the handler is not used."""
        return self.data