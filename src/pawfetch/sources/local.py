"""Local file request source."""

from __future__ import annotations

from pathlib import Path

from pawfetch.common import resolve_working_directory

from .models import LocalFileRequest


class LocalFileRequestSource:
    """Points at ``{base_dir}/{file_name}.{extension}``.

    Pass ``extension=None`` when ``file_name`` already carries its suffix.
    """

    def __init__(self, file_name: str, extension: str | None = "json", base_dir: Path | None = None) -> None:
        if not file_name:
            raise ValueError("file_name cannot be empty")
        self._file_name = file_name
        self._extension = extension.lstrip(".") if extension else None
        self._base_dir = resolve_working_directory(base_dir)

    @property
    def path(self) -> Path:
        name = f"{self._file_name}.{self._extension}" if self._extension else self._file_name
        return self._base_dir / name

    def make_request(self) -> LocalFileRequest:
        return LocalFileRequest(path=self.path)

    def __repr__(self) -> str:
        return f"LocalFileRequestSource(path={str(self.path)!r})"
