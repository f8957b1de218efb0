"""Application directory structure settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppDirectories:
    """Application directory structure settings.

    Defines where pawfetch keeps its files relative to standard locations:
    - ~/.config/{app_name}/ for the global config
    - ~/.local/share/{app_name}/ for logs and saved preferences
    - ./{project_marker}/ for the project config

    Attributes:
        app_name: Name used in XDG directories (config and data)
        project_marker: Directory name that marks a pawfetch project root
    """

    app_name: str = "pawfetch"
    project_marker: str = ".pawfetch"
