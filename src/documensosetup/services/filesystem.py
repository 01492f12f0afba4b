"""Filesystem helpers for documenso-setup."""

import logging
import os
import sys
from pathlib import Path
from typing import Iterable, List

from rich.console import Console


class FileSystemService:
    """Encapsulates file and directory side effects."""

    def __init__(self, logger: logging.Logger, console: Console):
        self.logger = logger
        self.console = console

    def set_permissions(self, path, mode: int):
        if sys.platform == "win32":
            return

        try:
            os.chmod(path, mode)
        except Exception as exc:
            self.logger.warning("Could not set permissions on %s: %s", path, exc)

    def ensure_dir(self, path: Path, mode: int):
        os.makedirs(path, exist_ok=True)
        self.set_permissions(path, mode)

    def set_matching_permissions(self, root: Path, patterns: Iterable[str], mode: int) -> List[Path]:
        changed = []
        for pattern in patterns:
            for path in sorted(root.glob(pattern)):
                if path.is_file():
                    self.set_permissions(path, mode)
                    changed.append(path)
        return changed

    def remove_files(self, paths: Iterable[Path]):
        for path in paths:
            try:
                os.remove(path)
                self.logger.debug("Removed file: %s", path)
            except FileNotFoundError:
                continue
            except OSError as exc:
                message = f"Warning: Could not remove {path}: {exc}"
                self.console.print(f"[yellow]{message}[/yellow]")
                self.logger.warning(message)
