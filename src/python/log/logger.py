import os
import pathlib
import sys
from datetime import datetime, timezone
from typing import BinaryIO, Optional

import system_info

# Overrides the directory log files are written to.
_LOG_DIRECTORY_ENV = "OMNIDRIVE_LOG_DIR"


class Logger:
    """A simple class for logging. Each running script appends to its own log file,
    which is opened on the first write.
    """

    def __init__(self, log_directory: Optional[pathlib.Path] = None) -> None:
        self._log_directory = log_directory or _default_log_directory()
        self._log_file: Optional[BinaryIO] = None

    @property
    def log_path(self) -> pathlib.Path:
        filepath = pathlib.Path(sys.argv[0])
        # If sys.argv returns an empty string e.g. when in a python3 shell, we assign a
        # generic filename.
        filename = filepath.stem if filepath.stem else "unknown"
        return (self._log_directory / filename).with_suffix(".log")

    def _open_log_file(self) -> BinaryIO:
        self._log_directory.mkdir(parents=True, exist_ok=True)
        return open(self.log_path, "ab", buffering=0)

    def debug(self, msg: str) -> None:
        self._write_to_log("DEBUG", msg)

    def info(self, msg: str) -> None:
        self._write_to_log("INFO", msg)

    def error(self, msg: str) -> None:
        self._write_to_log("ERROR", msg)

    def warning(self, msg: str) -> None:
        self._write_to_log("WARNING", msg)

    def _write_to_log(self, level: str, msg: str) -> None:
        if self._log_file is None:
            self._log_file = self._open_log_file()

        log_str = f"{_iso_time()} {level.upper()}: {msg}\n"
        self._log_file.write(log_str.encode("utf-8"))


def _default_log_directory() -> pathlib.Path:
    if log_dir := os.environ.get(_LOG_DIRECTORY_ENV):
        return pathlib.Path(log_dir)
    return system_info.get_root_project_directory() / "logs"


def _iso_time() -> str:
    """Current timestamp as a string."""
    return datetime.now(tz=timezone.utc).isoformat()
