"""Numeric file utilities for numsort.

This module exposes `FileProcessor`, which ensures an output directory exists,
fills a text file with random integers (one per line) and sorts such a file
in place.

I/O failures are logged and re-raised as `OSError` (`IOError`); nothing here
retries or swallows them.
"""
from __future__ import annotations

import logging
import os
import random
import re
import shutil
import tempfile
from typing import Iterator, List, Optional, TextIO

LOGGER_NAME = "file_processor"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

# Optional sign, ASCII digits only
_DECIMAL_INT = re.compile(r"[+-]?[0-9]+")


def get_logger() -> logging.Logger:
    """Return the process-wide processor logger, creating its console handler on first use."""
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console)
        logger.setLevel(logging.INFO)
    return logger


def parse_numbers(stream: TextIO) -> Iterator[int]:
    """Yield whitespace-delimited decimal integers from `stream`.

    A token only partly made of an integer (`12abc`, `2.5`) yields its leading
    integer and ends the parse. A token with no leading integer ends it
    without yielding. Whatever follows is left unread.
    """
    for line in stream:
        for token in line.split():
            match = _DECIMAL_INT.match(token)
            if match is None:
                return
            yield int(match.group())
            if match.end() < len(token):
                return


def read_numbers(path: str) -> List[int]:
    with open(path, "r", encoding="utf-8") as f:
        return list(parse_numbers(f))


class FileProcessor:
    def __init__(self, logger: Optional[object] = None, rng: Optional[object] = None) -> None:
        self.logger = logger if logger is not None else get_logger()
        self.rng = rng if rng is not None else random

    def _log(self, level: str, msg: str, *args) -> None:
        try:
            getattr(self.logger, level)(msg, *args)
        except Exception:
            # Keep file work tolerant to logger failures
            pass

    def ensure_directory(self, path: str) -> str:
        """Create `path` (one level) unless something already exists there."""
        if os.path.exists(path):
            self._log("info", "Directory already exists: %s", path)
            return path

        try:
            os.mkdir(path)
        except OSError:
            self._log("error", "Failed to create directory: %s", path)
            raise
        self._log("info", "Directory created: %s", path)
        return path

    def create_and_fill(
        self,
        file_path: str,
        count: int = 100,
        lower_bound: int = 1,
        upper_bound: int = 1000,
    ) -> List[int]:
        """Write `count` random integers in [lower_bound, upper_bound] to `file_path`.

        - Truncates any existing content.
        - Writes one value per line in generation order.
        - Returns the values written.
        """
        try:
            f = open(file_path, "w", encoding="utf-8")
        except OSError:
            self._log("error", "Failed to create file: %s", file_path)
            raise

        numbers = []
        with f:
            for _ in range(count):
                number = self.rng.randint(lower_bound, upper_bound)
                f.write(f"{number}\n")
                numbers.append(number)
                self._log("info", "Written number: %d", number)

        self._log("info", "File created and filled with random numbers: %s", file_path)
        return numbers

    def sort_in_place(self, file_path: str, atomic: bool = False) -> List[int]:
        """Sort the integers in `file_path` ascending and rewrite the file.

        The read handle is closed before the file is reopened for writing. With
        `atomic=False` the rewrite truncates the original, so a crash between
        the two phases loses its contents. `atomic=True` writes to a temporary
        file in the same directory and renames it over the original instead.
        """
        try:
            f = open(file_path, "r", encoding="utf-8")
        except OSError:
            self._log("error", "Failed to open file: %s", file_path)
            raise

        with f:
            numbers = list(parse_numbers(f))
        self._log("info", "Read %d numbers from file: %s", len(numbers), file_path)

        numbers.sort()
        self._log("info", "Sorted the numbers.")

        if atomic:
            self._write_atomic(file_path, numbers)
        else:
            try:
                out = open(file_path, "w", encoding="utf-8")
            except OSError:
                self._log("error", "Failed to open file for writing: %s", file_path)
                raise
            with out:
                self._write_numbers(out, numbers)

        self._log("info", "Sorted numbers written back to file: %s", file_path)
        return numbers

    def _write_numbers(self, out: TextIO, numbers: List[int]) -> None:
        for number in numbers:
            out.write(f"{number}\n")
            self._log("info", "Written sorted number: %d", number)

    def _write_atomic(self, file_path: str, numbers: List[int]) -> None:
        directory = os.path.dirname(os.path.abspath(file_path))
        try:
            tmp = tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=directory, prefix=".numsort-", suffix=".tmp", delete=False
            )
        except OSError:
            self._log("error", "Failed to open file for writing: %s", file_path)
            raise

        try:
            with tmp:
                self._write_numbers(tmp, numbers)
                tmp.flush()
                os.fsync(tmp.fileno())
            # Temp files are created 0600; keep the original's permissions
            shutil.copymode(file_path, tmp.name)
            os.replace(tmp.name, file_path)
        except OSError:
            self._log("error", "Failed to replace file: %s", file_path)
            if os.path.exists(tmp.name):
                os.remove(tmp.name)
            raise
