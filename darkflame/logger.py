"""A simple append-only log file with numbered entries."""

from __future__ import annotations

import os
from typing import BinaryIO, Optional


class LogFile:
    """A log written to ``path``; each entry is prefixed with `` <n> ``.

    The entry number is shared by every log in the process. A log with an
    empty path ignores everything written to it, and I/O failures are
    swallowed so that logging never disturbs the caller.
    """

    _note = 0

    def __init__(self, path: "str | os.PathLike[str]" = "") -> None:
        self._path = os.fspath(path) if path else ""
        self._handle: Optional[BinaryIO] = None

    @property
    def path(self) -> str:
        """The target file, or an empty string when the log is disabled."""
        return self._path

    @classmethod
    def create(cls, path: "str | os.PathLike[str]", text: Optional[str] = None) -> LogFile:
        """Truncate ``path`` and write ``text`` to it; disabled if it cannot be opened."""
        log = cls()
        try:
            handle = open(path, "wb")
        except OSError:
            return log
        log._path = os.fspath(path)
        log._handle = handle
        if text:
            try:
                handle.write(text.encode("utf-8"))
                handle.flush()
            except OSError:
                log._drop_handle()
        return log

    def add(self, text: str) -> None:
        """Append one numbered entry."""
        if not self._path:
            return
        if self._handle is None:
            try:
                self._handle = open(self._path, "ab")
            except OSError:
                return
        note = LogFile._note
        LogFile._note += 1
        try:
            self._handle.write(f" <{note}> ".encode("utf-8"))
            self._handle.write(text.encode("utf-8"))
            self._handle.flush()
        except OSError:
            self._drop_handle()

    def addf(self, template: str, *args) -> None:
        """Append an entry built with printf-style ``template % args``."""
        self.add(template % args)

    def deny(self) -> None:
        """Close the file and disable the log."""
        self._drop_handle()
        self._path = ""

    def close(self) -> None:
        """Close the file; a later entry reopens it for appending."""
        self._drop_handle()

    def _drop_handle(self) -> None:
        if self._handle is not None:
            try:
                self._handle.close()
            except OSError:
                pass
            self._handle = None

    def __enter__(self) -> LogFile:
        return self

    def __exit__(self, *args) -> None:
        self.close()


default_log = LogFile("log.txt")