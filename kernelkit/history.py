"""Storage and lookup of the inputs executed by a kernel."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from itertools import groupby
from typing import Any

_SPECIAL_CHARS = re.compile(r"[-\[\]{}()+.,\^$|#\s]")
_RANGE_ERROR = "get_range: start is too high given stop or current history"

Entry = tuple[str, str, str, str]


class HistoryManager(ABC):
    """Answers history requests from the stored inputs of a kernel."""

    configured: bool = False

    def configure(self) -> None:
        """Prepare the manager before the kernel starts."""
        self.configured = True

    def store_inputs(self, session: int, line_num: int, input: str, output: str = "") -> None:
        """Record one executed input and its output."""
        self._store_inputs(session, line_num, input, output)

    def process_request(self, content: dict[str, Any]) -> dict[str, Any] | None:
        """Answer a history request; ``None`` when the access type is unknown."""
        access_type = content.get("hist_access_type", "tail")
        raw = content.get("raw", True)
        output = content.get("output", False)

        if access_type == "tail":
            return self.get_tail(content.get("n", 10), raw, output)
        if access_type == "search":
            return self.search(
                content.get("pattern", "*"),
                raw,
                output,
                content.get("n", 10),
                content.get("unique", False),
            )
        if access_type == "range":
            return self.get_range(
                content.get("session", 0),
                content.get("start", 1),
                content.get("stop", 10),
                raw,
                output,
            )
        return None

    def get_tail(self, n: int, raw: bool, output: bool) -> dict[str, Any]:
        """Return the last ``n`` entries, oldest first."""
        return self._get_tail(n, raw, output)

    def get_range(
        self, session: int, start: int, stop: int, raw: bool, output: bool
    ) -> dict[str, Any]:
        """Return the entries from position ``start`` up to ``stop``, excluded."""
        return self._get_range(session, start, stop, raw, output)

    def search(
        self, pattern: str, raw: bool, output: bool, n: int, unique: bool
    ) -> dict[str, Any]:
        """Return the last ``n`` entries whose input matches a glob ``pattern``."""
        return self._search(pattern, raw, output, n, unique)

    @abstractmethod
    def _store_inputs(self, session: int, line_num: int, input: str, output: str) -> None: ...

    @abstractmethod
    def _get_tail(self, n: int, raw: bool, output: bool) -> dict[str, Any]: ...

    @abstractmethod
    def _get_range(
        self, session: int, start: int, stop: int, raw: bool, output: bool
    ) -> dict[str, Any]: ...

    @abstractmethod
    def _search(
        self, pattern: str, raw: bool, output: bool, n: int, unique: bool
    ) -> dict[str, Any]: ...


def _glob_to_regex(pattern: str) -> re.Pattern[str]:
    sanitized = _SPECIAL_CHARS.sub(lambda match: "\\" + match.group(), pattern)
    return re.compile(sanitized.replace("?", ".").replace("*", ".*"))


def _shape(entries: list[Entry], output: bool) -> list[list[str]]:
    if output:
        return [list(entry) for entry in entries]
    return [list(entry[:3]) for entry in entries]


class InMemoryHistoryManager(HistoryManager):
    """History kept in memory for the lifetime of the kernel."""

    def __init__(self) -> None:
        self._history: list[Entry] = []

    def _store_inputs(self, session, line_num, input, output):
        self._history.append((str(session), str(line_num), input, output))

    def _get_tail(self, n, raw, output):
        count = min(n, len(self._history))
        entries = self._history[len(self._history) - count:] if count > 0 else []
        return {"history": _shape(entries, output), "status": "ok"}

    def _get_range(self, session, start, stop, raw, output):
        size = len(self._history)
        if start > stop or start > size:
            return {"status": "error", "ename": _RANGE_ERROR}
        entries = self._history[start:min(stop, size)]
        return {"history": _shape(entries, output), "status": "ok"}

    def _search(self, pattern, raw, output, n, unique):
        regex = _glob_to_regex(pattern)
        shaped = _shape([e for e in self._history if regex.search(e[2])], output)
        if unique:
            shaped = [key for key, _ in groupby(shaped)]
        excess = len(shaped) - n
        if excess > 0:
            shaped = shaped[excess:]
        return {"history": shaped, "status": "ok"}


def make_in_memory_history_manager() -> HistoryManager:
    """Return a new, empty in-memory history manager."""
    return InMemoryHistoryManager()