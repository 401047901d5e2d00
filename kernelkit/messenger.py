"""Channel that lets kernel components send requests to the shell."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ControlMessenger(ABC):
    """Sends internal requests to the shell and returns its reply."""

    def send_to_shell(self, message: dict[str, Any]) -> dict[str, Any]:
        """Send ``message`` to the shell and return the reply."""
        return self._send_to_shell(message)

    @abstractmethod
    def _send_to_shell(self, message: dict[str, Any]) -> dict[str, Any]: ...