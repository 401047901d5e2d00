"""Kernel connection configuration and its loading from a connection file."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass
class Configuration:
    """Transport, addresses and signing settings of a kernel."""

    transport: str = ""
    ip: str = ""
    control_port: str = ""
    shell_port: str = ""
    stdin_port: str = ""
    iopub_port: str = ""
    hb_port: str = ""
    signature_scheme: str = ""
    key: str = ""


def _string(doc: dict[str, Any], name: str) -> str:
    value = doc.get(name)
    if not isinstance(value, str):
        raise ValueError(f"connection file: {name!r} must be a string")
    return value


def _port(doc: dict[str, Any], name: str) -> str:
    value = doc.get(name)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"connection file: {name!r} must be a number")
    return str(int(value))


def load_configuration(file_name: str) -> Configuration:
    """Read a JSON connection file into a :class:`Configuration`."""
    with open(file_name, encoding="utf-8") as stream:
        doc = json.load(stream)
    if not isinstance(doc, dict):
        raise ValueError("connection file must hold a JSON object")

    scheme = doc.get("signature_scheme", "")
    if not isinstance(scheme, str):
        raise ValueError("connection file: 'signature_scheme' must be a string")

    return Configuration(
        transport=_string(doc, "transport"),
        ip=_string(doc, "ip"),
        control_port=_port(doc, "control_port"),
        shell_port=_port(doc, "shell_port"),
        stdin_port=_port(doc, "stdin_port"),
        iopub_port=_port(doc, "iopub_port"),
        hb_port=_port(doc, "hb_port"),
        signature_scheme=scheme,
        key=_string(doc, "key") if scheme else "",
    )