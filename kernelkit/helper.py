"""Command-line helpers and builders for the replies sent to clients."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from kernelkit.configuration import Configuration


def print_starting_message(config: Configuration) -> str:
    """Return the banner describing how to connect to a starting kernel."""
    return (
        "Starting kernel...\n\n"
        "If you want to connect to this kernel from an other client, just copy"
        " and paste the following content inside of a `kernel.json` file."
        " And then run for example:\n\n"
        "# jupyter console --existing kernel.json\n\n"
        "kernel.json\n```\n{\n"
        f'    "transport": "{config.transport}",\n'
        f'    "ip": "{config.ip}",\n'
        f'    "control_port": {config.control_port},\n'
        f'    "shell_port": {config.shell_port},\n'
        f'    "stdin_port": {config.stdin_port},\n'
        f'    "iopub_port": {config.iopub_port},\n'
        f'    "hb_port": {config.hb_port},\n'
        f'    "signature_scheme": "{config.signature_scheme}",\n'
        f'    "key": "{config.key}"\n'
        "}\n```"
    )


def extract_filename(argv: Sequence[str]) -> str:
    """Return the argument following the first ``-f``, or an empty string."""
    for flag, value in zip(argv, argv[1:]):
        if flag == "-f":
            return value
    return ""


def should_print_version(argv: Sequence[str]) -> bool:
    """Return whether ``--version`` is among the arguments."""
    return "--version" in argv


def create_error_reply(
    evalue: str = "", ename: str = "", trace_back: Any = None
) -> dict[str, Any]:
    """Build an error reply."""
    return {
        "status": "error",
        "ename": ename,
        "evalue": evalue,
        "traceback": [] if trace_back is None else trace_back,
    }


def create_successful_reply(payload: Any = None, user_expressions: Any = None) -> dict[str, Any]:
    """Build a successful execution reply."""
    return {
        "status": "ok",
        "payload": [] if payload is None else payload,
        "user_expressions": {} if user_expressions is None else user_expressions,
    }


def create_complete_reply(
    matches: Any, cursor_start: int, cursor_end: int, metadata: Any = None
) -> dict[str, Any]:
    """Build a completion reply."""
    return {
        "status": "ok",
        "matches": matches,
        "cursor_start": cursor_start,
        "cursor_end": cursor_end,
        "metadata": {} if metadata is None else metadata,
    }


def create_inspect_reply(
    found: bool = False, data: Any = None, metadata: Any = None
) -> dict[str, Any]:
    """Build an inspection reply."""
    return {
        "status": "ok",
        "found": found,
        "data": {} if data is None else data,
        "metadata": {} if metadata is None else metadata,
    }


def create_is_complete_reply(status: str, indent: str = "") -> dict[str, Any]:
    """Build a reply telling whether code is complete."""
    return {"status": status, "indent": indent}


def create_info_reply(
    protocol_version: str = "",
    implementation: str = "",
    implementation_version: str = "",
    language_name: str = "",
    language_version: str = "",
    language_mimetype: str = "",
    language_file_extension: str = "",
    language_pygments_lexer: str = "",
    language_codemirror_mode: str = "",
    language_nbconvert_exporter: str = "",
    banner: str = "",
    debugger: bool = False,
    help_links: Any = None,
) -> dict[str, Any]:
    """Build a kernel information reply."""
    return {
        "status": "ok",
        "protocol_version": protocol_version,
        "implementation": implementation,
        "implementation_version": implementation_version,
        "language_info": {
            "name": language_name,
            "version": language_version,
            "mimetype": language_mimetype,
            "file_extension": language_file_extension,
            "pygments_lexer": language_pygments_lexer,
            "codemirror_mode": language_codemirror_mode,
            "nbconvert_exporter": language_nbconvert_exporter,
        },
        "banner": banner,
        "debugger": debugger,
        "help_links": [] if help_links is None else help_links,
    }