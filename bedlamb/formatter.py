from __future__ import annotations

import json
import sys
from typing import Optional, TextIO, Union

INDENT = "  "
WHITESPACE = " \t\r\n"


def _reject_constant(name: str):
    raise ValueError(f"not a JSON value: {name}")


def _decode(data: Union[bytes, bytearray, str]) -> str:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", errors="replace")
    return data


def _is_json(text: str) -> bool:
    try:
        json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return False
    return True


def indent_json(data: Union[bytes, bytearray, str]) -> Optional[str]:
    """Re-indent a JSON document, touching only the whitespace between tokens.

    Returns None when ``data`` is not valid UTF-8 JSON. Strings, numbers and
    duplicate keys come through exactly as received.
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            text = bytes(data).decode("utf-8")
        except UnicodeDecodeError:
            return None
    else:
        text = data
    if not _is_json(text):
        return None

    out = []
    depth = 0
    pending = False  # an opened container has not emitted its first newline yet
    i, n = 0, len(text)
    while i < n:
        c = text[i]
        if c in WHITESPACE:
            i += 1
            continue
        if pending and c not in "]}":
            pending = False
            out.append("\n" + INDENT * depth)
        if c == '"':
            j = i + 1
            while text[j] != '"':
                j += 2 if text[j] == "\\" else 1
            out.append(text[i : j + 1])
            i = j + 1
            continue
        if c in "{[":
            out.append(c)
            pending = True
            depth += 1
        elif c in "}]":
            depth -= 1
            if pending:
                pending = False
            else:
                out.append("\n" + INDENT * depth)
            out.append(c)
        elif c == ",":
            out.append(",\n" + INDENT * depth)
        elif c == ":":
            out.append(": ")
        else:
            out.append(c)
        i += 1
    return "".join(out)


def format_payload(data: Union[bytes, bytearray, str]) -> str:
    """Pretty-print JSON with two-space indentation; anything else comes back verbatim."""
    pretty = indent_json(data)
    return _decode(data) if pretty is None else pretty


def format_request(payload: bytes) -> str:
    return format_payload(payload)


def write_response(data: Union[bytes, bytearray, str], stream: Optional[TextIO] = None) -> None:
    out = stream or sys.stdout
    pretty = indent_json(data)
    buffer = getattr(out, "buffer", None)
    if pretty is None and isinstance(data, (bytes, bytearray)) and buffer is not None:
        # raw bytes straight through, undecodable sequences included
        out.flush()
        buffer.write(bytes(data) + b"\n")
        buffer.flush()
        return
    out.write((_decode(data) if pretty is None else pretty) + "\n")
    out.flush()
