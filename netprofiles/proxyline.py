"""Normalisation of proxy lines to the ``host:port:username:password`` form."""

from __future__ import annotations

import re

_SCHEME_PREFIX = re.compile(r"^(https?|socks[45])://")
_SCHEMES = ("http://", "https://", "socks4://", "socks5://")
_USER_AT_HOST = re.compile(r"^([^:]+):([^@]+)@([^:]+):(\d+)$")
_INTEGER = re.compile(r"^\s*[+-]?\d+\s*$")
_WHITESPACE = re.compile(r"\s+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _is_int(text: str) -> bool:
    """Return whether the text is a 32-bit signed integer."""
    if not _INTEGER.match(text):
        return False
    return _INT32_MIN <= int(text) <= _INT32_MAX


def _from_delimited(text: str, separator: str) -> str | None:
    parts = [part.strip() for part in text.split(separator)]
    if len(parts) == 4:
        return ":".join(parts)
    if len(parts) == 2:
        return f"{parts[0]}:{parts[1]}::"
    return None


def parse_proxy_line(line: str) -> str:
    """Rewrite one proxy line as ``host:port:username:password``.

    Recognises ``host:port:user:pass``, ``host:port@user:pass``,
    ``user:pass@host:port``, ``host:port``, scheme-prefixed links,
    ``host:port|user:pass`` and whitespace-, comma- or semicolon-separated
    fields. A blank line gives an empty string; an unrecognised line is
    returned stripped.
    """
    trimmed = line.strip()
    if not trimmed:
        return ""

    if trimmed.count(":") == 3:
        return trimmed

    if "@" in trimmed:
        parts = trimmed.split("@")
        if len(parts) == 2:
            return f"{parts[0]}:{parts[1]}"

    match = _USER_AT_HOST.match(trimmed)
    if match:
        username, secret, host, port = match.groups()
        return f"{host}:{port}:{username}:{secret}"

    if trimmed.count(":") == 1:
        host_port = trimmed.split(":")
        if len(host_port) == 2 and _is_int(host_port[1]):
            return f"{trimmed}::"

    if trimmed.startswith(_SCHEMES):
        cleaned = _SCHEME_PREFIX.sub("", trimmed, count=1)
        if "@" in cleaned:
            parts = cleaned.split("@")
            if len(parts) == 2:
                return f"{parts[1]}:{parts[0]}"
        else:
            return f"{cleaned}::"

    if "|" in trimmed:
        parts = trimmed.split("|")
        if len(parts) == 2:
            return f"{parts[0]}:{parts[1]}"

    fields = _WHITESPACE.split(trimmed)
    if len(fields) == 4 and _is_int(fields[1]):
        return ":".join(fields)
    if len(fields) == 2 and _is_int(fields[1]):
        return f"{fields[0]}:{fields[1]}::"

    for separator in (",", ";"):
        if separator in trimmed:
            rewritten = _from_delimited(trimmed, separator)
            if rewritten is not None:
                return rewritten

    return trimmed


def normalize_proxy_text(text: str) -> str:
    """Rewrite every line of a proxy list with :func:`parse_proxy_line`.

    Blank lines are dropped. When no line needed rewriting, the text is
    returned unchanged.
    """
    if not text:
        return text

    rewritten: list[str] = []
    changed = False
    for line in text.split("\n"):
        if not line:
            continue
        parsed = parse_proxy_line(line)
        if parsed:
            rewritten.append(parsed)
            if parsed != line.strip():
                changed = True

    if changed and rewritten:
        return "\n".join(rewritten).strip()
    return text