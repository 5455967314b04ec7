"""Parsers for Shadowsocks JSON configurations and ``ss://`` links."""

from __future__ import annotations

import base64
import json
import os
import string
from pathlib import Path
from typing import Any
from urllib.parse import unquote

from netprofiles.vpnconfig import VPNConfig

_BASE64_ALPHABET = frozenset(string.ascii_letters + string.digits + "+/")


def parse_shadowsocks(file_path: str | os.PathLike[str]) -> VPNConfig:
    """Parse a Shadowsocks JSON file.

    The name comes from ``remarks`` or, failing that, the file name up to
    its first dot. Raises ``OSError`` if the file cannot be read and
    ``ValueError`` if it is not a JSON object.
    """
    path = Path(file_path)
    config = parse_shadowsocks_json(path.read_text(encoding="utf-8"))
    if not config.name:
        config.name = path.name.split(".", 1)[0]
    config.config_path = str(file_path)
    return config


def parse_shadowsocks_json(json_string: str) -> VPNConfig:
    """Parse a Shadowsocks configuration held in a JSON object.

    Raises ``ValueError`` if the text is not a JSON object.
    """
    obj = _load_object(json_string, "Shadowsocks")
    config = VPNConfig(type="shadowsocks")
    params = config.parameters

    for key in ("server", "password", "method", "plugin", "plugin_opts"):
        if key in obj:
            params[key] = _json_str(obj[key])
    if "server_port" in obj:
        params["port"] = str(_json_int(obj["server_port"]))
    if "remarks" in obj:
        config.name = _json_str(obj["remarks"])
    if "timeout" in obj:
        params["timeout"] = str(_json_int(obj["timeout"]))
    return config


def parse_shadowsocks_url(url: str) -> VPNConfig:
    """Parse a ``ss://base64(method:password)@server:port#tag`` link.

    Raises ``ValueError`` if the scheme is wrong or the ``@`` is missing.
    """
    if not url.startswith("ss://"):
        raise ValueError("Invalid Shadowsocks URL format")

    config = VPNConfig(type="shadowsocks")
    data = url[len("ss://"):]

    hash_pos = data.find("#")
    if hash_pos > 0:
        config.name = unquote(data[hash_pos + 1:])
        data = data[:hash_pos]

    encoded_auth, at, server_part = data.partition("@")
    if not at:
        raise ValueError("Invalid Shadowsocks URL: missing @")

    auth = _decode_base64(encoded_auth)
    colon = auth.find(":")
    if colon > 0:
        config.parameters["method"] = auth[:colon]
        config.parameters["password"] = auth[colon + 1:]

    colon = server_part.rfind(":")
    if colon > 0:
        config.parameters["server"] = server_part[:colon]
        config.parameters["port"] = server_part[colon + 1:]
    return config


def _load_object(json_string: str, kind: str) -> dict[str, Any]:
    try:
        document = json.loads(json_string)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid {kind} JSON config") from exc
    if not isinstance(document, dict):
        raise ValueError(f"Invalid {kind} JSON config")
    return document


def _json_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _json_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return 0


def _json_obj(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _json_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _decode_base64(data: str) -> str:
    """Decode base64 leniently: stray characters are skipped, padding optional."""
    chars = "".join(c for c in data if c in _BASE64_ALPHABET)
    if len(chars) % 4 == 1:
        chars = chars[:-1]
    chars += "=" * (-len(chars) % 4)
    return base64.b64decode(chars).decode("utf-8", errors="replace")