"""Parsers for V2Ray JSON configurations and ``vmess://`` / ``vless://`` links."""

from __future__ import annotations

import os
from pathlib import Path
from urllib.parse import unquote, urlsplit

from netprofiles.shadowsocks import (
    _decode_base64,
    _json_int,
    _json_list,
    _json_obj,
    _json_str,
    _load_object,
)
from netprofiles.vpnconfig import VPNConfig

_VLESS_QUERY_KEYS = {
    "type": "network",
    "security": "tls",
    "host": "host",
    "sni": "sni",
    "encryption": "encryption",
    "flow": "flow",
}


def parse_v2ray(file_path: str | os.PathLike[str]) -> VPNConfig:
    """Parse a V2Ray JSON file; the name is the file name up to its first dot.

    Raises ``OSError`` if the file cannot be read and ``ValueError`` if it
    is not a JSON object.
    """
    path = Path(file_path)
    config = parse_v2ray_json(path.read_text(encoding="utf-8"))
    config.name = path.name.split(".", 1)[0]
    config.config_path = str(file_path)
    return config


def parse_v2ray_json(json_string: str) -> VPNConfig:
    """Parse the first outbound of a V2Ray JSON configuration.

    Raises ``ValueError`` if the text is not a JSON object.
    """
    obj = _load_object(json_string, "V2Ray")
    config = VPNConfig(type="v2ray")
    params = config.parameters

    outbounds = _json_list(obj.get("outbounds"))
    if not outbounds:
        return config
    outbound = _json_obj(outbounds[0])

    if "protocol" in outbound:
        params["protocol"] = _json_str(outbound["protocol"])

    if "settings" in outbound:
        settings = _json_obj(outbound["settings"])
        if "vnext" in settings:
            vnext = _json_list(settings["vnext"])
            if vnext:
                server = _json_obj(vnext[0])
                params["server"] = _json_str(server.get("address"))
                params["port"] = str(_json_int(server.get("port")))
                if "users" in server:
                    users = _json_list(server["users"])
                    if users:
                        user = _json_obj(users[0])
                        params["id"] = _json_str(user.get("id"))
                        params["alterId"] = str(_json_int(user.get("alterId")))
                        params["security"] = _json_str(user.get("security"))

    if "streamSettings" in outbound:
        stream = _json_obj(outbound["streamSettings"])
        params["network"] = _json_str(stream.get("network"))
        if "security" in stream:
            params["tls"] = _json_str(stream["security"])
        if "wsSettings" in stream:
            ws = _json_obj(stream["wsSettings"])
            params["path"] = _json_str(ws.get("path"))
            if "headers" in ws:
                params["host"] = _json_str(_json_obj(ws["headers"]).get("Host"))

    return config


def parse_vmess_url(url: str) -> VPNConfig:
    """Parse a ``vmess://base64(json)`` link.

    Raises ``ValueError`` if the scheme is wrong or the payload is not a
    JSON object.
    """
    if not url.startswith("vmess://"):
        raise ValueError("Invalid VMess URL format")

    try:
        obj = _load_object(_decode_base64(url[len("vmess://"):]), "VMess")
    except ValueError as exc:
        raise ValueError("Invalid VMess JSON") from exc

    config = VPNConfig(type="v2ray", name=_json_str(obj.get("ps")))
    config.parameters["protocol"] = "vmess"
    fields = {
        "server": "add",
        "port": "port",
        "id": "id",
        "alterId": "aid",
        "network": "net",
        "type": "type",
        "host": "host",
        "path": "path",
        "tls": "tls",
        "sni": "sni",
    }
    for target, source in fields.items():
        config.parameters[target] = _json_str(obj.get(source))
    return config


def parse_vless_url(url: str) -> VPNConfig:
    """Parse a ``vless://uuid@server:port?params#name`` link.

    A missing port is reported as ``-1``. Raises ``ValueError`` if the
    scheme is wrong.
    """
    if not url.startswith("vless://"):
        raise ValueError("Invalid VLESS URL format")

    parts = urlsplit(url)
    config = VPNConfig(type="v2ray", name=unquote(parts.fragment))
    params = config.parameters
    params["protocol"] = "vless"
    params["id"] = unquote(parts.username or "")
    params["server"] = parts.hostname or ""
    try:
        port = parts.port
    except ValueError:
        port = None
    params["port"] = str(port if port is not None else -1)

    query = _query_items(parts.query)
    for key, target in _VLESS_QUERY_KEYS.items():
        if key in query:
            params[target] = query[key]
    if "path" in query:
        params["path"] = unquote(query["path"])
    return config


def _query_items(query: str) -> dict[str, str]:
    """Map each query key to the value of its first occurrence."""
    items: dict[str, str] = {}
    for item in query.split("&"):
        if not item:
            continue
        key, _, value = item.partition("=")
        items.setdefault(unquote(key), unquote(value))
    return items