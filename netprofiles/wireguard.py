"""Parser for WireGuard ``.conf`` configuration files."""

from __future__ import annotations

import os
from pathlib import Path

from netprofiles.vpnconfig import VPNConfig

_INTERFACE_KEYS = {
    short.lower(): short for short in ("privateKey", "address", "dns")
}

_PEER_KEYS = {
    short.lower(): short for short in ("publicKey", "endpoint", "allowedIPs")
}
_PEER_KEYS["persistentkeepalive"] = "keepalive"


def parse_wireguard(file_path: str | os.PathLike[str]) -> VPNConfig:
    """Parse a WireGuard file; the name is the file name up to its first dot.

    Raises ``OSError`` if the file cannot be read.
    """
    path = Path(file_path)
    text = path.read_text(encoding="utf-8")
    config = parse_wireguard_text(text)
    config.name = path.name.split(".", 1)[0]
    config.config_path = str(file_path)
    return config


def parse_wireguard_text(config_string: str) -> VPNConfig:
    """Parse WireGuard configuration text.

    Every entry is stored as ``section.Key``; well-known interface and peer
    keys are also stored under short names, and the peer endpoint is split
    into ``server`` and ``port``.
    """
    config = VPNConfig(type="wireguard")
    section = ""
    pending: list[str] = []

    for raw in config_string.split("\n"):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("[") and line.endswith("]"):
            if section:
                _apply_section(config, section, pending)
                pending = []
            section = line[1:-1].lower()
        else:
            pending.append(line)

    if section:
        _apply_section(config, section, pending)
    return config


def _apply_section(config: VPNConfig, section: str, lines: list[str]) -> None:
    params = config.parameters
    for line in lines:
        if "=" not in line:
            continue
        raw_key, _, raw_value = line.partition("=")
        key = raw_key.strip()
        value = raw_value.strip()
        params[f"{section}.{key}"] = value

        lowered = key.lower()
        if section == "interface" and lowered in _INTERFACE_KEYS:
            params[_INTERFACE_KEYS[lowered]] = value
        elif section == "peer" and lowered in _PEER_KEYS:
            params[_PEER_KEYS[lowered]] = value
            if lowered == "endpoint":
                colon = value.rfind(":")
                if colon > 0:
                    params["server"] = value[:colon]
                    params["port"] = value[colon + 1:]