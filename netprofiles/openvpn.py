"""Parser for OpenVPN ``.ovpn`` configuration files."""

from __future__ import annotations

import os
from pathlib import Path

from netprofiles.vpnconfig import VPNConfig


def parse_openvpn(file_path: str | os.PathLike[str]) -> VPNConfig:
    """Parse an OpenVPN file; the name is the file name up to its first dot.

    Raises ``OSError`` if the file cannot be read.
    """
    path = Path(file_path)
    text = path.read_text(encoding="utf-8")
    config = parse_openvpn_text(text, path.name.split(".", 1)[0])
    config.config_path = str(file_path)
    return config


def parse_openvpn_text(text: str, name: str) -> VPNConfig:
    """Parse OpenVPN directives from text.

    Each directive is stored under its keyword with its arguments joined by
    single spaces; a ``remote`` directive also sets ``server`` and ``port``.
    """
    config = VPNConfig(name=name, type="openvpn")
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        key, *args = line.split()
        config.parameters[key] = " ".join(args)
        if key == "remote" and args:
            config.parameters["server"] = args[0]
            if len(args) >= 2:
                config.parameters["port"] = args[1]
    return config