"""Parser for AmneziaWG configurations, falling back to plain WireGuard."""

from __future__ import annotations

import os
from pathlib import Path

from netprofiles.vpnconfig import VPNConfig

DEFAULT_WIREGUARD_PORT = "51820"

_AMNEZIA_ALIASES = {
    "jc": "amnezia.junkpacketcount",
    "jmin": "amnezia.junkpacketminsize",
    "jmax": "amnezia.junkpacketmaxsize",
    "s1": "amnezia.initpacketjunksize",
    "s2": "amnezia.responsepacketjunksize",
    "h1": "amnezia.initpacketmagicheader",
    "h2": "amnezia.responsepacketmagicheader",
    "h3": "amnezia.underloadpacketmagicheader",
    "h4": "amnezia.transportpacketmagicheader",
}

_AMNEZIA_MARKERS = ("jc", "jmin", "jmax", "s1", "s2", "h1")


def parse_amneziawg(config_path: str | os.PathLike[str]) -> VPNConfig:
    """Parse an AmneziaWG or WireGuard file.

    Raises ``OSError`` if the file cannot be read.
    """
    text = Path(config_path).read_text(encoding="utf-8")
    config = parse_amneziawg_text(text)
    config.config_path = str(config_path)
    return config


def parse_amneziawg_text(config_text: str) -> VPNConfig:
    """Parse AmneziaWG configuration text.

    Keys are lower-cased and stored both as ``section.key`` and bare.
    The type is ``amneziawg`` when obfuscation keys are present, otherwise
    ``wireguard``.
    """
    params: dict[str, str] = {}
    section = ""

    for raw in config_text.split("\n"):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("[") and line.endswith("]"):
            section = line[1:-1].lower()
            continue
        equal = line.find("=")
        if equal > 0:
            key = line[:equal].strip()
            value = line[equal + 1:].strip()
            full_key = f"{section}.{key}" if section else key
            params[full_key.lower()] = value
            params[key.lower()] = value

    if "peer.endpoint" in params:
        name = _name_from_endpoint(params["peer.endpoint"])
    elif "endpoint" in params:
        name = _name_from_endpoint(params["endpoint"])
    else:
        name = "AmneziaWG Config"

    for short, alias in _AMNEZIA_ALIASES.items():
        if short in params:
            params[alias] = params[short]

    endpoint = params.get("peer.endpoint", params.get("endpoint", ""))
    if endpoint:
        colon = endpoint.rfind(":")
        if colon > 0:
            params["server"] = endpoint[:colon]
            params["port"] = endpoint[colon + 1:]
        else:
            params["server"] = endpoint
            params["port"] = DEFAULT_WIREGUARD_PORT

    is_amnezia = any(marker in params for marker in _AMNEZIA_MARKERS)
    params["type"] = "amneziawg" if is_amnezia else "wireguard"

    return VPNConfig(name=name, type=params["type"], parameters=params)


def _name_from_endpoint(endpoint: str) -> str:
    colon = endpoint.find(":")
    host = endpoint[:colon] if colon > 0 else endpoint
    return f"AmneziaWG - {host}"