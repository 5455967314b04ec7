"""A registry of imported VPN configurations."""

from __future__ import annotations

import os
from pathlib import Path

from netprofiles.amneziawg import parse_amneziawg
from netprofiles.openvpn import parse_openvpn
from netprofiles.shadowsocks import parse_shadowsocks, parse_shadowsocks_url
from netprofiles.v2ray import parse_v2ray, parse_vless_url, parse_vmess_url
from netprofiles.vpnconfig import VPNConfig
from netprofiles.wireguard import parse_wireguard


class VPNImportError(Exception):
    """A VPN configuration could not be imported."""


class VPNManager:
    """Imports VPN configurations from files and links and keeps them by name."""

    def __init__(self) -> None:
        self._configs: dict[str, VPNConfig] = {}

    def import_config(self, file_path: str | os.PathLike[str]) -> VPNConfig:
        """Import a configuration file, choosing the parser by its extension.

        ``.ovpn`` is OpenVPN, ``.conf`` WireGuard or AmneziaWG, ``.json``
        V2Ray when it mentions outbounds or inbounds and Shadowsocks
        otherwise. Raises ``VPNImportError`` on failure.
        """
        file_name = Path(file_path).name
        ext = file_name.rpartition(".")[2].lower() if "." in file_name else ""

        if ext == "ovpn":
            config_type = "openvpn"
        elif ext == "conf":
            config_type = "wireguard"
        elif ext == "json":
            config_type = _detect_json_type(file_path)
        else:
            raise VPNImportError(f"Unsupported file type: {ext}")

        config = self.parse_config(file_path, config_type)
        if not config.name:
            config.name = file_name.split(".", 1)[0]
        self._configs[config.name] = config
        return config

    def import_from_url(self, url: str) -> VPNConfig:
        """Import an ``ss://``, ``vmess://`` or ``vless://`` link.

        Unnamed links are called ``Imported VPN <n>``. Raises
        ``VPNImportError`` on failure.
        """
        config = self.parse_from_url(url)
        if not config.name:
            config.name = f"Imported VPN {len(self._configs) + 1}"
        self._configs[config.name] = config
        return config

    def parse_config(
        self, file_path: str | os.PathLike[str], config_type: str
    ) -> VPNConfig:
        """Parse a file as the given type without registering it."""
        try:
            if config_type == "openvpn":
                return parse_openvpn(file_path)
            if config_type == "wireguard":
                config = parse_amneziawg(file_path)
                return config if config.parameters else parse_wireguard(file_path)
            if config_type == "shadowsocks":
                return parse_shadowsocks(file_path)
            if config_type == "v2ray":
                return parse_v2ray(file_path)
        except (OSError, ValueError) as exc:
            raise VPNImportError(f"Failed to parse {file_path}: {exc}") from exc
        raise VPNImportError(f"Unknown VPN type: {config_type}")

    def parse_from_url(self, url: str) -> VPNConfig:
        """Parse a VPN link without registering it."""
        parsers = {
            "ss://": parse_shadowsocks_url,
            "vmess://": parse_vmess_url,
            "vless://": parse_vless_url,
        }
        for scheme, parser in parsers.items():
            if url.startswith(scheme):
                try:
                    return parser(url)
                except ValueError as exc:
                    raise VPNImportError(f"Failed to parse VPN URL: {exc}") from exc
        raise VPNImportError("Failed to parse VPN URL")

    def configs(self) -> list[VPNConfig]:
        """Return every registered configuration, ordered by name."""
        return [self._configs[name] for name in sorted(self._configs)]

    def get_config(self, name: str) -> VPNConfig:
        """Return the configuration with this name; raises ``KeyError``."""
        return self._configs[name]

    def remove_config(self, name: str) -> bool:
        """Remove a configuration; return whether it was registered."""
        return self._configs.pop(name, None) is not None


def _detect_json_type(file_path: str | os.PathLike[str]) -> str:
    try:
        content = Path(file_path).read_text(encoding="utf-8", errors="replace")
    except OSError:
        return "shadowsocks"
    if '"outbounds"' in content or '"inbounds"' in content:
        return "v2ray"
    return "shadowsocks"