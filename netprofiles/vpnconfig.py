"""The VPN configuration record shared by all parsers."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class VPNConfig:
    """A parsed VPN configuration.

    ``type`` is one of ``openvpn``, ``wireguard``, ``amneziawg``,
    ``shadowsocks`` or ``v2ray``; ``parameters`` holds every key the
    parser extracted, including the normalised ``server`` and ``port``.
    """

    name: str = ""
    type: str = ""
    config_path: str = ""
    parameters: dict[str, str] = field(default_factory=dict)

    def summary(self) -> str:
        """Return a one-line description: ``name (type) - server:port``."""
        server = self.parameters.get("server", "N/A")
        port = self.parameters.get("port", "N/A")
        return f"{self.name} ({self.type}) - {server}:{port}"