import pytest

from netprofiles.openvpn import parse_openvpn, parse_openvpn_text

SAMPLE = """\
# sample client config
client
dev tun
proto udp
remote vpn.example.com 1194
resolv-retry infinite

cipher   AES-256-GCM
"""


def test_type_and_name():
    config = parse_openvpn_text(SAMPLE, "office")
    assert config.type == "openvpn"
    assert config.name == "office"


def test_remote_sets_server_and_port():
    config = parse_openvpn_text(SAMPLE, "office")
    assert config.parameters["server"] == "vpn.example.com"
    assert config.parameters["port"] == "1194"
    assert config.parameters["remote"] == "vpn.example.com 1194"


def test_flag_directive_has_empty_value():
    config = parse_openvpn_text(SAMPLE, "office")
    assert config.parameters["client"] == ""


def test_whitespace_collapsed_in_value():
    config = parse_openvpn_text(SAMPLE, "office")
    assert config.parameters["cipher"] == "AES-256-GCM"


def test_comments_are_skipped():
    config = parse_openvpn_text(SAMPLE, "office")
    assert all(not key.startswith("#") for key in config.parameters)


def test_remote_without_port():
    config = parse_openvpn_text("remote host.example.com\n", "n")
    assert config.parameters["server"] == "host.example.com"
    assert "port" not in config.parameters


def test_later_directive_overrides_earlier():
    config = parse_openvpn_text("proto udp\nproto tcp\n", "n")
    assert config.parameters["proto"] == "tcp"


def test_parse_file_uses_base_name(tmp_path):
    path = tmp_path / "my.server.ovpn"
    path.write_text(SAMPLE, encoding="utf-8")
    config = parse_openvpn(path)
    assert config.name == "my"
    assert config.config_path == str(path)
    assert config.parameters["server"] == "vpn.example.com"


def test_parse_file_with_crlf(tmp_path):
    path = tmp_path / "win.ovpn"
    path.write_bytes(b"remote a.example.com 443\r\nproto tcp\r\n")
    config = parse_openvpn(path)
    assert config.parameters["port"] == "443"
    assert config.parameters["proto"] == "tcp"


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        parse_openvpn(tmp_path / "absent.ovpn")