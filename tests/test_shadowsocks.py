import base64
import json

import pytest

from netprofiles.shadowsocks import (
    parse_shadowsocks,
    parse_shadowsocks_json,
    parse_shadowsocks_url,
)


def _b64(text, padded=True):
    encoded = base64.b64encode(text.encode()).decode()
    return encoded if padded else encoded.rstrip("=")


FULL = {
    "server": "ss.example.com",
    "server_port": 8388,
    "password": "password",
    "method": "aes-256-gcm",
    "plugin": "obfs-local",
    "plugin_opts": "obfs=http",
    "remarks": "Office",
    "timeout": 300,
}


def test_json_full_fields():
    config = parse_shadowsocks_json(json.dumps(FULL))
    assert config.type == "shadowsocks"
    assert config.name == "Office"
    params = config.parameters
    assert params["server"] == "ss.example.com"
    assert params["port"] == "8388"
    assert params["password"] == "password"
    assert params["method"] == "aes-256-gcm"
    assert params["plugin"] == "obfs-local"
    assert params["plugin_opts"] == "obfs=http"
    assert params["timeout"] == "300"


def test_json_missing_fields_are_absent():
    config = parse_shadowsocks_json(json.dumps({"server": "a.example.com"}))
    assert config.parameters == {"server": "a.example.com"}
    assert config.name == ""


def test_json_non_string_server_becomes_empty():
    config = parse_shadowsocks_json(json.dumps({"server": 5}))
    assert config.parameters["server"] == ""


@pytest.mark.parametrize("text", ["not json", "[1, 2]", ""])
def test_json_invalid_raises(text):
    with pytest.raises(ValueError):
        parse_shadowsocks_json(text)


def test_url_full():
    auth = _b64("aes-256-gcm:password")
    config = parse_shadowsocks_url(f"ss://{auth}@ss.example.com:8388#My%20Server")
    assert config.type == "shadowsocks"
    assert config.name == "My Server"
    assert config.parameters == {
        "method": "aes-256-gcm",
        "password": "password",
        "server": "ss.example.com",
        "port": "8388",
    }


def test_url_without_padding_decodes():
    padded = parse_shadowsocks_url(f"ss://{_b64('chacha20:password')}@h.example.com:1")
    unpadded = parse_shadowsocks_url(
        f"ss://{_b64('chacha20:password', padded=False)}@h.example.com:1"
    )
    assert padded.parameters == unpadded.parameters
    assert unpadded.parameters["method"] == "chacha20"


def test_url_server_splits_on_last_colon():
    config = parse_shadowsocks_url(f"ss://{_b64('m:password')}@[::1]:8388")
    assert config.parameters["server"] == "[::1]"
    assert config.parameters["port"] == "8388"


def test_url_without_tag_has_empty_name():
    config = parse_shadowsocks_url(f"ss://{_b64('m:password')}@h.example.com:9")
    assert config.name == ""


def test_url_missing_at_raises():
    with pytest.raises(ValueError, match="missing @"):
        parse_shadowsocks_url("ss://abcdef")


def test_url_wrong_scheme_raises():
    with pytest.raises(ValueError):
        parse_shadowsocks_url("http://example.com")


def test_file_uses_remarks_as_name(tmp_path):
    path = tmp_path / "node.json"
    path.write_text(json.dumps(FULL), encoding="utf-8")
    config = parse_shadowsocks(path)
    assert config.name == "Office"
    assert config.config_path == str(path)


def test_file_falls_back_to_base_name(tmp_path):
    path = tmp_path / "berlin.node.json"
    path.write_text(json.dumps({"server": "s.example.com"}), encoding="utf-8")
    config = parse_shadowsocks(path)
    assert config.name == "berlin"


def test_file_missing_raises(tmp_path):
    with pytest.raises(OSError):
        parse_shadowsocks(tmp_path / "absent.json")