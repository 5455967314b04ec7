import pytest

from netprofiles.amneziawg import parse_amneziawg, parse_amneziawg_text

AMNEZIA = """\
[Interface]
PrivateKey = placeholder
Address = 10.8.0.2/32
Jc = 4
Jmin = 40
Jmax = 70
S1 = 15
S2 = 30
H1 = 111
H2 = 222
H3 = 333
H4 = 444

[Peer]
PublicKey = placeholder
Endpoint = awg.example.com:43210
"""

PLAIN = """\
[Interface]
Address = 10.0.0.2/32
[Peer]
Endpoint = plain.example.com:51820
"""


def test_detects_amnezia_type():
    config = parse_amneziawg_text(AMNEZIA)
    assert config.type == "amneziawg"
    assert config.parameters["type"] == "amneziawg"


def test_plain_wireguard_type():
    config = parse_amneziawg_text(PLAIN)
    assert config.type == "wireguard"


def test_name_from_peer_endpoint():
    assert parse_amneziawg_text(AMNEZIA).name == "AmneziaWG - awg.example.com"


def test_default_name_without_endpoint():
    assert parse_amneziawg_text("[Interface]\nAddress = 10.0.0.1\n").name == "AmneziaWG Config"


def test_keys_lowercased_with_and_without_section():
    params = parse_amneziawg_text(AMNEZIA).parameters
    assert params["interface.address"] == "10.8.0.2/32"
    assert params["address"] == "10.8.0.2/32"
    assert params["peer.endpoint"] == "awg.example.com:43210"


def test_amnezia_aliases():
    params = parse_amneziawg_text(AMNEZIA).parameters
    assert params["amnezia.junkpacketcount"] == "4"
    assert params["amnezia.junkpacketminsize"] == "40"
    assert params["amnezia.junkpacketmaxsize"] == "70"
    assert params["amnezia.initpacketjunksize"] == "15"
    assert params["amnezia.responsepacketjunksize"] == "30"
    assert params["amnezia.initpacketmagicheader"] == "111"
    assert params["amnezia.responsepacketmagicheader"] == "222"
    assert params["amnezia.underloadpacketmagicheader"] == "333"
    assert params["amnezia.transportpacketmagicheader"] == "444"


def test_server_and_port_from_endpoint():
    params = parse_amneziawg_text(AMNEZIA).parameters
    assert params["server"] == "awg.example.com"
    assert params["port"] == "43210"


def test_default_port_when_endpoint_has_none():
    params = parse_amneziawg_text("[Peer]\nEndpoint = host.example.com\n").parameters
    assert params["server"] == "host.example.com"
    assert params["port"] == "51820"


def test_single_marker_is_enough():
    config = parse_amneziawg_text("[Interface]\nS2 = 5\n")
    assert config.type == "amneziawg"


def test_h2_alone_is_not_amnezia():
    config = parse_amneziawg_text("[Interface]\nH2 = 5\n")
    assert config.type == "wireguard"
    assert config.parameters["amnezia.responsepacketmagicheader"] == "5"


def test_leading_equals_is_ignored():
    params = parse_amneziawg_text("[Interface]\n= value\n").parameters
    assert set(params) == {"type"}


def test_parse_file(tmp_path):
    path = tmp_path / "awg.conf"
    path.write_text(AMNEZIA, encoding="utf-8")
    config = parse_amneziawg(path)
    assert config.config_path == str(path)
    assert config.type == "amneziawg"
    assert config.parameters["server"] == "awg.example.com"


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        parse_amneziawg(tmp_path / "absent.conf")