# netprofiles

Read VPN and proxy configurations into one plain, uniform shape, and work
with TLS client fingerprint profiles.

What it understands:

- OpenVPN `.ovpn` files
- WireGuard and AmneziaWG `.conf` files (AmneziaWG is recognised by its
  junk-packet and magic-header settings)
- Shadowsocks JSON files and `ss://` links
- V2Ray JSON files, `vmess://` and `vless://` links
- proxy lines in the many forms people paste them in
- predefined TLS ClientHello profiles with JA3 and JA4 digests

The package has no dependencies outside the standard library.

## Installation

```
pip install netprofiles
```

## VPN configurations

Every parser returns a `VPNConfig` dataclass: `name`, `type`, `config_path`
and a `parameters` dictionary of strings. Wherever the format allows it,
`server` and `port` are filled in. `VPNConfig.summary()` gives a one-line
description in the form `name (type) - server:port`, with `N/A` for a
missing server or port.

```python
from netprofiles.wireguard import parse_wireguard_text

config = parse_wireguard_text("""
[Interface]
Address = 10.0.0.2/32

[Peer]
Endpoint = vpn.example.com:51820
AllowedIPs = 0.0.0.0/0
""")

config.parameters["server"]   # "vpn.example.com"
config.parameters["port"]     # "51820"
config.parameters["peer.Endpoint"]  # "vpn.example.com:51820"
print(config.summary())
```

The parsers, module by module:

| Module | Functions | `type` |
|---|---|---|
| `netprofiles.openvpn` | `parse_openvpn(file_path)`, `parse_openvpn_text(text, name)` | `openvpn` |
| `netprofiles.wireguard` | `parse_wireguard(file_path)`, `parse_wireguard_text(config_string)` | `wireguard` |
| `netprofiles.amneziawg` | `parse_amneziawg(config_path)`, `parse_amneziawg_text(config_text)` | `amneziawg` or `wireguard` |
| `netprofiles.shadowsocks` | `parse_shadowsocks(file_path)`, `parse_shadowsocks_json(json_string)`, `parse_shadowsocks_url(url)` | `shadowsocks` |
| `netprofiles.v2ray` | `parse_v2ray(file_path)`, `parse_v2ray_json(json_string)`, `parse_vmess_url(url)`, `parse_vless_url(url)` | `v2ray` |

File parsers raise `OSError` when the file cannot be read. JSON parsers raise
`ValueError` when the text is not a JSON object, and link parsers raise
`ValueError` for a wrong scheme or a malformed link.

```python
from netprofiles.v2ray import parse_vless_url

link = parse_vless_url(
    "vless://00000000-0000-0000-0000-000000000000@vpn.example.com:443?type=ws&security=tls#Office"
)
link.name                     # "Office"
link.parameters["network"]    # "ws"
link.parameters["tls"]        # "tls"
link.parameters["port"]       # "443"
```

## Keeping a collection

`VPNManager` imports files and links, picks the right parser and keeps the
results by name. Files are recognised by extension: `.ovpn`, `.conf` and
`.json` (a JSON file that mentions `"outbounds"` or `"inbounds"` is taken as
V2Ray, otherwise as Shadowsocks). Links may start with `ss://`, `vmess://`
or `vless://`; an unnamed link is called `Imported VPN <n>`. Anything it
cannot import raises `VPNImportError`.

```python
from netprofiles.manager import VPNManager, VPNImportError

manager = VPNManager()
manager.import_config("office.ovpn")
manager.import_from_url("vless://00000000-0000-0000-0000-000000000000@vpn.example.com:443#Office")

for config in manager.configs():      # ordered by name
    print(config.summary())

office = manager.get_config("Office")  # KeyError if there is no such name

try:
    manager.import_config("notes.txt")
except VPNImportError as error:
    print(error)                       # Unsupported file type: txt

manager.remove_config("Office")        # True
```

`parse_config(file_path, config_type)` and `parse_from_url(url)` parse
without storing the result.

## Proxy lines

`parse_proxy_line` turns a proxy written in any common form into
`host:port:username:password`: `host:port:user:pass`, `host:port@user:pass`,
`user:pass@host:port`, `host:port`, scheme-prefixed links (`http`, `https`,
`socks4`, `socks5`), `host:port|user:pass`, and fields separated by
whitespace, commas or semicolons. A line it does not recognise comes back
stripped. `normalize_proxy_text` does the same for a whole pasted list, one
proxy per line, dropping blank lines; when no line needed rewriting it
returns the text unchanged.

```python
from netprofiles.proxyline import parse_proxy_line, normalize_proxy_text

parse_proxy_line("203.0.113.5:8080")     # "203.0.113.5:8080::"
parse_proxy_line("203.0.113.5 8080")     # "203.0.113.5:8080::"
normalize_proxy_text("203.0.113.5:8080\n\n198.51.100.7,3128")
# "203.0.113.5:8080::\n198.51.100.7:3128::"
```

## TLS fingerprint profiles

`TLSFingerprintManager` holds ready-made `TLSFingerprintProfile`s for
Chrome 120 and Edge 120 on Windows, Firefox 121 on Windows and Safari 17 on
macOS, and computes their JA3 (MD5) and JA4 digests. The cipher suites,
extensions and groups are also available as the `TLSCipherSuite`,
`TLSExtension` and `TLSSupportedGroup` enums in `netprofiles.tls`.

```python
from netprofiles.tls import TLSFingerprintManager

tls = TLSFingerprintManager()
print(tls.profile_names())

chrome = tls.get_profile("Chrome 120 Windows")   # a copy; unknown names give an empty profile
print(chrome.to_ja3())
print(chrome.to_ja4())

custom = tls.create_custom_profile("Minimal", [0x1301, 0x1302], [0, 10, 11], [29, 23])
print(tls.generate_ja3(custom), tls.generate_ja4(custom))

ja3, ja4 = tls.apply_fingerprint(custom)
```

`apply_fingerprint` computes both digests, logs them at debug level through
the `netprofiles.tls` logger and returns them; an unnamed profile raises
`TLSFingerprintError`.

## What it does not do

This is a library for reading configurations and computing fingerprints.
It does not connect to any VPN or proxy, does not change the TLS handshake
of any real connection, keeps its collection of configurations in memory
only (nothing is saved to disk), and has no command-line tool or graphical
interface.

## Running the tests

```
pip install "netprofiles[test]"
pytest
```