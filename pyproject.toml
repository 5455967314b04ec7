[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netprofiles"
version = "1.0.0"
description = "Parsers for VPN and proxy configurations, plus TLS client fingerprint profiles with JA3/JA4 digests"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "vpn",
    "openvpn",
    "wireguard",
    "amneziawg",
    "shadowsocks",
    "v2ray",
    "vmess",
    "vless",
    "proxy",
    "tls",
    "ja3",
    "ja4",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["netprofiles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
