"""Parsers for VPN and proxy configurations, and TLS fingerprint profiles with JA3/JA4 digests."""

__version__ = "1.0.0"