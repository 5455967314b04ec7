"""TLS client fingerprint profiles and their JA3/JA4 fingerprints."""

from __future__ import annotations

import copy
import hashlib
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum

logger = logging.getLogger(__name__)

TLS_1_2 = 0x0303
TLS_1_3 = 0x0304


class TLSCipherSuite(IntEnum):
    """Cipher suites used by the built-in profiles."""

    TLS_AES_128_GCM_SHA256 = 0x1301
    TLS_AES_256_GCM_SHA384 = 0x1302
    TLS_CHACHA20_POLY1305_SHA256 = 0x1303
    TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256 = 0xC02B
    TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256 = 0xC02F
    TLS_ECDHE_ECDSA_WITH_AES_256_GCM_SHA384 = 0xC02C
    TLS_ECDHE_RSA_WITH_AES_256_GCM_SHA384 = 0xC030
    TLS_ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256 = 0xCCA9
    TLS_ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256 = 0xCCA8
    TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA = 0xC013
    TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA = 0xC014
    TLS_RSA_WITH_AES_128_GCM_SHA256 = 0x009C
    TLS_RSA_WITH_AES_256_GCM_SHA384 = 0x009D
    TLS_RSA_WITH_AES_128_CBC_SHA = 0x002F
    TLS_RSA_WITH_AES_256_CBC_SHA = 0x0035


class TLSExtension(IntEnum):
    """TLS extension type codes."""

    SERVER_NAME = 0
    STATUS_REQUEST = 5
    SUPPORTED_GROUPS = 10
    EC_POINT_FORMATS = 11
    SIGNATURE_ALGORITHMS = 13
    APPLICATION_LAYER_PROTOCOL_NEGOTIATION = 16
    SIGNED_CERTIFICATE_TIMESTAMP = 18
    ENCRYPT_THEN_MAC = 22
    EXTENDED_MASTER_SECRET = 23
    SESSION_TICKET = 35
    SUPPORTED_VERSIONS = 43
    PSK_KEY_EXCHANGE_MODES = 45
    KEY_SHARE = 51
    RENEGOTIATION_INFO = 65281
    GREASE = 0x0A0A


class TLSSupportedGroup(IntEnum):
    """Named groups (elliptic curves and finite-field groups)."""

    SECP256R1 = 23
    SECP384R1 = 24
    SECP521R1 = 25
    X25519 = 29
    X448 = 30
    FFDHE2048 = 256
    FFDHE3072 = 257
    FFDHE4096 = 258
    FFDHE6144 = 259
    FFDHE8192 = 260


class TLSFingerprintError(Exception):
    """A TLS fingerprint profile could not be applied."""


@dataclass
class TLSFingerprintProfile:
    """The parameters of a TLS ClientHello that make up a fingerprint."""

    name: str = ""
    description: str = ""
    tls_versions: list[int] = field(default_factory=list)
    cipher_suites: list[int] = field(default_factory=list)
    extensions: list[int] = field(default_factory=list)
    supported_groups: list[int] = field(default_factory=list)
    signature_algorithms: list[int] = field(default_factory=list)
    alpn_protocols: list[str] = field(default_factory=list)
    use_grease: bool = False

    def to_ja3(self) -> str:
        """Return the JA3 hash of this profile."""
        return _ja3(self)

    def to_ja4(self) -> str:
        """Return the JA4 fingerprint of this profile."""
        return _ja4(self)


def _join(values: Iterable[int], separator: str) -> str:
    return separator.join(str(int(value)) for value in values)


def _ja3(profile: TLSFingerprintProfile) -> str:
    version = profile.tls_versions[-1] if profile.tls_versions else 771
    ja3_string = ",".join(
        (
            str(int(version)),
            _join(profile.cipher_suites, "-"),
            _join(profile.extensions, "-"),
            _join(profile.supported_groups, "-"),
            "0",
        )
    )
    return hashlib.md5(ja3_string.encode("utf-8")).hexdigest()


def _ja4(profile: TLSFingerprintProfile) -> str:
    version = "13" if TLS_1_3 in profile.tls_versions else "12"
    if not profile.alpn_protocols:
        alpn = "00"
    elif "h2" in profile.alpn_protocols:
        alpn = "h2"
    else:
        alpn = "h1"
    ciphers_hash = hashlib.sha256(
        _join(profile.cipher_suites, ",").encode("utf-8")
    ).hexdigest()[:12]
    extensions_hash = hashlib.sha256(
        _join(profile.extensions, ",").encode("utf-8")
    ).hexdigest()[:12]
    return (
        f"t{version}{len(profile.cipher_suites):02d}{len(profile.extensions):02d}"
        f"{alpn}_{ciphers_hash}_{extensions_hash}"
    )


def _builtin_profiles() -> dict[str, TLSFingerprintProfile]:
    chrome_ciphers = [
        0x1301, 0x1302, 0x1303,
        0xC02B, 0xC02F, 0xC02C, 0xC030,
        0xCCA9, 0xCCA8, 0xC013, 0xC014,
        0x009C, 0x009D, 0x002F, 0x0035,
    ]
    chrome_extensions = [0, 23, 65281, 10, 11, 35, 16, 5, 13, 18, 51, 45, 43, 27, 21]
    chrome_groups = [29, 23, 24]
    chrome_sigalgs = [
        0x0403, 0x0503, 0x0603, 0x0804, 0x0805, 0x0806, 0x0401, 0x0501, 0x0601,
    ]
    short_sigalgs = [0x0403, 0x0503, 0x0603, 0x0804, 0x0805, 0x0806]

    profiles = [
        TLSFingerprintProfile(
            name="Chrome 120 Windows",
            description="Google Chrome 120 on Windows 10/11",
            tls_versions=[TLS_1_2, TLS_1_3],
            cipher_suites=list(chrome_ciphers),
            extensions=list(chrome_extensions),
            supported_groups=list(chrome_groups),
            signature_algorithms=list(chrome_sigalgs),
            alpn_protocols=["h2", "http/1.1"],
            use_grease=True,
        ),
        TLSFingerprintProfile(
            name="Firefox 121 Windows",
            description="Mozilla Firefox 121 on Windows 10/11",
            tls_versions=[TLS_1_2, TLS_1_3],
            cipher_suites=[
                0x1301, 0x1302, 0x1303,
                0xC02B, 0xC02F, 0xC02C, 0xC030,
                0xCCA9, 0xCCA8, 0xC013, 0xC014,
            ],
            extensions=[0, 23, 65281, 10, 11, 35, 16, 5, 13, 51, 45, 43, 21],
            supported_groups=[29, 23, 24, 25],
            signature_algorithms=list(short_sigalgs),
            alpn_protocols=["h2", "http/1.1"],
            use_grease=False,
        ),
        TLSFingerprintProfile(
            name="Safari 17 macOS",
            description="Safari 17 on macOS Sonoma",
            tls_versions=[TLS_1_2, TLS_1_3],
            cipher_suites=[
                0x1301, 0x1302, 0x1303,
                0xC02B, 0xC02F, 0xC02C, 0xC030,
                0xCCA9, 0xCCA8,
            ],
            extensions=[0, 23, 65281, 10, 11, 35, 16, 5, 13, 51, 45, 43],
            supported_groups=[29, 23, 24],
            signature_algorithms=list(short_sigalgs),
            alpn_protocols=["h2", "http/1.1"],
            use_grease=False,
        ),
        TLSFingerprintProfile(
            name="Edge 120 Windows",
            description="Microsoft Edge 120 on Windows 10/11",
            tls_versions=[TLS_1_2, TLS_1_3],
            cipher_suites=list(chrome_ciphers),
            extensions=list(chrome_extensions),
            supported_groups=list(chrome_groups),
            signature_algorithms=list(chrome_sigalgs),
            alpn_protocols=["h2", "http/1.1"],
            use_grease=True,
        ),
    ]
    return {profile.name: profile for profile in profiles}


class TLSFingerprintManager:
    """Holds the built-in browser TLS profiles and computes fingerprints."""

    def __init__(self) -> None:
        self._profiles = _builtin_profiles()

    def get_profile(self, name: str) -> TLSFingerprintProfile:
        """Return a copy of the named profile, or an empty profile if unknown."""
        profile = self._profiles.get(name)
        return copy.deepcopy(profile) if profile is not None else TLSFingerprintProfile()

    def profile_names(self) -> list[str]:
        """Return the names of the built-in profiles in sorted order."""
        return sorted(self._profiles)

    def apply_fingerprint(self, profile: TLSFingerprintProfile) -> tuple[str, str]:
        """Compute and log the fingerprint of a profile; return ``(ja3, ja4)``.

        Raises ``TLSFingerprintError`` for a profile without a name.
        """
        if not profile.name:
            raise TLSFingerprintError("Invalid TLS profile")
        ja3 = self.generate_ja3(profile)
        ja4 = self.generate_ja4(profile)
        logger.debug(
            "TLS fingerprint applied: profile=%s ja3=%s ja4=%s", profile.name, ja3, ja4
        )
        return ja3, ja4

    def generate_ja3(self, profile: TLSFingerprintProfile) -> str:
        """Return the MD5 JA3 hash of a profile."""
        return _ja3(profile)

    def generate_ja4(self, profile: TLSFingerprintProfile) -> str:
        """Return the JA4 fingerprint of a profile."""
        return _ja4(profile)

    def create_custom_profile(
        self,
        name: str,
        cipher_suites: Iterable[int],
        extensions: Iterable[int],
        supported_groups: Iterable[int],
    ) -> TLSFingerprintProfile:
        """Build a TLS 1.2/1.3 profile from the given lists."""
        return TLSFingerprintProfile(
            name=name,
            description="Custom TLS profile",
            tls_versions=[TLS_1_2, TLS_1_3],
            cipher_suites=[int(value) for value in cipher_suites],
            extensions=[int(value) for value in extensions],
            supported_groups=[int(value) for value in supported_groups],
            signature_algorithms=[0x0403, 0x0503, 0x0603],
            alpn_protocols=["h2", "http/1.1"],
            use_grease=False,
        )