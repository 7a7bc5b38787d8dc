"""Standard TLS parameters recommended by FIX-over-TLS (FIXS)."""

from __future__ import annotations

import ssl
from typing import ClassVar

from fixwire.ciphers import iana_to_openssl


class FixOverTlsV10:
    """FIX-over-TLS v1.0 recommendations."""

    RECOMMENDED_CIPHERSUITES: ClassVar[tuple[str, ...]] = (
        "TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256",
        "TLS_ECDHE_ECDSA_WITH_AES_256_GCM_SHA384",
        "TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA",
        "TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA",
        "TLS_ECDHE_ECDSA_WITH_AES_128_CBC_SHA256",
        "TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA384",
        "TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256",
        "TLS_DHE_RSA_WITH_AES_128_GCM_SHA256",
        "TLS_ECDHE_RSA_WITH_AES_256_GCM_SHA384",
        "TLS_DHE_RSA_WITH_AES_256_GCM_SHA384",
        "TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA",
        "TLS_DHE_RSA_WITH_AES_128_CBC_SHA",
        "TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA",
        "TLS_DHE_RSA_WITH_AES_256_CBC_SHA",
        "TLS_ECDHE_RSA_WITH_AES_128_CBC_SHA256",
        "TLS_DHE_RSA_WITH_AES_128_CBC_SHA256",
        "TLS_DHE_RSA_WITH_AES_256_CBC_SHA256",
        "TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA384",
    )

    RECOMMENDED_CIPHERSUITES_PSK_ONLY: ClassVar[tuple[str, ...]] = (
        "TLS_DHE_PSK_WITH_AES_128_GCM_SHA256",
        "TLS_DHE_PSK_WITH_AES_256_GCM_SHA384",
        "TLS_ECDHE_PSK_WITH_AES_128_CBC_SHA",
        "TLS_DHE_PSK_WITH_AES_128_CBC_SHA",
        "TLS_ECDHE_PSK_WITH_AES_256_CBC_SHA",
        "TLS_DHE_PSK_WITH_AES_256_CBC_SHA",
        "TLS_ECDHE_PSK_WITH_AES_128_CBC_SHA256",
        "TLS_DHE_PSK_WITH_AES_128_CBC_SHA256",
        "TLS_ECDHE_PSK_WITH_AES_256_CBC_SHA384",
        "TLS_DHE_PSK_WITH_AES_256_CBC_SHA384",
    )

    def __repr__(self) -> str:
        return "FixOverTlsV10()"

    def recommended_cs_iana(self, psk: bool) -> list[str]:
        """Recommended cipher suites, in IANA format."""
        suites = self.RECOMMENDED_CIPHERSUITES_PSK_ONLY if psk else self.RECOMMENDED_CIPHERSUITES
        return list(suites)

    def recommended_cs_openssl(self, psk: bool) -> list[str]:
        """Recommended cipher suites, in OpenSSL format.

        Raises ValueError if a suite has no known OpenSSL name.
        """
        names = []
        for iana in self.recommended_cs_iana(psk):
            openssl = iana_to_openssl(iana)
            if openssl is None:
                raise ValueError(f"no OpenSSL name known for cipher suite {iana}")
            names.append(openssl)
        return names

    def _configure(self, context: ssl.SSLContext) -> ssl.SSLContext:
        context.minimum_version = ssl.TLSVersion.TLSv1_2
        context.options |= ssl.OP_NO_COMPRESSION
        context.set_ciphers(":".join(self.recommended_cs_openssl(False)))
        return context

    def recommended_client_context(self) -> ssl.SSLContext:
        """A client-side SSL context with the recommended settings."""
        return self._configure(ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT))

    def recommended_server_context(self) -> ssl.SSLContext:
        """A server-side SSL context with the recommended settings."""
        context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
        context.options |= ssl.OP_CIPHER_SERVER_PREFERENCE
        return self._configure(context)