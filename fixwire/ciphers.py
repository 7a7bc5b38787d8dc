"""Mapping of IANA cipher suite names to their OpenSSL names."""

from __future__ import annotations

from typing import Optional

# IANA names carrying the "TLS_" prefix, given here without it.
_TLS_SUITES: dict[str, str] = {
    "RSA_WITH_NULL_MD5": "NULL-MD5",
    "RSA_WITH_NULL_SHA": "NULL-SHA",
    "RSA_EXPORT_WITH_RC4_40_MD5": "EXP-RC4-MD5",
    "RSA_WITH_RC4_128_MD5": "RC4-MD5",
    "RSA_WITH_RC4_128_SHA": "RC4-SHA",
    "RSA_EXPORT_WITH_RC2_CBC_40_MD5": "EXP-RC2-CBC-MD5",
    "RSA_WITH_IDEA_CBC_SHA": "IDEA-CBC-SHA",
    "RSA_EXPORT_WITH_DES40_CBC_SHA": "EXP-DES-CBC-SHA",
    "RSA_WITH_DES_CBC_SHA": "DES-CBC-SHA",
    "RSA_WITH_3DES_EDE_CBC_SHA": "DES-CBC3-SHA",
    "DH_DSS_EXPORT_WITH_DES40_CBC_SHA": "EXP-DH-DSS-DES-CBC-SHA",
    "DH_DSS_WITH_DES_CBC_SHA": "DH-DSS-DES-CBC-SHA",
    "DH_DSS_WITH_3DES_EDE_CBC_SHA": "DH-DSS-DES-CBC3-SHA",
    "DH_RSA_EXPORT_WITH_DES40_CBC_SHA": "EXP-DH-RSA-DES-CBC-SHA",
    "DH_RSA_WITH_DES_CBC_SHA": "DH-RSA-DES-CBC-SHA",
    "DH_RSA_WITH_3DES_EDE_CBC_SHA": "DH-RSA-DES-CBC3-SHA",
    "DHE_DSS_EXPORT_WITH_DES40_CBC_SHA": "EXP-EDH-DSS-DES-CBC-SHA",
    "DHE_DSS_WITH_DES_CBC_SHA": "EDH-DSS-DES-CBC-SHA",
    "DHE_DSS_WITH_3DES_EDE_CBC_SHA": "EDH-DSS-DES-CBC3-SHA",
    "DHE_RSA_EXPORT_WITH_DES40_CBC_SHA": "EXP-EDH-RSA-DES-CBC-SHA",
    "DHE_RSA_WITH_DES_CBC_SHA": "EDH-RSA-DES-CBC-SHA",
    "DHE_RSA_WITH_3DES_EDE_CBC_SHA": "EDH-RSA-DES-CBC3-SHA",
    "DH_anon_EXPORT_WITH_RC4_40_MD5": "EXP-ADH-RC4-MD5",
    "DH_anon_WITH_RC4_128_MD5": "ADH-RC4-MD5",
    "DH_anon_EXPORT_WITH_DES40_CBC_SHA": "EXP-ADH-DES-CBC-SHA",
    "DH_anon_WITH_DES_CBC_SHA": "ADH-DES-CBC-SHA",
    "DH_anon_WITH_3DES_EDE_CBC_SHA": "ADH-DES-CBC3-SHA",
    "KRB5_WITH_DES_CBC_SHA": "KRB5-DES-CBC-SHA",
    "KRB5_WITH_3DES_EDE_CBC_SHA": "KRB5-DES-CBC3-SHA",
    "KRB5_WITH_RC4_128_SHA": "KRB5-RC4-SHA",
    "KRB5_WITH_IDEA_CBC_SHA": "KRB5-IDEA-CBC-SHA",
    "KRB5_WITH_DES_CBC_MD5": "KRB5-DES-CBC-MD5",
    "KRB5_WITH_3DES_EDE_CBC_MD5": "KRB5-DES-CBC3-MD5",
    "KRB5_WITH_RC4_128_MD5": "KRB5-RC4-MD5",
    "KRB5_WITH_IDEA_CBC_MD5": "KRB5-IDEA-CBC-MD5",
    "KRB5_EXPORT_WITH_DES_CBC_40_SHA": "EXP-KRB5-DES-CBC-SHA",
    "KRB5_EXPORT_WITH_RC2_CBC_40_SHA": "EXP-KRB5-RC2-CBC-SHA",
    "KRB5_EXPORT_WITH_RC4_40_SHA": "EXP-KRB5-RC4-SHA",
    "KRB5_EXPORT_WITH_DES_CBC_40_MD5": "EXP-KRB5-DES-CBC-MD5",
    "KRB5_EXPORT_WITH_RC2_CBC_40_MD5": "EXP-KRB5-RC2-CBC-MD5",
    "KRB5_EXPORT_WITH_RC4_40_MD5": "EXP-KRB5-RC4-MD5",
    "PSK_WITH_NULL_SHA": "PSK-NULL-SHA",
    "DHE_PSK_WITH_NULL_SHA": "DHE-PSK-NULL-SHA",
    "RSA_PSK_WITH_NULL_SHA": "RSA-PSK-NULL-SHA",
    "RSA_WITH_AES_128_CBC_SHA": "AES128-SHA",
    "DH_DSS_WITH_AES_128_CBC_SHA": "DH-DSS-AES128-SHA",
    "DH_RSA_WITH_AES_128_CBC_SHA": "DH-RSA-AES128-SHA",
    "DHE_DSS_WITH_AES_128_CBC_SHA": "DHE-DSS-AES128-SHA",
    "DHE_RSA_WITH_AES_128_CBC_SHA": "DHE-RSA-AES128-SHA",
    "DH_anon_WITH_AES_128_CBC_SHA": "ADH-AES128-SHA",
    "RSA_WITH_AES_256_CBC_SHA": "AES256-SHA",
    "DH_DSS_WITH_AES_256_CBC_SHA": "DH-DSS-AES256-SHA",
    "DH_RSA_WITH_AES_256_CBC_SHA": "DH-RSA-AES256-SHA",
    "DHE_DSS_WITH_AES_256_CBC_SHA": "DHE-DSS-AES256-SHA",
    "DHE_RSA_WITH_AES_256_CBC_SHA": "DHE-RSA-AES256-SHA",
    "DH_anon_WITH_AES_256_CBC_SHA": "ADH-AES256-SHA",
    "RSA_WITH_NULL_SHA256": "NULL-SHA256",
    "RSA_WITH_AES_128_CBC_SHA256": "AES128-SHA256",
    "RSA_WITH_AES_256_CBC_SHA256": "AES256-SHA256",
    "DH_DSS_WITH_AES_128_CBC_SHA256": "DH-DSS-AES128-SHA256",
    "DH_RSA_WITH_AES_128_CBC_SHA256": "DH-RSA-AES128-SHA256",
    "DHE_DSS_WITH_AES_128_CBC_SHA256": "DHE-DSS-AES128-SHA256",
    "RSA_WITH_CAMELLIA_128_CBC_SHA": "CAMELLIA128-SHA",
    "DH_DSS_WITH_CAMELLIA_128_CBC_SHA": "DH-DSS-CAMELLIA128-SHA",
    "DH_RSA_WITH_CAMELLIA_128_CBC_SHA": "DH-RSA-CAMELLIA128-SHA",
    "DHE_DSS_WITH_CAMELLIA_128_CBC_SHA": "DHE-DSS-CAMELLIA128-SHA",
    "DHE_RSA_WITH_CAMELLIA_128_CBC_SHA": "DHE-RSA-CAMELLIA128-SHA",
    "DH_anon_WITH_CAMELLIA_128_CBC_SHA": "ADH-CAMELLIA128-SHA",
    "RSA_EXPORT1024_WITH_RC4_56_MD5": "EXP1024-RC4-MD5",
    "RSA_EXPORT1024_WITH_RC2_CBC_56_MD5": "EXP1024-RC2-CBC-MD5",
    "RSA_EXPORT1024_WITH_DES_CBC_SHA": "EXP1024-DES-CBC-SHA",
    "DHE_DSS_EXPORT1024_WITH_DES_CBC_SHA": "EXP1024-DHE-DSS-DES-CBC-SHA",
    "RSA_EXPORT1024_WITH_RC4_56_SHA": "EXP1024-RC4-SHA",
    "DHE_DSS_EXPORT1024_WITH_RC4_56_SHA": "EXP1024-DHE-DSS-RC4-SHA",
    "DHE_DSS_WITH_RC4_128_SHA": "DHE-DSS-RC4-SHA",
    "DHE_RSA_WITH_AES_128_CBC_SHA256": "DHE-RSA-AES128-SHA256",
    "DH_DSS_WITH_AES_256_CBC_SHA256": "DH-DSS-AES256-SHA256",
    "DH_RSA_WITH_AES_256_CBC_SHA256": "DH-RSA-AES256-SHA256",
    "DHE_DSS_WITH_AES_256_CBC_SHA256": "DHE-DSS-AES256-SHA256",
    "DHE_RSA_WITH_AES_256_CBC_SHA256": "DHE-RSA-AES256-SHA256",
    "DH_anon_WITH_AES_128_CBC_SHA256": "ADH-AES128-SHA256",
    "DH_anon_WITH_AES_256_CBC_SHA256": "ADH-AES256-SHA256",
    "GOSTR341094_WITH_28147_CNT_IMIT": "GOST94-GOST89-GOST89",
    "GOSTR341001_WITH_28147_CNT_IMIT": "GOST2001-GOST89-GOST89",
    "GOSTR341001_WITH_NULL_GOSTR3411": "GOST94-NULL-GOST94",
    "GOSTR341094_WITH_NULL_GOSTR3411": "GOST2001-GOST89-GOST89",
    "RSA_WITH_CAMELLIA_256_CBC_SHA": "CAMELLIA256-SHA",
    "RSA_WITH_CAMELLIA_256_CBC_SHA256": "CAMELLIA256-SHA256",
    "DH_DSS_WITH_CAMELLIA_256_CBC_SHA": "DH-DSS-CAMELLIA256-SHA",
    "DH_RSA_WITH_CAMELLIA_256_CBC_SHA": "DH-RSA-CAMELLIA256-SHA",
    "DHE_DSS_WITH_CAMELLIA_256_CBC_SHA": "DHE-DSS-CAMELLIA256-SHA",
    "DHE_RSA_WITH_CAMELLIA_256_CBC_SHA": "DHE-RSA-CAMELLIA256-SHA",
    "DH_anon_WITH_CAMELLIA_256_CBC_SHA": "ADH-CAMELLIA256-SHA",
    "PSK_WITH_RC4_128_SHA": "PSK-RC4-SHA",
    "PSK_WITH_3DES_EDE_CBC_SHA": "PSK-3DES-EDE-CBC-SHA",
    "PSK_WITH_AES_128_CBC_SHA": "PSK-AES128-CBC-SHA",
    "PSK_WITH_AES_256_CBC_SHA": "PSK-AES256-CBC-SHA",
    "RSA_WITH_SEED_CBC_SHA": "SEED-SHA",
    "DH_DSS_WITH_SEED_CBC_SHA": "DH-DSS-SEED-SHA",
    "DH_RSA_WITH_SEED_CBC_SHA": "DH-RSA-SEED-SHA",
    "DHE_DSS_WITH_SEED_CBC_SHA": "DHE-DSS-SEED-SHA",
    "DHE_RSA_WITH_SEED_CBC_SHA": "DHE-RSA-SEED-SHA",
    "DH_anon_WITH_SEED_CBC_SHA": "ADH-SEED-SHA",
    "RSA_WITH_AES_128_GCM_SHA256": "AES128-GCM-SHA256",
    "RSA_WITH_AES_256_GCM_SHA384": "AES256-GCM-SHA384",
    "DHE_RSA_WITH_AES_128_GCM_SHA256": "DHE-RSA-AES128-GCM-SHA256",
    "DHE_RSA_WITH_AES_256_GCM_SHA384": "DHE-RSA-AES256-GCM-SHA384",
    "DH_RSA_WITH_AES_128_GCM_SHA256": "DH-RSA-AES128-GCM-SHA256",
    "DH_RSA_WITH_AES_256_GCM_SHA384": "DH-RSA-AES256-GCM-SHA384",
    "DHE_DSS_WITH_AES_128_GCM_SHA256": "DHE-DSS-AES128-GCM-SHA256",
    "DHE_DSS_WITH_AES_256_GCM_SHA384": "DHE-DSS-AES256-GCM-SHA384",
    "DH_DSS_WITH_AES_128_GCM_SHA256": "DH-DSS-AES128-GCM-SHA256",
    "DH_DSS_WITH_AES_256_GCM_SHA384": "DH-DSS-AES256-GCM-SHA384",
    "DH_anon_WITH_AES_128_GCM_SHA256": "ADH-AES128-GCM-SHA256",
    "DH_anon_WITH_AES_256_GCM_SHA384": "ADH-AES256-GCM-SHA384",
    "RSA_WITH_CAMELLIA_128_CBC_SHA256": "CAMELLIA128-SHA256",
    "DH_DSS_WITH_CAMELLIA_128_CBC_SHA256": "DH-DSS-CAMELLIA128-SHA256",
    "DH_RSA_WITH_CAMELLIA_128_CBC_SHA256": "DH-RSA-CAMELLIA128-SHA256",
    "DHE_DSS_WITH_CAMELLIA_128_CBC_SHA256": "DHE-DSS-CAMELLIA128-SHA256",
    "DHE_RSA_WITH_CAMELLIA_128_CBC_SHA256": "DHE-RSA-CAMELLIA128-SHA256",
    "DH_anon_WITH_CAMELLIA_128_CBC_SHA256": "ADH-CAMELLIA128-SHA256",
    "EMPTY_RENEGOTIATION_INFO_SCSV": "TLS_FALLBACK_SCSV",
    "AES_128_GCM_SHA256": "TLS_AES_128_GCM_SHA256",
    "AES_256_GCM_SHA384": "TLS_AES_256_GCM_SHA384",
    "CHACHA20_POLY1305_SHA256": "TLS_CHACHA20_POLY1305_SHA256",
    "AES_128_CCM_SHA256": "TLS_AES_128_CCM_SHA256",
    "AES_128_CCM_8_SHA256": "TLS_AES_128_CCM_8_SHA256",
    "ECDH_ECDSA_WITH_NULL_SHA": "ECDH-ECDSA-NULL-SHA",
    "ECDH_ECDSA_WITH_RC4_128_SHA": "ECDH-ECDSA-RC4-SHA",
    "ECDH_ECDSA_WITH_3DES_EDE_CBC_SHA": "ECDH-ECDSA-DES-CBC3-SHA",
    "ECDH_ECDSA_WITH_AES_128_CBC_SHA": "ECDH-ECDSA-AES128-SHA",
    "ECDH_ECDSA_WITH_AES_256_CBC_SHA": "ECDH-ECDSA-AES256-SHA",
    "ECDHE_ECDSA_WITH_NULL_SHA": "ECDHE-ECDSA-NULL-SHA",
    "ECDHE_ECDSA_WITH_RC4_128_SHA": "ECDHE-ECDSA-RC4-SHA",
    "ECDHE_ECDSA_WITH_3DES_EDE_CBC_SHA": "ECDHE-ECDSA-DES-CBC3-SHA",
    "ECDHE_ECDSA_WITH_AES_128_CBC_SHA": "ECDHE-ECDSA-AES128-SHA",
    "ECDHE_ECDSA_WITH_AES_256_CBC_SHA": "ECDHE-ECDSA-AES256-SHA",
    "ECDH_RSA_WITH_NULL_SHA": "ECDH-RSA-NULL-SHA",
    "ECDH_RSA_WITH_RC4_128_SHA": "ECDH-RSA-RC4-SHA",
    "ECDH_RSA_WITH_3DES_EDE_CBC_SHA": "ECDH-RSA-DES-CBC3-SHA",
    "ECDH_RSA_WITH_AES_128_CBC_SHA": "ECDH-RSA-AES128-SHA",
    "ECDH_RSA_WITH_AES_256_CBC_SHA": "ECDH-RSA-AES256-SHA",
    "ECDHE_RSA_WITH_NULL_SHA": "ECDHE-RSA-NULL-SHA",
    "ECDHE_RSA_WITH_RC4_128_SHA": "ECDHE-RSA-RC4-SHA",
    "ECDHE_RSA_WITH_3DES_EDE_CBC_SHA": "ECDHE-RSA-DES-CBC3-SHA",
    "ECDHE_RSA_WITH_AES_128_CBC_SHA": "ECDHE-RSA-AES128-SHA",
    "ECDHE_RSA_WITH_AES_256_CBC_SHA": "ECDHE-RSA-AES256-SHA",
    "ECDH_anon_WITH_NULL_SHA": "AECDH-NULL-SHA",
    "ECDH_anon_WITH_RC4_128_SHA": "AECDH-RC4-SHA",
    "ECDH_anon_WITH_3DES_EDE_CBC_SHA": "AECDH-DES-CBC3-SHA",
    "ECDH_anon_WITH_AES_128_CBC_SHA": "AECDH-AES128-SHA",
    "ECDH_anon_WITH_AES_256_CBC_SHA": "AECDH-AES256-SHA",
    "SRP_SHA_WITH_3DES_EDE_CBC_SHA": "SRP-3DES-EDE-CBC-SHA",
    "SRP_SHA_RSA_WITH_3DES_EDE_CBC_SHA": "SRP-RSA-3DES-EDE-CBC-SHA",
    "SRP_SHA_DSS_WITH_3DES_EDE_CBC_SHA": "SRP-DSS-3DES-EDE-CBC-SHA",
    "SRP_SHA_WITH_AES_128_CBC_SHA": "SRP-AES-128-CBC-SHA",
    "SRP_SHA_RSA_WITH_AES_128_CBC_SHA": "SRP-RSA-AES-128-CBC-SHA",
    "SRP_SHA_DSS_WITH_AES_128_CBC_SHA": "SRP-DSS-AES-128-CBC-SHA",
    "SRP_SHA_WITH_AES_256_CBC_SHA": "SRP-AES-256-CBC-SHA",
    "SRP_SHA_RSA_WITH_AES_256_CBC_SHA": "SRP-RSA-AES-256-CBC-SHA",
    "SRP_SHA_DSS_WITH_AES_256_CBC_SHA": "SRP-DSS-AES-256-CBC-SHA",
    "ECDHE_ECDSA_WITH_AES_128_CBC_SHA256": "ECDHE-ECDSA-AES128-SHA256",
    "ECDHE_ECDSA_WITH_AES_256_CBC_SHA384": "ECDHE-ECDSA-AES256-SHA384",
    "ECDH_ECDSA_WITH_AES_128_CBC_SHA256": "ECDH-ECDSA-AES128-SHA256",
    "ECDH_ECDSA_WITH_AES_256_CBC_SHA384": "ECDH-ECDSA-AES256-SHA384",
    "ECDHE_RSA_WITH_AES_128_CBC_SHA256": "ECDHE-RSA-AES128-SHA256",
    "ECDHE_RSA_WITH_AES_256_CBC_SHA384": "ECDHE-RSA-AES256-SHA384",
    "ECDH_RSA_WITH_AES_128_CBC_SHA256": "ECDH-RSA-AES128-SHA256",
    "ECDH_RSA_WITH_AES_256_CBC_SHA384": "ECDH-RSA-AES256-SHA384",
    "ECDHE_ECDSA_WITH_AES_128_GCM_SHA256": "ECDHE-ECDSA-AES128-GCM-SHA256",
    "ECDHE_ECDSA_WITH_AES_256_GCM_SHA384": "ECDHE-ECDSA-AES256-GCM-SHA384",
    "ECDH_ECDSA_WITH_AES_128_GCM_SHA256": "ECDH-ECDSA-AES128-GCM-SHA256",
    "ECDH_ECDSA_WITH_AES_256_GCM_SHA384": "ECDH-ECDSA-AES256-GCM-SHA384",
    "ECDHE_RSA_WITH_AES_128_GCM_SHA256": "ECDHE-RSA-AES128-GCM-SHA256",
    "ECDHE_RSA_WITH_AES_256_GCM_SHA384": "ECDHE-RSA-AES256-GCM-SHA384",
    "ECDH_RSA_WITH_AES_128_GCM_SHA256": "ECDH-RSA-AES128-GCM-SHA256",
    "ECDH_RSA_WITH_AES_256_GCM_SHA384": "ECDH-RSA-AES256-GCM-SHA384",
    "ECDHE_PSK_WITH_RC4_128_SHA": "ECDHE-PSK-RC4-SHA",
    "ECDHE_PSK_WITH_3DES_EDE_CBC_SHA": "ECDHE-PSK-3DES-EDE-CBC-SHA",
    "ECDHE_PSK_WITH_AES_128_CBC_SHA": "ECDHE-PSK-AES128-CBC-SHA",
    "ECDHE_PSK_WITH_AES_256_CBC_SHA": "ECDHE-PSK-AES256-CBC-SHA",
    "ECDHE_PSK_WITH_AES_128_CBC_SHA256": "ECDHE-PSK-AES128-CBC-SHA256",
    "ECDHE_PSK_WITH_AES_256_CBC_SHA384": "ECDHE-PSK-AES256-CBC-SHA384",
    "ECDHE_PSK_WITH_NULL_SHA": "ECDHE-PSK-NULL-SHA",
    "ECDHE_PSK_WITH_NULL_SHA256": "ECDHE-PSK-NULL-SHA256",
    "ECDHE_PSK_WITH_NULL_SHA384": "ECDHE-PSK-NULL-SHA384",
    "ECDHE_ECDSA_WITH_CAMELLIA_128_CBC_SHA256": "ECDHE-ECDSA-CAMELLIA128-SHA256",
    "ECDHE_ECDSA_WITH_CAMELLIA_256_CBC_SHA384": "ECDHE-ECDSA-CAMELLIA256-SHA384",
    "ECDH_ECDSA_WITH_CAMELLIA_128_CBC_SHA256": "ECDH-ECDSA-CAMELLIA128-SHA256",
    "ECDH_ECDSA_WITH_CAMELLIA_256_CBC_SHA384": "ECDH-ECDSA-CAMELLIA256-SHA384",
    "ECDHE_RSA_WITH_CAMELLIA_128_CBC_SHA256": "ECDHE-RSA-CAMELLIA128-SHA256",
    "ECDHE_RSA_WITH_CAMELLIA_256_CBC_SHA384": "ECDHE-RSA-CAMELLIA256-SHA384",
    "ECDH_RSA_WITH_CAMELLIA_128_CBC_SHA256": "ECDH-RSA-CAMELLIA128-SHA256",
    "ECDH_RSA_WITH_CAMELLIA_256_CBC_SHA384": "ECDH-RSA-CAMELLIA256-SHA384",
    "PSK_WITH_CAMELLIA_128_CBC_SHA256": "PSK-CAMELLIA128-SHA256",
    "PSK_WITH_CAMELLIA_256_CBC_SHA384": "PSK-CAMELLIA256-SHA384",
    "DHE_PSK_WITH_CAMELLIA_128_CBC_SHA256": "DHE-PSK-CAMELLIA128-SHA256",
    "DHE_PSK_WITH_CAMELLIA_256_CBC_SHA384": "DHE-PSK-CAMELLIA256-SHA384",
    "RSA_PSK_WITH_CAMELLIA_128_CBC_SHA256": "RSA-PSK-CAMELLIA128-SHA256",
    "RSA_PSK_WITH_CAMELLIA_256_CBC_SHA384": "RSA-PSK-CAMELLIA256-SHA384",
    "ECDHE_PSK_WITH_CAMELLIA_128_CBC_SHA256": "ECDHE-PSK-CAMELLIA128-SHA256",
    "ECDHE_PSK_WITH_CAMELLIA_256_CBC_SHA384": "ECDHE-PSK-CAMELLIA256-SHA384",
    "RSA_WITH_AES_128_CCM": "AES128-CCM",
    "RSA_WITH_AES_256_CCM": "AES256-CCM",
    "DHE_RSA_WITH_AES_128_CCM": "DHE-RSA-AES128-CCM",
    "DHE_RSA_WITH_AES_256_CCM": "DHE-RSA-AES256-CCM",
    "RSA_WITH_AES_128_CCM_8": "AES128-CCM8",
    "RSA_WITH_AES_256_CCM_8": "AES256-CCM8",
    "DHE_RSA_WITH_AES_128_CCM_8": "DHE-RSA-AES128-CCM8",
    "DHE_RSA_WITH_AES_256_CCM_8": "DHE-RSA-AES256-CCM8",
    "PSK_WITH_AES_128_CCM": "PSK-AES128-CCM",
    "PSK_WITH_AES_256_CCM": "PSK-AES256-CCM",
    "DHE_PSK_WITH_AES_128_CCM": "DHE-PSK-AES128-CCM",
    "DHE_PSK_WITH_AES_256_CCM": "DHE-PSK-AES256-CCM",
    "PSK_WITH_AES_128_CCM_8": "PSK-AES128-CCM8",
    "PSK_WITH_AES_256_CCM_8": "PSK-AES256-CCM8",
    "PSK_DHE_WITH_AES_128_CCM_8": "DHE-PSK-AES128-CCM8",
    "PSK_DHE_WITH_AES_256_CCM_8": "DHE-PSK-AES256-CCM8",
    "ECDHE_ECDSA_WITH_AES_128_CCM": "ECDHE-ECDSA-AES128-CCM",
    "ECDHE_ECDSA_WITH_AES_256_CCM": "ECDHE-ECDSA-AES256-CCM",
    "ECDHE_ECDSA_WITH_AES_128_CCM_8": "ECDHE-ECDSA-AES128-CCM8",
    "ECDHE_ECDSA_WITH_AES_256_CCM_8": "ECDHE-ECDSA-AES256-CCM8",
    "ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256_OLD": "ECDHE-RSA-CHACHA20-POLY1305-OLD",
    "ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256_OLD": "ECDHE-ECDSA-CHACHA20-POLY1305-OLD",
    "ECDHE_RSA_WITH_CHACHA20_POLY1305_SHA256": "ECDHE-RSA-CHACHA20-POLY1305",
    "ECDHE_ECDSA_WITH_CHACHA20_POLY1305_SHA256": "ECDHE-ECDSA-CHACHA20-POLY1305",
    "DHE_RSA_WITH_CHACHA20_POLY1305_SHA256_OLD": "DHE-RSA-CHACHA20-POLY1305-OLD",
    "GOSTR341094_RSA_WITH_28147_CNT_MD5": "GOST-MD5",
    "RSA_WITH_28147_CNT_GOST94": "GOST-GOST94",
}

# SSLv2 cipher kinds carrying the "SSL_CK_" prefix, given here without it.
_SSL2_SUITES: dict[str, str] = {
    "RC4_128_WITH_MD5": "RC4-MD5",
    "RC4_128_EXPORT40_WITH_MD5": "EXP-RC4-MD5",
    "RC2_128_CBC_WITH_MD5": "RC2-CBC-MD5",
    "RC2_128_CBC_EXPORT40_WITH_MD5": "EXP-RC2-CBC-MD5",
    "IDEA_128_CBC_WITH_MD5": "IDEA-CBC-MD5",
    "DES_64_CBC_WITH_MD5": "DES-CBC-MD5",
    "DES_64_CBC_WITH_SHA": "DES-CBC-SHA",
    "DES_192_EDE3_CBC_WITH_MD5": "DES-CBC3-MD5",
    "DES_192_EDE3_CBC_WITH_SHA": "DES-CBC3-SHA",
    "RC4_64_WITH_MD5": "RC4-64-MD5",
    "DES_64_CFB64_WITH_MD5_1": "DES-CFB-M1",
    "NULL": "NULL",
}

_PREFIXED_GROUPS: tuple[tuple[str, dict[str, str]], ...] = (
    ("TLS_", _TLS_SUITES),
    ("SSL_CK_", _SSL2_SUITES),
)

# Pairs of (IANA name, OpenSSL name), in table order.
IANA_TO_OPENSSL: tuple[tuple[str, str], ...] = tuple(
    (prefix + suffix, openssl)
    for prefix, group in _PREFIXED_GROUPS
    for suffix, openssl in group.items()
)

_INDEX: dict[str, str] = {}
for _iana, _openssl in IANA_TO_OPENSSL:
    _INDEX.setdefault(_iana, _openssl)


def iana_to_openssl(iana: str) -> Optional[str]:
    """Return the OpenSSL name of an IANA cipher suite, or None if unknown."""
    return _INDEX.get(iana)