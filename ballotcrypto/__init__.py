"""GF(2^8) arithmetic, AES tables and key schedule, SHA-256/384/512 and filename-safe Base64."""

__version__ = "0.1.0"