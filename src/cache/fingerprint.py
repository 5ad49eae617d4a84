# src/cache/fingerprint.py - v1
"""Content fingerprints for static files.

A fingerprint is the CRC-64 of the file bytes (ECMA-182 polynomial,
reflected, init and final xor all-ones; the XZ variant) rendered as 16
uppercase hex digits. Files are hashed in fixed-size reads so memory use
does not depend on file size.
"""

from __future__ import annotations

from pathlib import Path

from crc import Configuration, TableBasedRegister

FILE_RESPONSE_CHUNK_SIZE = 4096

CRC64_ECMA = Configuration(
    width=64,
    polynomial=0x42F0E1EBA9EA3693,
    init_value=0xFFFFFFFFFFFFFFFF,
    final_xor_value=0xFFFFFFFFFFFFFFFF,
    reverse_input=True,
    reverse_output=True,
)

FINGERPRINT_WIDTH = 16


def format_fingerprint(value: int) -> str:
    """Render a 64-bit checksum as fixed-width uppercase hex."""
    return f"{value:0{FINGERPRINT_WIDTH}X}"


def _new_register() -> TableBasedRegister:
    register = TableBasedRegister(CRC64_ECMA)
    register.init()
    return register


def fingerprint_bytes(data: bytes) -> str:
    """Fingerprint an in-memory buffer."""
    register = _new_register()
    register.update(data)
    return format_fingerprint(register.digest())


def fingerprint_file(
    path: str | Path, chunk_size: int = FILE_RESPONSE_CHUNK_SIZE
) -> str:
    """Fingerprint a file by streaming it in ``chunk_size`` reads.

    Args:
        path: File to hash.
        chunk_size: Bytes per read.

    Returns:
        16-character uppercase hex fingerprint.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    register = _new_register()
    with open(path, "rb") as handle:
        while True:
            chunk = handle.read(chunk_size)
            if not chunk:
                break
            register.update(chunk)
    return format_fingerprint(register.digest())
