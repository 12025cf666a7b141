"""
Program File Checksum
=====================

The trailing checksum of a .8xp file is the low 16 bits of the unsigned
sum of every byte from the start of the variable entry up to the end of
the payload:

    checksum = sum(file[55 : 74 + L]) & 0xFFFF

The 55-byte program header is not covered.
"""

from tibasic.container.records import CHECKSUM_SIZE, HEADER_SIZE


def calculate_checksum(data: bytes) -> int:
    """
    Sum bytes modulo 2**16.

    Args:
        data: Variable entry, length prefix and payload bytes

    Returns:
        16-bit checksum value (0x0000 - 0xFFFF)

    Example:
        >>> calculate_checksum(bytes([0xFF] * 300))
        10964
    """
    return sum(data) & 0xFFFF


def calculate_file_checksum(file_data: bytes) -> int:
    """
    Compute the checksum of a complete program file.

    The stored checksum (last two bytes) is excluded.
    """
    return calculate_checksum(file_data[HEADER_SIZE:len(file_data) - CHECKSUM_SIZE])


def verify_checksum(file_data: bytes) -> bool:
    """
    Check the stored checksum of a complete program file.

    Returns:
        True if the last two bytes match the computed checksum
    """
    if len(file_data) < HEADER_SIZE + CHECKSUM_SIZE:
        return False

    stored = int.from_bytes(file_data[-CHECKSUM_SIZE:], "little")
    return stored == calculate_file_checksum(file_data)
