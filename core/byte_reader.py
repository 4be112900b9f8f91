# core/byte_reader.py

"""Little-endian field readers for binary sources."""
import struct
from typing import BinaryIO

from core.errors import UnexpectedEndOfData

_U32 = struct.Struct('<L')


def _tell(source: BinaryIO):
    try:
        return source.tell()
    except (OSError, AttributeError):
        return None


def read_exact(source: BinaryIO, count: int) -> bytes:
    """Reads exactly ``count`` bytes or raises UnexpectedEndOfData."""
    offset = _tell(source)
    data = source.read(count)
    if len(data) != count:
        raise UnexpectedEndOfData(count, len(data), offset)
    return data


def read_u8(source: BinaryIO) -> int:
    return read_exact(source, 1)[0]


def read_u32_le(source: BinaryIO) -> int:
    return _U32.unpack(read_exact(source, 4))[0]


def read_nul_terminated(source: BinaryIO) -> bytes:
    """Reads bytes up to (and consuming) a NUL byte; the NUL is not returned."""
    offset = _tell(source)
    chars = bytearray()
    while (char := source.read(1)) != b'\x00':
        if not char:
            raise UnexpectedEndOfData(len(chars) + 1, len(chars), offset)
        chars.extend(char)
    return bytes(chars)


def decode_legacy_text(data: bytes) -> str:
    """Maps every byte to the code point of the same value."""
    return bytes(data).decode('latin-1')

