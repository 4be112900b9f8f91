# core/rez_header.py

"""
REZ header decoding.

The header starts with two text lines (file type and user title) framed by
CR/LF-like control bytes, followed by a marker byte that selects one of the
historical layouts:

    0x1A  version 1, or version 2 after three filler bytes
    0x2A  "encoded" header: a head/tail byte pair and a decimal token, each
          stored twice (the second copy XOR-transformed) as a self-check

Every layout ends with the same nine u32 fields and the is_sorted flag.
"""
import logging
import re
from typing import BinaryIO, Callable, Dict

from core.byte_reader import decode_legacy_text, read_exact, read_u8, read_u32_le
from core.data_structures import ArchiveHeader, HeaderVariant
from core.errors import (
    EncodeValueMismatch, InvalidControlByte, InvalidDetectHead, InvalidDetectTail,
    InvalidEncodeInteger, InvalidEncodeUtf8, InvalidVersion,
)

logger = logging.getLogger(__name__)

HEAD_TAIL_XOR = 0x11
ENCODE_VALUE_XOR = 0x016B4423
TEXT_FIELD_SIZE = 60
ENCODE_TOKEN_SIZE = 32

# Accepted values per control byte index; older writers used the second one.
CONTROL_BYTES = (
    (0x0D, ord('&')),
    (0x0A, ord('#')),
    (0x0D, ord('!')),
    (0x0A, ord('"')),
    (0x0D, ord('%')),
    (0x0A, ord("'")),
    (HeaderVariant.EOF_MARKER, HeaderVariant.ENCODED),
)

_DECIMAL_U32 = re.compile(r'\+?[0-9]+')


def _check_control_bytes(data: bytes, first_index: int) -> None:
    for offset, value in enumerate(data):
        index = first_index + offset
        expected = CONTROL_BYTES[index]
        if value not in expected:
            raise InvalidControlByte(index, [int(b) for b in expected], value)


def _read_text_field(source: BinaryIO) -> str:
    return decode_legacy_text(read_exact(source, TEXT_FIELD_SIZE).rstrip(b" "))


def _parse_encode_token(raw: bytes, detection_value: bool) -> int:
    token = raw.rstrip(b"\x00")
    try:
        text = token.decode('utf-8')
    except UnicodeDecodeError:
        raise InvalidEncodeUtf8(detection_value, token) from None
    if not _DECIMAL_U32.fullmatch(text):
        raise InvalidEncodeInteger(detection_value, text)
    value = int(text)
    if value > 0xFFFFFFFF:
        raise InvalidEncodeInteger(detection_value, text)
    return value


def _read_eof_marker_version(source: BinaryIO) -> int:
    version = read_u32_le(source)
    if version == 1:
        return version

    # Version 2 carries three filler bytes before the real version field.
    read_exact(source, 3)
    version = read_u32_le(source)
    if version != 2:
        raise InvalidVersion(2, version)
    return version


def _read_encoded_version(source: BinaryIO) -> int:
    head = read_u8(source)
    encode_raw = read_exact(source, ENCODE_TOKEN_SIZE)
    tail = read_u8(source)
    detect_head = read_u8(source)
    if detect_head != head ^ HEAD_TAIL_XOR:
        raise InvalidDetectHead(head, detect_head)

    encode_value = _parse_encode_token(encode_raw, detection_value=False)
    expected_value = encode_value ^ ENCODE_VALUE_XOR

    detect_encode_value = _parse_encode_token(read_exact(source, ENCODE_TOKEN_SIZE), detection_value=True)
    if detect_encode_value != expected_value:
        raise EncodeValueMismatch(encode_value, expected_value, detect_encode_value)

    detect_tail = read_u8(source)
    if detect_tail != tail ^ HEAD_TAIL_XOR:
        raise InvalidDetectTail(tail, detect_tail)

    version = read_u32_le(source)
    if version != 1:
        raise InvalidVersion(1, version)
    return version


VERSION_READERS: Dict[HeaderVariant, Callable[[BinaryIO], int]] = {
    HeaderVariant.EOF_MARKER: _read_eof_marker_version,
    HeaderVariant.ENCODED: _read_encoded_version,
}


def read_archive_header(source: BinaryIO) -> ArchiveHeader:
    """
    Reads the REZ header from the current position of ``source``.

    Leaves the source positioned right after the header. Raises a
    RezFormatError subclass on the first invalid field and
    UnexpectedEndOfData if the source is too short.
    """
    _check_control_bytes(read_exact(source, 2), 0)
    file_type = _read_text_field(source)

    _check_control_bytes(read_exact(source, 2), 2)
    user_title = _read_text_field(source)

    selector = read_exact(source, 3)
    _check_control_bytes(selector, 4)

    variant = HeaderVariant(selector[2])
    version = VERSION_READERS[variant](source)
    logger.debug("[REZ] Header variant %s, version %d", variant.name, version)

    (root_dir_position, root_dir_size, root_dir_time, next_write_position, time,
     largest_key_array, largest_dir_name_size, largest_rez_name_size,
     largest_comment_size) = (read_u32_le(source) for _ in range(9))
    is_sorted = read_u8(source) != 0x00

    return ArchiveHeader(
        file_type=file_type,
        user_title=user_title,
        version=version,
        variant=variant,
        root_dir_position=root_dir_position,
        root_dir_size=root_dir_size,
        root_dir_time=root_dir_time,
        next_write_position=next_write_position,
        time=time,
        largest_key_array=largest_key_array,
        largest_dir_name_size=largest_dir_name_size,
        largest_rez_name_size=largest_rez_name_size,
        largest_comment_size=largest_comment_size,
        is_sorted=is_sorted,
    )
