# core/errors.py

"""Exceptions raised while reading and extracting REZ archives."""
from typing import Sequence


def _hex_byte(value: int) -> str:
    return f"0x{value:02X}"


class RezError(Exception):
    """Base class for every error raised by the REZ reader."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnexpectedEndOfData(RezError, EOFError):
    """The source ended in the middle of a field or block."""

    def __init__(self, expected: int, obtained: int, offset=None):
        self.expected = expected
        self.obtained = obtained
        self.offset = offset
        where = f" at offset {offset}" if offset is not None else ""
        super().__init__(f"unexpected end of data{where} (wanted {expected} bytes, got {obtained})")


class RezFormatError(RezError):
    """The bytes were read but do not follow the REZ layout."""
    pass


class InvalidControlByte(RezFormatError):
    def __init__(self, index: int, expected_one_of: Sequence[int], obtained: int):
        self.index = index
        self.expected_one_of = tuple(expected_one_of)
        self.obtained = obtained
        expected = ", ".join(_hex_byte(b) for b in self.expected_one_of)
        super().__init__(
            f"invalid control byte {index} (expected one of [{expected}], obtained {_hex_byte(obtained)})"
        )


class InvalidVersion(RezFormatError):
    def __init__(self, expected: int, obtained: int):
        self.expected = expected
        self.obtained = obtained
        super().__init__(f"invalid version {obtained} (expected {expected})")


class InvalidDetectHead(RezFormatError):
    def __init__(self, head: int, detect_head: int):
        self.head = head
        self.detect_head = detect_head
        super().__init__(
            f"invalid DetectHead (head: {_hex_byte(head)}, detect_head: {_hex_byte(detect_head)}, "
            f"xor: {_hex_byte(head ^ 0x11)})"
        )


class InvalidDetectTail(RezFormatError):
    def __init__(self, tail: int, detect_tail: int):
        self.tail = tail
        self.detect_tail = detect_tail
        super().__init__(
            f"invalid DetectTail (tail: {_hex_byte(tail)}, detect_tail: {_hex_byte(detect_tail)}, "
            f"xor: {_hex_byte(tail ^ 0x11)})"
        )


class InvalidEncodeUtf8(RezFormatError):
    def __init__(self, detection_value: bool, raw: bytes):
        self.detection_value = detection_value
        self.raw = bytes(raw)
        label = "encode detection" if detection_value else "encode"
        super().__init__(f"invalid \"{label}\" value UTF-8 bytes: {self.raw!r}")


class InvalidEncodeInteger(RezFormatError):
    def __init__(self, detection_value: bool, text: str):
        self.detection_value = detection_value
        self.text = text
        label = "encode detection" if detection_value else "encode"
        super().__init__(f"invalid \"{label}\" value integer: {text!r}")


class EncodeValueMismatch(RezFormatError):
    def __init__(self, encode_value: int, expected_value: int, detect_encode_value: int):
        self.encode_value = encode_value
        self.expected_value = expected_value
        self.detect_encode_value = detect_encode_value
        super().__init__(
            f"encode value mismatch (encode value 0x{encode_value:08X}, "
            f"xor'ed encode value 0x{expected_value:08X}, "
            f"detect encode value 0x{detect_encode_value:08X})"
        )


class UnknownEntryType(RezFormatError):
    def __init__(self, type_code: int):
        self.type_code = type_code
        super().__init__(f"cannot handle entries with type code {type_code}")


class DirectoryTooDeep(RezFormatError):
    def __init__(self, depth: int, max_depth: int):
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(f"directory nesting depth {depth} exceeds the limit of {max_depth}")


class UnsafeEntryName(RezError):
    """An entry name cannot be used as a path component on disk."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"refusing to extract entry with unsafe name {name!r}")
