# core/rez_file.py

"""Directory-block decoding and whole-archive reading."""
import io
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, List, Optional, Tuple

from core.byte_reader import (
    decode_legacy_text, read_exact, read_nul_terminated, read_u32_le,
)
from core.data_structures import Archive, Directory, Entry, EntryHeader, EntryType, Resource
from core.errors import DirectoryTooDeep, UnexpectedEndOfData, UnknownEntryType
from core.rez_header import read_archive_header

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64


def _read_entry_header(block: BinaryIO) -> Optional[EntryHeader]:
    """Returns None when the block is exhausted exactly at a record boundary."""
    first = block.read(4)
    if not first:
        return None
    if len(first) < 4:
        raise UnexpectedEndOfData(4, len(first), block.tell() - len(first))
    entry_type = int.from_bytes(first, 'little')
    position = read_u32_le(block)
    size = read_u32_le(block)
    time = read_u32_le(block)
    if entry_type in (EntryType.RESOURCE, EntryType.DIRECTORY):
        entry_type = EntryType(entry_type)
    return EntryHeader(entry_type, position, size, time)


def _read_resource(block: BinaryIO, header: EntryHeader) -> Resource:
    resource_id = read_u32_le(block)
    # Stored as a little-endian four-character code, e.g. b"TXT\x00" for "TXT".
    extension_raw = read_exact(block, 4)[::-1].lstrip(b"\x00")
    num_keys = read_u32_le(block)
    name = decode_legacy_text(read_nul_terminated(block))
    description = decode_legacy_text(read_nul_terminated(block))
    keys = tuple(read_u32_le(block) for _ in range(num_keys))
    return Resource(
        header=header,
        id=resource_id,
        extension=decode_legacy_text(extension_raw),
        name=name,
        description=description,
        keys=keys,
    )


def read_directory_block(source: BinaryIO, position: int, size: int,
                         depth: int = 0, max_depth: int = DEFAULT_MAX_DEPTH) -> List[Entry]:
    """
    Decodes the entries stored in ``size`` bytes at ``position``.

    The block is copied into its own buffer first so record fields can never
    run past the block boundary. Nested directories are read from ``source``
    at their own offsets.
    """
    if depth > max_depth:
        raise DirectoryTooDeep(depth, max_depth)

    source.seek(position)
    block = io.BytesIO(read_exact(source, size))
    entries: List[Entry] = []

    while (header := _read_entry_header(block)) is not None:
        if header.entry_type == EntryType.DIRECTORY:
            name = decode_legacy_text(read_nul_terminated(block))

            saved_position = source.tell()
            sub_entries = read_directory_block(source, header.position, header.size, depth + 1, max_depth)
            source.seek(saved_position)

            entries.append(Directory(header=header, name=name, entries=tuple(sub_entries)))
        elif header.entry_type == EntryType.RESOURCE:
            entries.append(_read_resource(block, header))
        else:
            raise UnknownEntryType(header.entry_type)

    logger.debug("[REZ] Block at %d (%d bytes, depth %d): %d entries", position, size, depth, len(entries))
    return entries


def decode_archive(source: BinaryIO, max_depth: int = DEFAULT_MAX_DEPTH) -> Archive:
    """Reads the header and the full directory tree from ``source``."""
    source.seek(0)
    header = read_archive_header(source)
    logger.debug("[REZ] Root directory at %d (%d bytes)", header.root_dir_position, header.root_dir_size)

    root_entries = read_directory_block(source, header.root_dir_position, header.root_dir_size,
                                        max_depth=max_depth)
    return Archive(
        file_type=header.file_type,
        user_title=header.user_title,
        version=header.version,
        time=header.time,
        root_entries=tuple(root_entries),
    )


@contextmanager
def open_archive(rez_path: Path, max_depth: int = DEFAULT_MAX_DEPTH) -> Iterator[Tuple[BinaryIO, Archive]]:
    """Opens ``rez_path`` and yields the open handle together with its decoded tree."""
    logger.info("[REZ] Loading REZ file: %s", rez_path)
    with Path(rez_path).open('rb') as handle:
        archive = decode_archive(handle, max_depth=max_depth)
        stats = archive.stats()
        logger.info("[REZ] %d resources in %d directories", stats.resources, stats.directories)
        yield handle, archive
