"""Core data structures for the REZ archive reader."""
from enum import IntEnum
from typing import Iterator, NamedTuple, Tuple, Union


class HeaderVariant(IntEnum):
    """Marker byte that selects the header layout."""
    EOF_MARKER = 0x1A
    ENCODED = 0x2A


class EntryType(IntEnum):
    RESOURCE = 0
    DIRECTORY = 1


class ArchiveHeader(NamedTuple):
    """Archive-level metadata read from the start of a REZ file."""
    file_type: str
    user_title: str
    version: int
    variant: HeaderVariant
    root_dir_position: int
    root_dir_size: int
    root_dir_time: int
    next_write_position: int
    time: int
    largest_key_array: int
    largest_dir_name_size: int
    largest_rez_name_size: int
    largest_comment_size: int
    is_sorted: bool


class EntryHeader(NamedTuple):
    """The 16-byte prologue of every directory record."""
    entry_type: int
    position: int
    size: int
    time: int


class Resource(NamedTuple):
    """A leaf entry whose payload is ``header.size`` bytes at ``header.position``."""
    header: EntryHeader
    id: int
    extension: str
    name: str
    description: str
    keys: Tuple[int, ...] = ()

    @property
    def path_name(self) -> str:
        """Path component used for listing and filter matching; always ``name.extension``."""
        return f"{self.name}.{self.extension}"

    @property
    def file_name(self) -> str:
        """Name of the extracted file; an empty extension leaves no trailing dot."""
        if not self.extension:
            return self.name
        return self.path_name


class Directory(NamedTuple):
    """A named entry owning the entries of the block it points at."""
    header: EntryHeader
    name: str
    entries: Tuple['Entry', ...] = ()

    @property
    def path_name(self) -> str:
        return self.name

    @property
    def file_name(self) -> str:
        return self.name


Entry = Union[Resource, Directory]


def walk_entries(entries, base_path: str = "") -> Iterator[Tuple[str, Entry]]:
    """Yields (logical path, entry) depth-first, in on-disk order."""
    for entry in entries:
        path = f"{base_path}/{entry.path_name}" if base_path else entry.path_name
        yield path, entry
        if isinstance(entry, Directory):
            yield from walk_entries(entry.entries, path)


class ArchiveStats(NamedTuple):
    resources: int
    directories: int
    total_size: int


class Archive(NamedTuple):
    """The decoded REZ file."""
    file_type: str
    user_title: str
    version: int
    time: int
    root_entries: Tuple[Entry, ...]

    def walk(self) -> Iterator[Tuple[str, Entry]]:
        return walk_entries(self.root_entries)

    def stats(self) -> ArchiveStats:
        resources = directories = total_size = 0
        for _, entry in self.walk():
            if isinstance(entry, Directory):
                directories += 1
            else:
                resources += 1
                total_size += entry.header.size
        return ArchiveStats(resources, directories, total_size)


class ExtractionSummary(NamedTuple):
    """Counts reported by an extraction run."""
    extracted: int
    skipped: int
    bytes_written: int
