# core/extraction.py

"""Copying resources out of a REZ file onto disk."""
import logging
from pathlib import Path
from typing import BinaryIO, Iterable, Optional

from tqdm import tqdm

from core.byte_reader import read_exact
from core.data_structures import Directory, Entry, ExtractionSummary, Resource, walk_entries
from core.filters import ResourceFilter
from utils.file_utils import safe_component

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 4 * 1024 * 1024


def copy_resource_bytes(source: BinaryIO, position: int, size: int, destination: Path,
                        chunk_size: int = DEFAULT_CHUNK_SIZE, progress: Optional[tqdm] = None) -> int:
    """
    Streams ``size`` bytes starting at ``position`` into a new file at ``destination``.

    At most ``chunk_size`` bytes are held in memory at a time. Returns the
    number of bytes written. The data goes to a ``.tmp`` sibling first and is
    renamed into place only once complete, so a failed copy leaves no
    truncated file behind.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    destination = Path(destination)
    tmp = destination.with_name(destination.name + ".tmp")
    source.seek(position)
    remaining = size
    try:
        with tmp.open('wb') as output_file:
            while remaining > 0:
                chunk = read_exact(source, min(remaining, chunk_size))
                output_file.write(chunk)
                remaining -= len(chunk)
                if progress is not None:
                    progress.update(len(chunk))
        tmp.replace(destination)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
    return size


class Extractor:
    """Walks a decoded tree and writes the selected resources below ``output_dir``."""

    def __init__(self, source: BinaryIO, output_dir: Path, resource_filter: Optional[ResourceFilter] = None,
                 chunk_size: int = DEFAULT_CHUNK_SIZE, progress: Optional[tqdm] = None):
        self.source = source
        self.output_dir = Path(output_dir)
        self.resource_filter = resource_filter if resource_filter is not None else ResourceFilter()
        self.chunk_size = chunk_size
        self.progress = progress
        self.extracted = 0
        self.skipped = 0
        self.bytes_written = 0

    def run(self, entries: Iterable[Entry]) -> ExtractionSummary:
        self._extract_recursive(entries, "", self.output_dir)
        return ExtractionSummary(self.extracted, self.skipped, self.bytes_written)

    def _extract_recursive(self, entries: Iterable[Entry], entry_base_path: str, extract_base_path: Path):
        for entry in entries:
            entry_path = f"{entry_base_path}/{entry.path_name}" if entry_base_path else entry.path_name

            if isinstance(entry, Directory):
                sub_path = extract_base_path / safe_component(entry.name)
                self._extract_recursive(entry.entries, entry_path, sub_path)
                continue

            if not self.resource_filter.matches(entry_path):
                self.skipped += 1
                logger.debug("[EXTRACT] Skipping %s (no filter matched)", entry_path)
                continue

            extract_file_path = extract_base_path / safe_component(entry.file_name)
            logger.info("extracting %s as %s", entry_path, extract_file_path)

            extract_base_path.mkdir(parents=True, exist_ok=True)
            self.bytes_written += copy_resource_bytes(
                self.source, entry.header.position, entry.header.size, extract_file_path,
                chunk_size=self.chunk_size, progress=self.progress,
            )
            self.extracted += 1


def selected_size(entries: Iterable[Entry], resource_filter: ResourceFilter) -> int:
    """Total payload bytes of the resources the filter would extract."""
    return sum(entry.header.size for path, entry in walk_entries(entries)
               if isinstance(entry, Resource) and resource_filter.matches(path))


def extract_entries(source: BinaryIO, entries: Iterable[Entry], output_dir: Path,
                    resource_filter: Optional[ResourceFilter] = None, chunk_size: int = DEFAULT_CHUNK_SIZE,
                    show_progress: bool = False) -> ExtractionSummary:
    """Extracts every resource in ``entries`` that passes ``resource_filter``."""
    entries = tuple(entries)
    if resource_filter is None:
        resource_filter = ResourceFilter()
    if not show_progress:
        return Extractor(source, output_dir, resource_filter, chunk_size).run(entries)

    total = selected_size(entries, resource_filter)
    with tqdm(total=total, unit='B', unit_scale=True, unit_divisor=1024, desc="Extracting") as progress:
        return Extractor(source, output_dir, resource_filter, chunk_size, progress).run(entries)
