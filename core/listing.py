# core/listing.py

"""Text and JSON renderings of a decoded archive tree."""
from typing import Any, Dict, Iterable, Iterator, List

from core.data_structures import Archive, Directory, Entry, Resource


def format_entry(entry: Entry) -> str:
    """One listing line for ``entry``, without indentation."""
    if isinstance(entry, Directory):
        return f"{entry.name} ({entry.header.time})/"

    details = str(entry.id)
    if entry.description:
        details += f", {entry.description}"
    header = entry.header
    return f"{entry.name}.{entry.extension} [{details}] ({header.time}, {header.position}+{header.size} bytes)"


def iter_listing_lines(entries: Iterable[Entry], indent: int = 0) -> Iterator[str]:
    """Yields the indented listing of ``entries``, children right after their directory."""
    for entry in entries:
        yield "  " * indent + format_entry(entry)
        if isinstance(entry, Directory):
            yield from iter_listing_lines(entry.entries, indent + 1)


def entry_to_dict(entry: Entry) -> Dict[str, Any]:
    header = entry.header
    data: Dict[str, Any] = {
        "name": entry.name,
        "time": header.time,
        "position": header.position,
        "size": header.size,
    }
    if isinstance(entry, Resource):
        data.update({
            "type": "resource",
            "id": entry.id,
            "extension": entry.extension,
            "description": entry.description,
            "keys": list(entry.keys),
        })
    else:
        data["type"] = "directory"
        data["entries"] = entries_to_list(entry.entries)
    return data


def entries_to_list(entries: Iterable[Entry]) -> List[Dict[str, Any]]:
    return [entry_to_dict(entry) for entry in entries]


def archive_to_dict(archive: Archive) -> Dict[str, Any]:
    return {
        "file_type": archive.file_type,
        "user_title": archive.user_title,
        "version": archive.version,
        "time": archive.time,
        "entries": entries_to_list(archive.root_entries),
    }
