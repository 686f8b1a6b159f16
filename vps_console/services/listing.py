"""Directory listing over SSH, parsed into FileEntry records.

The remote side runs ``ls -lA --time-style=long-iso`` so every line has the
same column layout::

    drwxr-xr-x 2 root root 4096 2024-12-31 23:59 name with spaces

Columns are split on whitespace: permissions, link count, owner, group,
size, date, time, then the name (everything from the eighth token on).
"""

import logging

from vps_console.errors import RemoteCommandError, TransportError
from vps_console.models import DirectoryListing, FileEntry, FileKind, HostCredential
from vps_console.protocols import CommandTransport
from vps_console.utils.shell import quote_path
from vps_console.utils.validation import join_remote_path, normalize_remote_path

logger = logging.getLogger(__name__)

LISTING_COMMAND = "ls -lA --time-style=long-iso"
MIN_COLUMNS = 8
SYMLINK_ARROW = " -> "

# ls exit status for "minor problems": the listing itself is usable
LS_MINOR_PROBLEMS = 1


def build_listing_command(path: str) -> str:
    return f"{LISTING_COMMAND} {quote_path(path)}"


def parse_listing_line(line: str, parent: str) -> FileEntry | None:
    """Parse one long-format line.

    Returns:
        FileEntry, or None for lines that are blank, malformed, ``.``/``..``,
        or diagnostics emitted by ``ls`` itself
    """
    line = line.strip()
    if not line or line.startswith("ls:"):
        return None

    parts = line.split()
    # Device files print "major, minor" in the size column
    if len(parts) > 5 and parts[4].endswith(","):
        parts = parts[:4] + [parts[4] + parts[5]] + parts[6:]
    if len(parts) < MIN_COLUMNS:
        return None

    permissions = parts[0]
    owner = parts[2]
    date, time_of_day = parts[5], parts[6]
    # Names may contain spaces; runs of spaces collapse to one
    name = " ".join(parts[7:])

    kind = FileKind.DIRECTORY if permissions.startswith("d") else FileKind.FILE
    if permissions.startswith("l") and SYMLINK_ARROW in name:
        name = name.split(SYMLINK_ARROW, 1)[0]

    if name in (".", ".."):
        return None

    size: int | None = None
    if kind is FileKind.FILE:
        try:
            size = int(parts[4])
        except ValueError:
            size = None

    return FileEntry(
        name=name,
        kind=kind,
        size=size,
        modified=f"{date}T{time_of_day}",
        permissions=permissions,
        owner=owner,
        path=join_remote_path(parent, name),
    )


def parse_listing(output: str, parent: str) -> list[FileEntry]:
    """Parse ``ls -lA --time-style=long-iso`` output.

    A leading ``total N`` line is skipped; malformed lines are dropped
    without aborting the rest of the listing. Order is preserved.

    Args:
        output: Raw listing text
        parent: Directory that was listed

    Returns:
        Entries in listing order
    """
    lines = output.splitlines()
    if lines and lines[0].strip().startswith("total"):
        lines = lines[1:]

    entries = []
    for line in lines:
        entry = parse_listing_line(line, parent)
        if entry is not None:
            entries.append(entry)
    return entries


async def list_directory(
    transport: CommandTransport,
    credential: HostCredential,
    path: str,
) -> DirectoryListing:
    """List a remote directory.

    Remote failures do not raise: they produce a listing with ``error`` set
    so callers can still render an empty directory.

    Raises:
        ConfigurationError: If the credential is incomplete
    """
    path = normalize_remote_path(path)

    try:
        output = await transport.run(
            credential, build_listing_command(path), check=True
        )
    except RemoteCommandError as e:
        logger.warning("Listing %s on %s failed: %s", path, credential.id, e)
        entries = []
        if e.exit_status == LS_MINOR_PROBLEMS:
            entries = parse_listing(e.output, path)
        return DirectoryListing(path=path, entries=entries, error=str(e))
    except TransportError as e:
        logger.warning("Listing %s on %s failed: %s", path, credential.id, e)
        return DirectoryListing(path=path, error=str(e))

    entries = parse_listing(output, path)
    logger.debug("Listed %d entries in %s on %s", len(entries), path, credential.id)
    return DirectoryListing(path=path, entries=entries)
