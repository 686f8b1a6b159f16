"""Bounded file content fetch over SSH."""

import logging

from vps_console.errors import FileReadError, RemoteCommandError
from vps_console.models import FileContent, HostCredential
from vps_console.protocols import CommandTransport
from vps_console.utils.mime import get_mime_type, is_binary_path
from vps_console.utils.shell import quote_path
from vps_console.utils.validation import normalize_remote_path

logger = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 1_048_576  # 1MB


def build_read_command(path: str, max_size: int) -> str:
    """Remote command for a bounded read.

    Images are base64-encoded remotely with wrapping disabled; everything
    else is read as text, never more than ``max_size`` bytes.
    """
    if is_binary_path(path):
        return f"base64 -w 0 {quote_path(path)}"
    return f"head -c {max_size} {quote_path(path)}"


def raw_byte_count(text: str) -> int:
    """Approximate size in bytes of remote output decoded with ``errors="replace"``.

    Each U+FFFD stands for one undecodable byte rather than the three it
    takes once re-encoded. A literal U+FFFD in the file is undercounted.
    """
    replaced = text.count("\ufffd")
    return len(text.encode("utf-8")) - 2 * replaced


async def read_file(
    transport: CommandTransport,
    credential: HostCredential,
    path: str,
    max_size: int = DEFAULT_MAX_SIZE,
) -> FileContent:
    """Read a remote file.

    Returns:
        FileContent; for binary types ``content`` is base64 text.

    Raises:
        ConfigurationError: If the credential is incomplete
        TransportError: If the host cannot be reached
        FileReadError: If the remote read fails
    """
    path = normalize_remote_path(path)
    is_binary = is_binary_path(path)

    try:
        output = await transport.run(
            credential, build_read_command(path, max_size), check=True
        )
    except RemoteCommandError as e:
        reason = e.output.strip() or f"exit status {e.exit_status}"
        raise FileReadError(path, reason) from e

    if is_binary:
        content = output.strip()
        truncated = False
    else:
        content = output
        truncated = raw_byte_count(output) >= max_size

    logger.debug(
        "Read %s on %s (%d chars, binary=%s, truncated=%s)",
        path,
        credential.id,
        len(content),
        is_binary,
        truncated,
    )
    return FileContent(
        path=path,
        content=content,
        is_binary=is_binary,
        mime_type=get_mime_type(path),
        truncated=truncated,
    )
