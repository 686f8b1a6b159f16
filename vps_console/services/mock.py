"""In-memory remote host client for development and demos.

Serves a small fixed file tree and canned command output, with the same
calling contract as the SSH client: blank commands are no-ops, ``cd`` moves
the returned working directory, unknown directories leave it unchanged.
"""

import base64
import logging
import posixpath
import shlex
from datetime import datetime

from vps_console.config.registry import HostRegistry
from vps_console.errors import FileReadError
from vps_console.models import (
    DirectoryListing,
    ExecutionResult,
    FileContent,
    FileEntry,
    FileKind,
    HostCredential,
)
from vps_console.utils.mime import get_mime_type, is_binary_path
from vps_console.utils.validation import join_remote_path, normalize_remote_path

logger = logging.getLogger(__name__)

MOCK_HOME = "/root"
MOCK_HOST = HostCredential(
    id="mock-1",
    name="Mock VPS",
    host="vps-server.local",
    username="root",
)

# 1x1 transparent PNG
_PIXEL_PNG = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8z8BQDwAEhQGAhKmMIQAAAABJRU5ErkJggg=="
)

# directory -> [(name, is_dir, size, modified, permissions, owner)]
_TREE: dict[str, list[tuple[str, bool, int, str, str, str]]] = {
    "/": [
        ("bin", True, 4096, "2025-01-15T10:30", "drwxr-xr-x", "root"),
        ("etc", True, 4096, "2025-01-20T14:45", "drwxr-xr-x", "root"),
        ("home", True, 4096, "2025-01-28T09:12", "drwxr-xr-x", "root"),
        ("root", True, 4096, "2025-01-28T09:12", "drwx------", "root"),
        ("tmp", True, 4096, "2025-02-02T08:00", "drwxrwxrwt", "root"),
        ("var", True, 4096, "2025-02-01T16:20", "drwxr-xr-x", "root"),
    ],
    "/bin": [],
    "/etc": [
        ("hosts", False, 221, "2025-01-10T11:00", "-rw-r--r--", "root"),
        ("nginx", True, 4096, "2025-01-20T14:45", "drwxr-xr-x", "root"),
    ],
    "/etc/nginx": [
        ("nginx.conf", False, 1482, "2025-01-20T14:45", "-rw-r--r--", "root"),
    ],
    "/home": [
        ("admin", True, 4096, "2025-02-01T10:00", "drwxr-xr-x", "admin"),
    ],
    "/home/admin": [
        (".bashrc", False, 3771, "2025-01-15T12:00", "-rw-r--r--", "admin"),
        ("deploy.sh", False, 2048, "2025-02-02T15:30", "-rwxr-xr-x", "admin"),
        ("logo.png", False, 68, "2025-02-02T15:31", "-rw-r--r--", "admin"),
        ("release notes.txt", False, 120, "2025-02-03T09:00", "-rw-r--r--", "admin"),
    ],
    "/root": [],
    "/tmp": [],
    "/var": [
        ("log", True, 4096, "2025-02-01T16:20", "drwxr-xr-x", "root"),
        ("www", True, 4096, "2025-02-01T16:20", "drwxr-xr-x", "www-data"),
    ],
    "/var/log": [
        ("syslog", False, 48213, "2025-02-03T10:45", "-rw-r-----", "syslog"),
    ],
    "/var/www": [],
}

_CONTENTS: dict[str, str] = {
    "/etc/hosts": "127.0.0.1\tlocalhost\n127.0.1.1\tvps-server\n",
    "/home/admin/.bashrc": (
        "# .bashrc\n\n# User specific aliases and functions\n"
        "alias ll='ls -al'\nalias l='ls -CF'\n\n"
        "# Source global definitions\nif [ -f /etc/bashrc ]; then\n\t. /etc/bashrc\nfi\n"
    ),
    "/home/admin/deploy.sh": (
        '#!/bin/bash\n\necho "Starting deployment..."\nnpm install\n'
        'npm run build\npm2 restart all\necho "Deployment finished!"\n'
    ),
    "/home/admin/logo.png": _PIXEL_PNG,
}

_CANNED_OUTPUT: dict[str, str] = {
    "whoami": "root",
    "hostname": "vps-server",
    "uname": "Linux",
    "uname -a": (
        "Linux vps-server 5.15.0-generic #1 SMP Tue Jan 28 10:00:00 UTC 2025 "
        "x86_64 x86_64 x86_64 GNU/Linux"
    ),
    "df -h": (
        "Filesystem      Size  Used Avail Use% Mounted on\n"
        "/dev/sda1        50G  5.0G   45G  10% /\n"
        "tmpfs           8.0G     0  8.0G   0% /dev/shm"
    ),
    "free -h": (
        "              total        used        free      shared  buff/cache   available\n"
        "Mem:           31Gi        18Gi       7.8Gi       250Mi       5.8Gi        13Gi\n"
        "Swap:         4.0Gi       512Mi       3.5Gi"
    ),
    "uptime": " 10:45:32 up 30 days,  4:22,  1 user,  load average: 0.42, 0.38, 0.35",
    "help": (
        "Available commands:\n"
        "  cd, pwd, ls, cat, echo, whoami, hostname, uname, df -h, free -h, uptime, date"
    ),
}


class MockHostClient:
    """Fake remote host client with an in-memory file tree."""

    def __init__(
        self,
        registry: HostRegistry | None = None,
        max_file_size: int = 1_048_576,
    ) -> None:
        """Initialize mock client.

        Args:
            registry: When given, server ids must resolve in it; otherwise
                every id is served by a single fake host
            max_file_size: Text read budget in bytes
        """
        self.registry = registry
        self.max_file_size = max_file_size

    def _check_server(self, server_id: str) -> None:
        if self.registry is not None and len(self.registry) > 0:
            self.registry.require(server_id)

    def list_hosts(self) -> list[HostCredential]:
        if self.registry is not None and len(self.registry) > 0:
            return self.registry.all()
        return [MOCK_HOST]

    async def execute(self, server_id: str, command: str, cwd: str) -> ExecutionResult:
        self._check_server(server_id)
        cwd = normalize_remote_path(cwd)
        if cwd not in _TREE:
            cwd = "/"

        command = command.strip()
        if not command:
            return ExecutionResult(output="", cwd=cwd)

        try:
            argv = shlex.split(command)
        except ValueError as e:
            return ExecutionResult(output=f"bash: syntax error: {e}", cwd=cwd)

        name, args = argv[0], argv[1:]
        if name == "cd":
            return self._cd(args, cwd)
        if name == "pwd":
            return ExecutionResult(output=cwd, cwd=cwd)
        if name == "ls":
            return ExecutionResult(output=self._ls(args, cwd), cwd=cwd)
        if name == "cat":
            return ExecutionResult(output=self._cat(args, cwd), cwd=cwd)
        if name == "echo":
            return ExecutionResult(output=" ".join(args), cwd=cwd)
        if name == "date":
            return ExecutionResult(output=datetime.now().strftime("%a %b %d %H:%M:%S %Y"), cwd=cwd)
        if command in _CANNED_OUTPUT:
            return ExecutionResult(output=_CANNED_OUTPUT[command], cwd=cwd)
        return ExecutionResult(output=f"bash: {name}: command not found", cwd=cwd)

    def _resolve(self, target: str, cwd: str) -> str:
        if target == "~" or target.startswith("~/"):
            target = MOCK_HOME + target[1:]
        if not target.startswith("/"):
            target = posixpath.join(cwd, target)
        return normalize_remote_path(target)

    def _cd(self, args: list[str], cwd: str) -> ExecutionResult:
        target = self._resolve(args[0] if args else "~", cwd)
        if target not in _TREE:
            return ExecutionResult(
                output=f"bash: cd: {args[0]}: No such file or directory",
                cwd=cwd,
            )
        return ExecutionResult(output="", cwd=target)

    def _ls(self, args: list[str], cwd: str) -> str:
        paths = [a for a in args if not a.startswith("-")]
        target = self._resolve(paths[0], cwd) if paths else cwd
        if target not in _TREE:
            return f"ls: cannot access '{paths[0]}': No such file or directory"
        show_hidden = any(a.startswith("-") and "a" in a for a in args)
        names = [
            row[0] for row in _TREE[target] if show_hidden or not row[0].startswith(".")
        ]
        return "   ".join(names)

    def _cat(self, args: list[str], cwd: str) -> str:
        chunks = []
        for arg in args:
            path = self._resolve(arg, cwd)
            if path in _TREE:
                chunks.append(f"cat: {arg}: Is a directory")
            elif self._find(path) is None:
                chunks.append(f"cat: {arg}: No such file or directory")
            else:
                chunks.append(self._text(path).rstrip("\n"))
        return "\n".join(chunks)

    def _find(self, path: str) -> FileEntry | None:
        parent, name = posixpath.split(path)
        for entry in self._entries(parent):
            if entry.name == name:
                return entry
        return None

    def _entries(self, path: str) -> list[FileEntry]:
        return [
            FileEntry(
                name=name,
                kind=FileKind.DIRECTORY if is_dir else FileKind.FILE,
                size=None if is_dir else size,
                modified=modified,
                permissions=permissions,
                owner=owner,
                path=join_remote_path(path, name),
            )
            for name, is_dir, size, modified, permissions, owner in _TREE.get(path, [])
        ]

    def _text(self, path: str) -> str:
        if path in _CONTENTS:
            return _CONTENTS[path]
        return f"// Content for {path}\n// This is a mock file content.\n"

    async def list_directory(self, server_id: str, path: str) -> DirectoryListing:
        self._check_server(server_id)
        path = normalize_remote_path(path)
        if path not in _TREE:
            return DirectoryListing(
                path=path,
                error=f"ls: cannot access '{path}': No such file or directory",
            )
        return DirectoryListing(path=path, entries=self._entries(path))

    async def read_file(self, server_id: str, path: str) -> FileContent:
        self._check_server(server_id)
        path = normalize_remote_path(path)
        if path in _TREE:
            raise FileReadError(path, "Is a directory")
        if self._find(path) is None:
            raise FileReadError(path, "No such file or directory")

        if is_binary_path(path):
            content = _CONTENTS.get(path)
            if content is None:
                content = base64.b64encode(self._text(path).encode("utf-8")).decode("ascii")
            return FileContent(
                path=path,
                content=content,
                is_binary=True,
                mime_type=get_mime_type(path),
            )

        raw = self._text(path).encode("utf-8")
        return FileContent(
            path=path,
            content=raw[: self.max_file_size].decode("utf-8", errors="replace"),
            is_binary=False,
            mime_type=get_mime_type(path),
            truncated=len(raw) >= self.max_file_size,
        )
