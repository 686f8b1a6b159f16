"""VPS Console: remote terminal and file browser over SSH, served via MCP."""

__version__ = "0.1.0"
