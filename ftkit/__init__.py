"""C-style character, string, byte-buffer, linked-list, line-reading and printf-style utilities."""

__version__ = "0.1.0"
__all__ = ["buffers", "chars", "convert", "linked", "lines", "memory", "output", "strings"]