"""
Search backends.

Available backends:
    CPUSearchBackend: one worker per subset size on a process or thread pool
"""

from bestsubset.selection.backends.cpu import CPUSearchBackend

__all__ = [
    "CPUSearchBackend",
]
