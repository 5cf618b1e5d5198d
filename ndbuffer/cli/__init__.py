"""Command line tooling for stored primitive buffers.

Commands:
    ndbuffer dtypes                      table of supported kinds
    ndbuffer allocate --dtype --size     build a buffer with the factory and save it
    ndbuffer inspect PATH                kind, size, hash and leading elements
    ndbuffer list                        stored buffers under the data directory

Output is rendered with Rich; errors from the buffer layer are shown in a panel
and turned into exit code 1.
"""

from .main import main

__all__ = ["main"]
