"""Loading of ROM images from disk."""

import os

ROM_SIZE = 0x2000


class RomReader:
    """An 8KB ROM image loaded from a file.

    Files shorter than 8KB are zero padded; longer files are truncated.
    """

    def __init__(self, path: str | os.PathLike) -> None:
        with open(path, "rb") as handle:
            data = handle.read(ROM_SIZE)
        self._rom = bytes(data).ljust(ROM_SIZE, b"\x00")

    def read(self, addr: int) -> int:
        """Return the byte at ``addr`` within the image."""
        if not 0 <= addr < ROM_SIZE:
            raise IndexError(f"ROM address out of range: {addr!r}")
        return self._rom[addr]