"""CPU address bus with the console's memory map.

    $0000-$07FF  2KB internal RAM
    $0800-$1FFF  mirrors of $0000-$07FF
    $2000-$2007  PPU registers
    $2008-$3FFF  mirrors of $2000-$2007 (every 8 bytes)
    $4000-$4017  APU and I/O registers
    $4018-$401F  APU test mode registers
    $4020-$FFFF  cartridge space (PRG ROM, PRG RAM, mapper registers)
"""

from famicore.apu import APU

RAM_SIZE = 2048
PPU_REG_SIZE = 8
APU_IO_REG_SIZE = 24
APU_TEST_REG_SIZE = 8

ADDRESS_LIMIT = 0x10000


def _check_address(addr: int) -> None:
    if not 0 <= addr < ADDRESS_LIMIT:
        raise ValueError(f"address out of range: {addr!r}")


class Bus:
    """Routes 16-bit CPU addresses to RAM and register banks."""

    def __init__(self) -> None:
        self._apu = APU()
        self._iram = bytearray(RAM_SIZE)
        self._ppu_registers = bytearray(PPU_REG_SIZE)
        self._apu_io_registers = bytearray(APU_IO_REG_SIZE)
        self._apu_test_registers = bytearray(APU_TEST_REG_SIZE)
        print("Bus initialized")
        size = RAM_SIZE + PPU_REG_SIZE + APU_IO_REG_SIZE + APU_TEST_REG_SIZE
        print(f"Bus size: {size}")

    def _locate(self, addr: int) -> tuple[bytearray, int] | None:
        """Return the backing region and offset for an address, if mapped."""
        _check_address(addr)
        if addr < 0x2000:
            return self._iram, addr & 0x07FF
        if addr < 0x4000:
            return self._ppu_registers, addr & 0x0007
        if addr < 0x4018:
            return self._apu_io_registers, addr - 0x4000
        if addr < 0x4020:
            return self._apu_test_registers, addr - 0x4018
        return None

    def read(self, addr: int) -> int:
        """Read a byte; unmapped cartridge space reads as zero."""
        location = self._locate(addr)
        if location is None:
            return 0
        region, offset = location
        return region[offset]

    def write(self, addr: int, data: int) -> None:
        """Write a byte; writes to unmapped cartridge space are ignored."""
        if not 0 <= data <= 0xFF:
            raise ValueError(f"data is not a byte: {data!r}")
        location = self._locate(addr)
        if location is None:
            return
        region, offset = location
        region[offset] = data