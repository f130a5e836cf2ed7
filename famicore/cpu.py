"""The console's central processing unit: registers, status flags and addressing."""

from __future__ import annotations

import enum

from famicore.bus import Bus
from famicore.opcodes import AddressingMode, Operation

_BYTE_MASK = 0xFF
_WORD_MASK = 0xFFFF


class StatusFlag(enum.IntFlag):
    """Bits of the processor status register (bit 0 is carry)."""

    CARRY = 1 << 0
    ZERO = 1 << 1
    INTERRUPT_DISABLE = 1 << 2
    DECIMAL_MODE = 1 << 3
    BREAK = 1 << 4
    UNUSED = 1 << 5
    OVERFLOW = 1 << 6
    NEGATIVE = 1 << 7


class UnsupportedInstruction(RuntimeError):
    """Raised for an addressing mode or operation the processor cannot carry out."""


class CPU:
    """Processor state and memory access through the system bus.

    Registers are plain attributes: ``pc`` (program counter), ``sp``
    (stack pointer, 0xFF is the top), ``a`` (accumulator), ``x`` and ``y``
    (index registers) and ``status`` (the flag byte). ``abs_addr`` holds the
    last effective address resolved and ``rel_addr`` the last branch offset.
    """

    def __init__(self, bus: Bus | None = None) -> None:
        self.bus = bus if bus is not None else Bus()
        self.pc = 0x0000
        self.sp = 0xFF
        self.a = 0
        self.x = 0
        self.y = 0
        self.status = 0
        self.abs_addr = 0x0000
        self.rel_addr = 0x0000
        print("CPU initialized")

    # Memory access

    def read_pc8(self) -> int:
        """Fetch the byte at the program counter and advance it by one."""
        byte = self.bus.read(self.pc)
        self.pc = (self.pc + 1) & _WORD_MASK
        return byte

    def read_pc16(self) -> int:
        """Fetch a little-endian word at the program counter and advance it by two."""
        lo = self.read_pc8()
        hi = self.read_pc8()
        return (hi << 8) | lo

    def read(self, addr: int) -> int:
        """Read a byte from the bus."""
        return self.bus.read(addr)

    def read16(self, addr: int) -> int:
        """Read a little-endian word; the high byte address wraps at $FFFF."""
        lo = self.read(addr)
        hi = self.read((addr + 1) & _WORD_MASK)
        return (hi << 8) | lo

    def read16_zp(self, addr: int) -> int:
        """Follow a zero-page pointer and read the word it points at.

        The pointer's high byte is fetched from the next zero-page address,
        wrapping from $FF to $00.
        """
        lo = self.read(addr)
        hi = self.read((addr + 1) & _BYTE_MASK)
        return self.read16((hi << 8) | lo)

    def write(self, addr: int, data: int) -> None:
        """Write a byte to the bus."""
        self.bus.write(addr, data)

    # Status flags

    def flag(self, flag: StatusFlag) -> int:
        """Return the flag's bit value if it is set, otherwise 0."""
        return int(flag) if self.status & flag else 0

    def set_flag(self, flag: StatusFlag, value: bool) -> None:
        """Set or clear a status flag."""
        if value:
            self.status |= int(flag)
        else:
            self.status &= ~int(flag) & _BYTE_MASK

    # Addressing

    def resolve_address(self, mode: AddressingMode) -> int:
        """Consume the operand bytes for ``mode`` and return the resulting address.

        Relative mode returns the raw offset byte and stores it in
        ``rel_addr``; every other supported mode stores its result in
        ``abs_addr``.
        """
        if not isinstance(mode, AddressingMode):
            raise TypeError(f"expected an AddressingMode, not {type(mode).__name__}")

        if mode is AddressingMode.REL:
            self.rel_addr = self.read_pc8()
            return self.rel_addr

        if mode is AddressingMode.ABS:
            address = self.read_pc16()
        elif mode is AddressingMode.ABSX:
            address = (self.read_pc16() + self.x) & _WORD_MASK
        elif mode is AddressingMode.ABSY:
            address = (self.read_pc16() + self.y) & _WORD_MASK
        elif mode is AddressingMode.IND:
            address = self.read16_zp(self.read_pc16())
        elif mode is AddressingMode.INDX:
            address = self.read16_zp((self.read_pc8() + self.x) & _BYTE_MASK)
        elif mode is AddressingMode.INDY:
            address = self.read16_zp((self.read_pc8() + self.y) & _BYTE_MASK)
        elif mode is AddressingMode.ZP0:
            address = self.read_pc8()
        elif mode is AddressingMode.ZPX:
            address = (self.read_pc8() + self.x) & _BYTE_MASK
        elif mode is AddressingMode.ZPY:
            address = (self.read_pc8() + self.y) & _BYTE_MASK
        else:
            raise UnsupportedInstruction(f"addressing mode {mode.name} is not supported")

        self.abs_addr = address
        return address

    # Operations

    def execute(self, operation: Operation) -> int:
        """Carry out an operation.

        The processor core supports no operations yet, so every operation
        raises :class:`UnsupportedInstruction`.
        """
        if not isinstance(operation, Operation):
            raise TypeError(f"expected an Operation, not {type(operation).__name__}")
        raise UnsupportedInstruction(f"operation {operation.name} is not supported")