"""Core components of an NES emulator: bus, APU, opcode table, 6502 CPU state and ROM reader."""

__version__ = "0.1.0"

__all__ = ["apu", "bus", "cpu", "main", "opcodes", "rom"]