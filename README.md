# famicore

famicore holds the first pieces of an NES emulator, written in plain Python with no
third-party dependencies.

## What is in the package

- `famicore.bus.Bus` is the CPU address bus. It maps:
  - `$0000-$07FF`: 2 KB internal RAM, mirrored up to `$1FFF`
  - `$2000-$2007`: PPU registers, mirrored every 8 bytes up to `$3FFF`
  - `$4000-$4017`: APU and I/O registers
  - `$4018-$401F`: APU test mode registers

  Reads of cartridge space (`$4020-$FFFF`) return 0, and writes there are ignored.
  An address outside `0-$FFFF` raises `ValueError`. So does a written value outside `0-255`.
  Creating a bus prints `APU initialized`, `Bus initialized` and the bus size.
- `famicore.apu.APU` is the audio unit that the bus owns. It has no state or behaviour
  beyond printing `APU initialized` when created.
- `famicore.opcodes` holds the table of all 256 opcodes. `decode(opcode)` returns an
  `Instruction`, a frozen dataclass with these fields:
  - `opcode`
  - `mode`, an `AddressingMode`
  - `operation`, an `Operation`
  - `cycles`, the base cycle count
  - `mnemonic`, the operation's name

  Every opcode without a defined operation decodes to `Operation.INVALID`. `decode` raises
  `TypeError` for a non-integer and `ValueError` for a value outside `0-255`. Some entries
  differ from the usual 6502 reference. For example, `$50` decodes to `RTS`, `$B0` decodes
  to `BCC` and `$66` decodes to `ROL`.
- `famicore.cpu.CPU` is the 6502 core state. It has these registers:
  - `pc`
  - `sp`, which starts at `0xFF`
  - `a`
  - `x`
  - `y`
  - `status`

  It also has the following methods:
  - memory helpers: `read`, `write`, `read16`, `read16_zp`, `read_pc8` and `read_pc16`
  - status flag access: `flag` and `set_flag`, which take a `StatusFlag`
  - `resolve_address(mode)`, which consumes operand bytes at `pc` and returns the effective
    address. For relative mode it returns the raw offset byte instead.
- `famicore.rom.RomReader` loads the first 8 KB of a ROM file and serves byte reads with
  `read(addr)`. A shorter file is padded with zeros. An address outside the 8 KB image
  raises `IndexError`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Usage

```python
from famicore.bus import Bus
from famicore.cpu import CPU, StatusFlag
from famicore.opcodes import AddressingMode, decode

bus = Bus()
bus.write(0x0001, 0x42)
assert bus.read(0x0801) == 0x42   # internal RAM is mirrored

instruction = decode(0xA9)
print(instruction.mode, instruction.operation, instruction.cycles)  # IMM, LDA, 2

cpu = CPU(bus)
bus.write(0x0000, 0x34)
bus.write(0x0001, 0x12)
assert cpu.resolve_address(AddressingMode.ABS) == 0x1234
cpu.set_flag(StatusFlag.CARRY, True)
assert cpu.flag(StatusFlag.CARRY) == 1
```

## Command line

```
famicore
```

This prints a greeting, brings up the bus, and exits with status 1.

## What it does not do

- The CPU carries out no instructions. `CPU.execute` raises `UnsupportedInstruction` for
  every operation. There is no step or clock loop.
- `resolve_address` raises `UnsupportedInstruction` for the accumulator, immediate and
  implied modes.
- There is no PPU, no sound output and no cartridge mapping. `RomReader` is not connected
  to the bus, so cartridge space always reads as 0.
- The `famicore` command does not load or run a ROM.

## Tests

```
pytest
```