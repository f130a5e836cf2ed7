"""Opcode table mapping each byte to its addressing mode, operation and cycle count."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class AddressingMode(enum.Enum):
    """How an instruction locates its operand."""

    ABS = "absolute"
    ABSX = "absolute,x"
    ABSY = "absolute,y"
    ACC = "accumulator"
    IMM = "immediate"
    IMP = "implied"
    IND = "indirect"
    INDX = "(indirect,x)"
    INDY = "(indirect),y"
    REL = "relative"
    ZP0 = "zero page"
    ZPX = "zero page,x"
    ZPY = "zero page,y"


class Operation(enum.Enum):
    """Operations the processor can perform."""

    # Load/store
    LDA = "load accumulator"
    LDX = "load X register"
    LDY = "load Y register"
    STA = "store accumulator"
    STX = "store X register"
    STY = "store Y register"
    # Register transfers
    TAX = "transfer accumulator to X"
    TAY = "transfer accumulator to Y"
    TXA = "transfer X to accumulator"
    TYA = "transfer Y to accumulator"
    # Stack
    TSX = "transfer stack pointer to X"
    TXS = "transfer X to stack pointer"
    PHA = "push accumulator"
    PLA = "pull accumulator"
    PHP = "push processor status"
    PLP = "pull processor status"
    # Bitwise
    AND = "logical AND"
    EOR = "exclusive OR"
    ORA = "logical inclusive OR"
    BIT = "bit test"
    # Arithmetic
    ADC = "add with carry"
    SBC = "subtract with carry"
    CMP = "compare accumulator"
    CPX = "compare X register"
    CPY = "compare Y register"
    # Increments and decrements
    INC = "increment memory"
    INX = "increment X register"
    INY = "increment Y register"
    DEC = "decrement memory"
    DEX = "decrement X register"
    DEY = "decrement Y register"
    # Shifts
    ASL = "arithmetic shift left"
    LSR = "logical shift right"
    ROL = "rotate left"
    ROR = "rotate right"
    # Jumps
    JMP = "jump"
    JSR = "jump to subroutine"
    RTS = "return from subroutine"
    # Branches
    BCC = "branch if carry clear"
    BCS = "branch if carry set"
    BEQ = "branch if equal"
    BMI = "branch if minus"
    BNE = "branch if not equal"
    BPL = "branch if positive"
    BVC = "branch if overflow clear"
    BVS = "branch if overflow set"
    # Status flag changes
    CLC = "clear carry flag"
    CLD = "clear decimal mode"
    CLI = "clear interrupt disable"
    CLV = "clear overflow flag"
    SEC = "set carry flag"
    SED = "set decimal mode"
    SEI = "set interrupt disable"
    # System
    BRK = "force interrupt"
    NOP = "no operation"
    RTI = "return from interrupt"
    # Anything the table does not define
    INVALID = "invalid operation"


@dataclass(frozen=True)
class Instruction:
    """One decoded opcode."""

    opcode: int
    mode: AddressingMode
    operation: Operation
    cycles: int

    @property
    def mnemonic(self) -> str:
        """The operation's three-letter name (or INVALID)."""
        return self.operation.name


# Entries are MODE:OPERATION:CYCLES in opcode order, sixteen per opcode row.
_TABLE = """
IMM:BRK:7   INDX:ORA:6  IMP:INVALID:2  INDX:INVALID:8  ZP0:INVALID:3  ZP0:ORA:3  ZP0:ASL:5  ZP0:INVALID:5
IMP:PHP:3   IMM:ORA:2   ACC:ASL:2      IMM:INVALID:2   ABS:INVALID:4  ABS:ORA:4  ABS:ASL:6  ABS:INVALID:6
REL:BPL:2   INDY:ORA:5  IMP:INVALID:2  INDY:INVALID:8  ZPX:INVALID:4  ZPX:ORA:4  ZPX:ASL:6  ZPX:INVALID:6
IMP:CLC:2   ABSY:ORA:4  IMP:INVALID:2  ABSY:INVALID:7  ABSX:INVALID:4 ABSX:ORA:4 ABSX:ASL:7 ABSX:INVALID:7
ABS:JSR:6   INDX:AND:6  IMP:INVALID:2  INDX:INVALID:8  ZP0:BIT:3      ZP0:AND:3  ZP0:ROL:5  ZP0:INVALID:5
IMP:PLP:4   IMM:AND:2   ACC:ROL:2      IMM:INVALID:2   ABS:BIT:4      ABS:AND:4  ABS:ROL:6  ABS:INVALID:6
REL:BMI:2   INDY:AND:5  IMP:INVALID:2  INDY:INVALID:8  ZPX:INVALID:4  ZPX:AND:4  ZPX:ROL:6  ZPX:INVALID:6
IMP:SEC:2   ABSY:AND:4  IMP:INVALID:2  ABSY:INVALID:7  ABSX:INVALID:4 ABSX:AND:4 ABSX:ROL:7 ABSX:INVALID:7
IMP:RTI:6   INDX:EOR:6  IMP:INVALID:2  INDX:INVALID:8  ZP0:INVALID:3  ZP0:EOR:3  ZP0:LSR:5  ZP0:INVALID:5
IMP:PHA:3   IMM:EOR:2   ACC:LSR:2      IMM:INVALID:2   ABS:JMP:3      ABS:EOR:4  ABS:LSR:6  ABS:INVALID:6
REL:RTS:2   INDY:EOR:5  IMP:INVALID:2  INDY:INVALID:8  ZPX:INVALID:4  ZPX:EOR:4  ZPX:LSR:6  ZPX:INVALID:6
IMP:CLI:2   ABSY:EOR:4  IMP:INVALID:2  ABSY:INVALID:7  ABSX:INVALID:4 ABSX:EOR:4 ABSX:LSR:7 ABSX:INVALID:7
IMP:RTS:6   INDX:ADC:6  IMP:INVALID:2  INDX:INVALID:8  ZP0:INVALID:3  ZP0:ADC:3  ZP0:ROL:5  ZP0:INVALID:5
IMP:PLA:4   IMM:ADC:2   ACC:ROR:2      IMM:INVALID:2   IND:JMP:5      ABS:ADC:4  ABS:ROL:6  ABS:INVALID:6
REL:BVS:2   INDY:ADC:5  IMP:INVALID:2  INDY:INVALID:8  ZPX:INVALID:4  ZPX:ADC:4  ZPX:ROL:6  ZPX:INVALID:6
IMP:SEI:2   ABSY:ADC:4  IMP:INVALID:2  ABSY:INVALID:7  ABSX:INVALID:4 ABSX:ADC:4 ABSX:ROL:7 ABSX:INVALID:7
IMM:INVALID:2 INDX:STA:6 IMM:INVALID:2 INDX:INVALID:6  ZP0:STY:3      ZP0:STA:3  ZP0:STX:3  ZP0:INVALID:3
IMP:DEY:2   IMM:INVALID:2 IMP:TXA:2    IMM:INVALID:2   ABS:STY:4      ABS:STA:4  ABS:STX:4  ABS:INVALID:4
REL:BCC:2   INDY:STA:6  IMP:INVALID:2  INDY:INVALID:6  ZPX:STY:4      ZPX:STA:4  ZPY:STX:4  ZPY:INVALID:4
IMP:TYA:2   ABSY:STA:5  IMP:TXS:2      ABSY:INVALID:5  ABSX:INVALID:5 ABSX:STA:5 ABSY:INVALID:5 ABSY:INVALID:5
IMM:LDY:2   INDX:LDA:6  IMM:LDX:2      INDX:INVALID:6  ZP0:LDY:3      ZP0:LDA:3  ZP0:LDX:3  ZP0:INVALID:3
IMP:TAY:2   IMM:LDA:2   IMP:TAX:2      IMM:INVALID:2   ABS:LDY:4      ABS:LDA:4  ABS:LDX:4  ABS:INVALID:4
REL:BCC:2   INDY:LDA:5  IMP:INVALID:2  INDY:INVALID:5  ZPX:LDY:4      ZPX:LDA:4  ZPY:LDX:4  ZPY:INVALID:4
IMP:CLV:2   ABSY:LDA:4  IMP:TSX:2      ABSY:INVALID:4  ABSX:LDY:4     ABSX:LDA:4 ABSY:LDX:4 ABSY:INVALID:4
IMM:CPY:2   INDX:CMP:6  IMM:INVALID:2  INDX:INVALID:8  ZP0:CPY:3      ZP0:CMP:3  ZP0:DEC:5  ZP0:INVALID:5
IMP:INY:2   IMM:CMP:2   IMP:DEX:2      IMM:INVALID:2   ABS:CPY:4      ABS:CMP:4  ABS:DEC:6  ABS:INVALID:6
REL:BNE:2   INDY:CMP:5  IMP:INVALID:2  INDY:INVALID:8  ZPX:INVALID:4  ZPX:CMP:4  ZPX:DEC:6  ZPX:INVALID:6
IMP:CLD:2   ABSY:CMP:4  IMP:INVALID:2  ABSY:INVALID:7  ABSX:INVALID:4 ABSX:CMP:4 ABSX:DEC:7 ABSX:INVALID:7
IMM:CPY:2   INDX:EOR:6  IMM:SBC:2      INDX:INVALID:8  ZP0:CPX:3      ZP0:SBC:3  ZP0:INC:5  ZP0:INVALID:5
IMP:INX:2   IMM:SBC:2   IMP:NOP:2      IMM:INVALID:2   ABS:CPY:4      ABS:SBC:4  ABS:INC:6  ABS:INVALID:6
REL:BEQ:2   INDY:SBC:5  IMP:INVALID:2  INDY:INVALID:8  ZPX:INVALID:4  ZPX:SBC:4  ZPX:INC:6  ZPX:INVALID:6
IMP:SED:2   ABSY:SBC:4  IMP:INVALID:2  ABSY:INVALID:7  ABSX:INVALID:4 ABSX:SBC:4 ABSX:INC:7 ABSX:INVALID:7
"""


def _build_table() -> tuple[Instruction, ...]:
    entries = _TABLE.split()
    if len(entries) != 256:
        raise RuntimeError(f"opcode table has {len(entries)} entries, expected 256")
    instructions = []
    for opcode, entry in enumerate(entries):
        mode, operation, cycles = entry.split(":")
        instructions.append(
            Instruction(
                opcode=opcode,
                mode=AddressingMode[mode],
                operation=Operation[operation],
                cycles=int(cycles),
            )
        )
    return tuple(instructions)


INSTRUCTIONS: tuple[Instruction, ...] = _build_table()


def decode(opcode: int) -> Instruction:
    """Return the instruction for an opcode byte."""
    if isinstance(opcode, bool) or not isinstance(opcode, int):
        raise TypeError(f"opcode must be an integer, not {type(opcode).__name__}")
    if not 0 <= opcode <= 0xFF:
        raise ValueError(f"opcode is not a byte: {opcode!r}")
    return INSTRUCTIONS[opcode]