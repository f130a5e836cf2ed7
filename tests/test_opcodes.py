import dataclasses

import pytest

from famicore.opcodes import (
    INSTRUCTIONS,
    AddressingMode,
    Instruction,
    Operation,
    decode,
)


def test_table_covers_every_byte():
    decoded = [decode(opcode) for opcode in range(256)]
    assert len(INSTRUCTIONS) == 256
    assert [instr.opcode for instr in decoded] == list(range(256))
    assert decoded == list(INSTRUCTIONS)


@pytest.mark.parametrize("opcode", range(256))
def test_decode_returns_matching_opcode(opcode):
    instr = decode(opcode)
    assert instr.opcode == opcode
    assert instr is INSTRUCTIONS[opcode]


def test_brk_entry():
    instr = decode(0x00)
    assert instr.mode is AddressingMode.IMM
    assert instr.operation is Operation.BRK
    assert instr.cycles == 7


def test_indirect_jump_entry():
    instr = decode(0x6C)
    assert instr.mode is AddressingMode.IND
    assert instr.operation is Operation.JMP
    assert instr.cycles == 5


def test_nop_entry():
    instr = decode(0xEA)
    assert instr.mode is AddressingMode.IMP
    assert instr.operation is Operation.NOP
    assert instr.mnemonic == "NOP"


def test_table_entries_kept_as_defined():
    assert decode(0x50).operation is Operation.RTS
    assert decode(0x50).mode is AddressingMode.REL
    assert decode(0xB0).operation is Operation.BCC
    assert decode(0xE0).operation is Operation.CPY
    assert decode(0xE1).operation is Operation.EOR


def test_cycle_counts_within_range():
    cycles = [decode(opcode).cycles for opcode in range(256)]
    assert min(cycles) == 2
    assert max(cycles) == 8


def test_accumulator_mode_used_only_by_shifts():
    shifts = {Operation.ASL, Operation.LSR, Operation.ROL, Operation.ROR}
    acc_ops = {
        decode(opcode).operation
        for opcode in range(256)
        if decode(opcode).mode is AddressingMode.ACC
    }
    assert acc_ops <= shifts
    assert acc_ops


def test_zero_page_y_used_only_by_x_register_ops():
    allowed = {Operation.LDX, Operation.STX, Operation.INVALID}
    zpy_ops = {
        decode(opcode).operation
        for opcode in range(256)
        if decode(opcode).mode is AddressingMode.ZPY
    }
    assert zpy_ops <= allowed
    assert Operation.LDX in zpy_ops
    assert Operation.STX in zpy_ops


def test_indirect_mode_only_for_jump():
    ind = [
        decode(opcode)
        for opcode in range(256)
        if decode(opcode).mode is AddressingMode.IND
    ]
    assert [i.operation for i in ind] == [Operation.JMP]
    assert [i.opcode for i in ind] == [0x6C]


def test_low_column_two_is_invalid_implied_outside_immediate_rows():
    for high in (0x0, 0x1, 0x2, 0x3, 0x4, 0x5, 0x6, 0x7, 0x9, 0xB, 0xD, 0xF):
        instr = decode(high << 4 | 0x2)
        assert instr.operation is Operation.INVALID
        assert instr.mode is AddressingMode.IMP


@pytest.mark.parametrize("opcode", range(256))
def test_mnemonic_matches_operation_name(opcode):
    instr = decode(opcode)
    assert instr.mnemonic == instr.operation.name


@pytest.mark.parametrize("opcode", [-1, 256, 0x1000])
def test_decode_rejects_out_of_range(opcode):
    with pytest.raises(ValueError):
        decode(opcode)


@pytest.mark.parametrize("opcode", ["0x00", 1.0, None, True])
def test_decode_rejects_non_integers(opcode):
    with pytest.raises(TypeError):
        decode(opcode)


def test_instruction_is_immutable():
    instr = decode(0xA9)
    original_cycles = instr.cycles
    with pytest.raises(dataclasses.FrozenInstanceError):
        instr.cycles = 9
    assert instr.cycles == original_cycles == 2
    assert decode(0xA9).cycles == 2


def test_instruction_equality_by_value():
    instr = decode(0xA9)
    copy = Instruction(
        opcode=instr.opcode,
        mode=instr.mode,
        operation=instr.operation,
        cycles=instr.cycles,
    )
    assert copy == instr
    assert hash(copy) == hash(instr)