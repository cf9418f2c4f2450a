from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator
from opcodes import Instruction

# Placeholder operands: bytes appended to the encoding (little endian) and the
# literal they disassemble to
PLACEHOLDERS = {
    "n16": (("0x34", "0x12"), "0x1234"),
    "a16": (("0x34", "0x12"), "0x1234"),
    "n8": (("0x12",), "0x12"),
    "a8": (("0x12",), "0x12"),
    "e8": (("0x7B",), "123"),
}

# Table cycles are clock ticks, 4 per machine cycle
TICKS_PER_CYCLE = 4

INDENT = " " * 12


def formatCycles(value):
    # 2.0 -> "2", 0.25 -> "0.25"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass(frozen=True)
class TestCase:
    test_name: str
    machine_code: list[str]
    assembly: str
    machine_cycles: int | float

    # keep pytest from collecting this as a test class
    __test__ = False

    def print(self):
        code = ", ".join(self.machine_code)
        return f'{INDENT}{self.test_name}: {code} => "{self.assembly}", {formatCycles(self.machine_cycles)},'


def generate(instruction: Instruction) -> TestCase:
    """Build the test case for a single opcode table entry."""
    names = [instruction.mnemonic]
    machine_code = [instruction.opcode]
    operands = []

    for operand in instruction.getOperands():
        if operand.increment:
            names.append(f"{operand.name}_increment")
        elif operand.decrement:
            names.append(f"{operand.name}_decrement")
        else:
            names.append(operand.name)

        # keyed on the bare name, the +/- suffix doesn't matter here
        if operand.name in PLACEHOLDERS:
            data, value = PLACEHOLDERS[operand.name]
            machine_code.extend(data)
            operand = operand.create(value)
        operands.append(operand)

    assembly = instruction.create(operands).print()
    test_name = "_".join(names).lower().replace("$", "")
    cycles = instruction.cycles[0] / TICKS_PER_CYCLE
    if cycles.is_integer():
        cycles = int(cycles)
    return TestCase(test_name=test_name, machine_code=machine_code, assembly=assembly, machine_cycles=cycles)


def generateAll(unprefixed: dict[str, Instruction]) -> Iterator[TestCase]:
    for instruction in unprefixed.values():
        yield generate(instruction)
