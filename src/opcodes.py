from __future__ import annotations
from dataclasses import dataclass
from typing import Literal
import json


# Operand class
@dataclass()
class Operand:
    name: str
    immediate: bool
    adjust: Literal["+", "-"] | None = None
    value: str | None = None

    @property
    def increment(self):
        return self.adjust == "+"

    @property
    def decrement(self):
        return self.adjust == "-"

    def create(self, value: str):
        return Operand(name=self.name, immediate=self.immediate, adjust=self.adjust, value=value)

    def print(self):
        # a substituted value replaces the name and its +/- suffix
        if self.value is not None:
            v = self.value
        elif self.adjust is not None:
            v = self.name + self.adjust
        else:
            v = self.name
        if self.immediate:
            return v
        return f'({v})'


# Instruction class
@dataclass
class Instruction:
    opcode: str
    mnemonic: str
    operands: list[Operand]
    cycles: list[int]

    def create(self, operands):
        return Instruction(opcode=self.opcode, mnemonic=self.mnemonic, operands=operands, cycles=self.cycles)

    def getOperands(self):
        return self.operands

    def print(self):
        ops = ', '.join(op.print() for op in self.operands)
        return f"{self.mnemonic} {ops}".strip()


def loadOperand(op: dict) -> Operand:
    adjust = None
    if op.get("increment"):
        adjust = "+"
    elif op.get("decrement"):
        adjust = "-"
    return Operand(name=op["name"], immediate=op["immediate"], adjust=adjust)


def loadInstruction(opcode: str, instr: dict) -> Instruction:
    oplist = [loadOperand(op) for op in instr["operands"]]
    return Instruction(opcode=opcode, mnemonic=instr["mnemonic"], operands=oplist, cycles=instr["cycles"])


# Returns the unprefixed opcodes dictionary, keyed by opcode in table order
def getOpcodes(filename):
    with open(filename, encoding="utf-8") as f:
        instructions = json.load(f)

    unprefixed = {}
    for ninstr, instr in instructions["unprefixed"].items():
        unprefixed[ninstr] = loadInstruction(ninstr, instr)
    return unprefixed
