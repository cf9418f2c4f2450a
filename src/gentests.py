from opcodes import getOpcodes
from testcases import generateAll
import sys
import os


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) > 1:
        raise AssertionError("Only path to opcode table argument is allowed")

    if len(argv) == 0:
        filename = "Opcodes.json"
    else:
        filename = argv[0]

    if not os.path.isfile(filename):
        raise AssertionError(f"Opcode table path {filename} does not exist")

    unprefixed = getOpcodes(filename)
    for case in generateAll(unprefixed):
        print(case.print())
    return 0


if __name__ == "__main__":
    sys.exit(main())
