import os
import pytest

HERE = os.path.dirname(os.path.abspath(__file__))


@pytest.fixture(scope="session")
def opcode_file():
    """Path to the trimmed real-format opcode table."""
    return os.path.join(HERE, "Opcodes.json")
