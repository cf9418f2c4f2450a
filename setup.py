import os
from setuptools import setup
from Cython.Build import cythonize

list = ["opcodes.py", "testcases.py", "gentests.py"]

# OPCODEGEN_CYTHONIZE=1 compiles the modules, otherwise they install as plain python
ext_modules = []
if os.environ.get("OPCODEGEN_CYTHONIZE") == "1":
    ext_modules = cythonize([os.path.join("src", name) for name in list], language_level=3)

setup(
    name="opcodegen",
    version="0.1.0",
    description="Generates Game Boy opcode decoder test cases from Opcodes.json",
    package_dir={"": "src"},
    py_modules=[os.path.splitext(name)[0] for name in list],
    ext_modules=ext_modules,
    python_requires=">=3.10",
    extras_require={"test": ["pytest>=7.0"], "cython": ["Cython>=3.0"]},
    entry_points={
        "console_scripts": [
            "gentests=gentests:main",
        ],
    },
)
