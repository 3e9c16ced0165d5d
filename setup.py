"""
setup.py

Установка Peg Solitaire Solver.

Использование:
    pip install -e .            # решатель и CLI
    pip install -e .[test]      # + pytest
"""

from setuptools import setup, find_packages

setup(
    name="peg_backtrack",
    version="1.0.0",
    description="Backtracking Peg Solitaire solver for boards of arbitrary shape",
    packages=find_packages(include=["core", "solvers", "solutions", "peg_io", "utils", "tools", "web"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[
        "flask>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "peg-backtrack=main:main",
        ],
    },
    zip_safe=False,
)
