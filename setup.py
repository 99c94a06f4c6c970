from setuptools import setup, find_packages

setup(
    name="chess-sudoku",
    version="1.0.0",
    description="Backtracking Sudoku solver with optional anti-king and anti-knight rules",
    author="robomotic",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "tqdm>=4.62.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "chess-sudoku=chess_sudoku.cli:main",
        ],
    },
)
