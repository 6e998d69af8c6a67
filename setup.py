from setuptools import setup, find_packages

setup(
    name="cadoku",
    version="1.0.0",
    description="Sudoku puzzle generator built on constraint propagation",
    packages=find_packages(include=["cadoku", "cadoku.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "matplotlib>=3.6.0",
        "seaborn>=0.11.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "cadoku=cadoku.cli:main",
        ],
    },
)
