from pathlib import Path

from setuptools import setup, find_packages

# Read the version without importing the package (its runtime deps may be absent)
_version: dict = {}
exec((Path(__file__).parent / "loxpool" / "version.py").read_text(), _version)

setup(
    name="loxpool",
    version=_version["__version__"],
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.22",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
    },
    python_requires=">=3.9",
)
