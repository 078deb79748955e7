from setuptools import setup, find_packages
from pathlib import Path

this_dir = Path(__file__).parent

readme = (this_dir / "README.md").read_text(encoding="utf-8")

setup(
    name="densemat",
    version="0.1.0",
    description="Dense real matrices: construction, arithmetic, transpose and display",
    long_description=readme,
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    packages=find_packages(exclude=["tests"]),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
