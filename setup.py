# setup.py
from setuptools import setup, find_packages

setup(
    name="twinscheme",
    version="0.1.0",
    description="A small Scheme runtime with tree-walking and trampolined CPS evaluators",
    packages=find_packages(include=["twinscheme", "twinscheme.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["twinscheme=twinscheme.__main__:main"],
    },
    zip_safe=False,
)
