#!/usr/bin/env python3
"""
Setup script for sconf package.
"""

from setuptools import setup, find_packages

setup(
    name="sconf",
    version="0.1.0",
    description="Small typed configuration store backed by a JSON file",
    author="sconf Team",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "pyee>=11",
        "pydantic>=2",
        "typer>=0.9",
        "rich>=13",
    ],
    extras_require={
        "test": ["pytest>=7", "click>=8.2"],
    },
    entry_points={
        "console_scripts": [
            "sconf=sconf.cli.main:main",
        ],
    },
)
