#!/usr/bin/env python

from setuptools import setup

setup(
    name="podkit",
    version="0.1.0",
    packages=[
        "podkit",
        "podkit.details",
        "podkit.details.targets",
        "podkit.details.tools",
    ],
    python_requires=">=3.9",
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["podkit = podkit.__main__:main"]},
)
