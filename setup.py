#!/usr/bin/env python

from setuptools import setup

setup(
    name="projector",
    version="0.1.0",
    packages=[
        "projector",
        "projector.details",
        "projector.details.tools",
        "projector.graph",
    ],
    python_requires=">=3.9",
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["projector = projector.__main__:main"]},
)
