#!/usr/bin/env python

from setuptools import setup

setup(
    name="buildgraph",
    version="0.1.0",
    packages=[
        "buildgraph",
        "buildgraph.automation",
        "buildgraph.details",
        "buildgraph.details.tools",
        "buildgraph.linting",
        "buildgraph.mappers",
    ],
    python_requires=">=3.9",
    extras_require={"test": ["pytest"]},
)
