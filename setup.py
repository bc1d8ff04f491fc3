#!/usr/bin/env python
"""
Setup.py for the digraph package.
"""

from setuptools import setup, find_packages

setup(
    name="digraph",
    version="0.1.0",
    description="Generic directed graph with strong connectivity and shortest paths",
    packages=find_packages(include=["digraph", "digraph.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
