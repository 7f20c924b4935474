#!/usr/bin/env python
import os
import re

from setuptools import setup

current_dir = os.path.dirname(os.path.abspath(__file__))


def version():
    with open(os.path.join(current_dir, "numratio", "__init__.py")) as f:
        return re.search(r'__version__ = "(.+)"', f.read()).group(1)


setup(
    name="numratio",
    version=version(),
    description="Exact rational numbers over arbitrary or fixed width integers",
    author="Dean Shaff",
    author_email="dean.shaff@gmail.com",
    url="https://github.com/dean-shaff/numratio",
    packages=["numratio"],
    python_requires=">=3.8",
    install_requires=[
        "numpy"
    ],
    extras_require={
        "test": ["pytest"]
    }
)
