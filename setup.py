#!/usr/bin/env python

"""
flag-ledger - recently evaluated feature flags for error context
================================================================

**flag-ledger keeps a bounded, recency-ordered buffer of feature flag
evaluations** and attaches it to outgoing events.
"""

import os
from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))


def get_file_text(file_name):
    with open(os.path.join(here, file_name)) as in_file:
        return in_file.read()


setup(
    name="flag-ledger",
    version="0.1.0",
    author="flag-ledger contributors",
    description="Bounded, recency-ordered buffer of feature flag evaluations",
    long_description=get_file_text("README.md"),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    # PEP 561
    package_data={"flagledger": ["py.typed"]},
    zip_safe=False,
    license="MIT",
    python_requires=">=3.7",
    install_requires=[],
    extras_require={
        "test": ["pytest>=6", "tox"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
