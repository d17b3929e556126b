#!/usr/bin/env python3
"""
Setup script for the ContentGem client package.
"""

import re

from setuptools import setup, find_packages

# Read metadata from package without importing it
with open("contentgem/__init__.py") as f:
    version = dict(re.findall(r'^(__\w+__) = "([^"]*)"', f.read(), re.M))

# Read requirements
with open("requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="contentgem",
    version=version["__version__"],
    author=version["__author__"],
    description=version["__description__"],
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=requirements,
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "contentgem=contentgem.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Internet :: WWW/HTTP",
    ],
    keywords="contentgem api client content generation rest",
    project_urls={
        "Source": "https://github.com/example/contentgem-python",
        "Bug Reports": "https://github.com/example/contentgem-python/issues",
    },
)
