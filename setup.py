"""
setup.py

Packaging metadata and CLI entry point for amd-bundler.

Version: 1.0.0: Dependency-ordered RequireJS auto-bundling with override
config generation, exposed as a click CLI with bundle and show subcommands.
"""
from setuptools import setup, find_packages

setup(
    name="amd-bundler",
    version="1.0.0",
    packages=find_packages(include=["bundler", "bundler.*", "cli"]),
    install_requires=[
        "click",
        "pydantic>=2.0",
        "PyYAML",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
        ],
    },
    entry_points={
        "console_scripts": [
            "amd-bundler=cli:cli",
        ],
    },
    python_requires=">=3.8",
)
