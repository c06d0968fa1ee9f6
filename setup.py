#!/usr/bin/env python3
"""
Setup script for lambda-deploy.

Kept for tools that still call setup.py directly. pip builds the project
from pyproject.toml with hatchling; the metadata below mirrors it.
"""

import re
from pathlib import Path

from setuptools import setup, find_packages

HERE = Path(__file__).resolve().parent


def find_version() -> str:
    """Read __version__ without importing the package."""
    content = (HERE / "lambda_deploy" / "__version__.py").read_text(encoding="utf-8")
    match = re.search(r'^__version__\s*=\s*[\'"]([^\'"]*)[\'"]', content, re.MULTILINE)
    if not match:
        raise RuntimeError("Unable to find version string.")
    return match.group(1)


if __name__ == "__main__":
    setup(
        name="lambda-deploy",
        version=find_version(),
        description="Package Python Lambda function sources and deploy them to AWS Lambda",
        long_description=(HERE / "README.md").read_text(encoding="utf-8"),
        long_description_content_type="text/markdown",
        packages=find_packages(include=["lambda_deploy", "lambda_deploy.*"]),
        python_requires=">=3.9",
        install_requires=[
            "click>=8.0",
            "rich>=13.0",
            "PyYAML>=6.0",
            "jsonschema>=4.0",
            "packaging>=21.0",
            "boto3>=1.26",
        ],
        extras_require={"test": ["pytest>=7.0"]},
        entry_points={
            "console_scripts": ["lambda-deploy=lambda_deploy.cli.main:main"],
        },
    )
