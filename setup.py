# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Loggify contributors

"""Setup configuration for the loggify package."""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="loggify",
    version="0.1.0",
    author="Loggify contributors",
    description="Colorized console sink for Python logging with an optional CloudWatch Logs mirror",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(include=["loggify", "loggify.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=[
        # Core dependencies (none, stdlib logging only)
    ],
    extras_require={
        "aws": [
            "boto3>=1.28.0",  # CloudWatch Logs mirror
        ],
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "boto3>=1.28.0",
        ],
    },
)
