#!/usr/bin/env python3
"""
Setup script for the textbank package
"""

from setuptools import setup, find_packages

setup(
    name="textbank",
    version="0.1.0",
    description="Key based UI text resolution with fallbacks persisted to XML language files",
    package_dir={"": "backend"},
    packages=find_packages(where="backend", exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        # 🌐 Web Framework (request language middleware, dependency providers)
        "fastapi>=0.104.1",

        # 📋 Data Validation & Settings
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "httpx>=0.25.2",
        ],
    },
)
