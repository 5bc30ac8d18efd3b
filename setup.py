"""
Setup script for the newspaper circulation store.

Allows development installation with `pip install -e .`
"""

from setuptools import setup, find_packages

setup(
    name="newspaper-circulation",
    version="0.1.0",  # keep in sync with circulation.__version__
    packages=find_packages(include=["circulation", "circulation.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pymongo>=4.13",
        "python-dotenv>=1.0",
        "typing_extensions>=4.7",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
)
