# setup.py
from setuptools import setup, find_packages

setup(
    name="urlcollect",
    version="0.1.0",
    description="Parallel GET/HEAD fetching of many URLs with a bounded worker pool",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "yarl>=1.9",
        "multidict>=6.0",
        "pydantic>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.23",
            "trustme>=1.0",
        ],
    },
    python_requires=">=3.11",
)
