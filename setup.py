# setup.py
from setuptools import setup, find_packages

setup(
    name="robots_scout",
    version="0.1.0",
    description="Разбор robots.txt и проверка доступа для краулеров",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "click>=8.1",
        "pydantic>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-asyncio>=0.21",
        ],
    },
    entry_points={
        "console_scripts": ["robots-scout=robots_scout.cli:cli"],
    },
    python_requires=">=3.11",
)
