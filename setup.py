# setup.py
from setuptools import setup, find_packages

setup(
    name="robots_scout",
    version="0.1.0",
    description="RobotsScout: парсер robots.txt и проверка URL по RFC 9309",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"robots_scout": ["templates/*.j2"]},
    install_requires=[
        "click>=8.1",
        "pydantic>=2.0",
        "PyYAML>=6.0",
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["robots-scout=robots_scout.cli:cli"],
    },
    python_requires=">=3.11",
)
