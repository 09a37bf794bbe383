"""Setup configuration for the Address Book."""

from setuptools import setup, find_packages

setup(
    name="address-book",
    version="0.1.0",
    description="In-memory address book with validated contact records",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[],
    entry_points={
        "console_scripts": [
            "address-book=src.handlers.script_handler:main",
        ]
    },
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "hypothesis>=6.88.0",
        ]
    }
)
