from setuptools import find_packages, setup

setup(
    name="mdlinkcheck",
    version="0.1.0",
    description="Check markdown files, directory trees and URLs for dead hyperlinks",
    packages=find_packages(include=["mdlinkcheck", "mdlinkcheck.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI
        "rich",  # Terminal formatting and progress bar
        "pydantic>=2",  # Options and config file models
        "aiohttp",  # Async document fetching and link probing
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-asyncio",  # Coroutine tests
            "pytest-timeout>=2.1",  # Test timeouts
            "pytest-xdist>=3.0",  # Parallel test execution
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
    entry_points={
        "console_scripts": [
            "mdlinkcheck=mdlinkcheck.cli:main",
        ],
    },
)
