from setuptools import find_packages, setup

setup(
    name="snapdiff",
    version="0.1.0",
    description="Differences between unique snapshot versions of files",
    author="snapdiff contributors",
    packages=find_packages(include=["snapdiff", "snapdiff.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "typer>=0.9,<0.26",  # Command line surface; 0.26+ vendors click
        "click",  # Usage errors raised through typer
        "rich",  # Terminal formatting
        "pydantic>=2",  # Configuration models
        "bsdiff4",  # Binary diff size for changed snapshot versions
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
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
            "snapdiff=snapdiff.cli:main",
        ],
    },
)
