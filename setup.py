from setuptools import find_packages, setup

setup(
    name="kegctl",
    version="0.1.0",
    description="Taps, dependents and init system service paths for a package-manager prefix",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer<0.26",  # CLI; 0.26+ vendors its own click, breaking click context and exceptions
        "click",  # CLI context and exceptions (typer backend)
        "rich",  # Terminal formatting
        "pydantic>=2",  # Config and output schemas
        "pyyaml",  # YAML command output
        "pygments",  # Output highlighting on terminals
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "kegctl=kegctl.cli:main",
        ],
    },
)
