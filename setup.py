from setuptools import find_packages, setup

setup(
    name="codelink",
    version="0.1.0",
    description="Fenced code-link blocks for markdown documents",
    packages=find_packages(include=["codelink", "codelink.*"]),
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas
        "typer>=0.27",  # CLI, context passed to commands, separate stderr in CliRunner
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "codelink=codelink.cli:main",
        ],
    },
)
