"""Shared pytest configuration and fixtures for all tests."""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from codelink.api.block.CodeLinkBlockParser import CodeLinkBlockParser
from codelink.api.files.InMemoryDirectoryAccessor import InMemoryDirectoryAccessor


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests")
    config.addinivalue_line("markers", "integration: integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Sample Files
# =============================================================================

# Ten lines; region "Main" holds lines 3-5
PROGRAM_CS = "\n".join(
    [
        "using System;",
        "#region Main",
        'var greeting = "Hello";',
        "Console.WriteLine(greeting);",
        'Console.WriteLine("World");',
        "#endregion",
        "",
        "class Program",
        "{",
        "}",
    ]
)

PROJECT_CSPROJ = '<Project Sdk="Microsoft.NET.Sdk"></Project>'


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def codelink_home(tmp_path_factory) -> Iterator[Path]:
    """Keep log files of the test session out of the user's home directory."""
    home = tmp_path_factory.mktemp("codelink_home")
    previous = os.environ.get("CODELINK_HOME")
    os.environ["CODELINK_HOME"] = str(home)
    yield home
    if previous is None:
        os.environ.pop("CODELINK_HOME", None)
    else:
        os.environ["CODELINK_HOME"] = previous


@pytest.fixture
def accessor() -> InMemoryDirectoryAccessor:
    """In-memory accessor holding Program.cs and a discoverable project file."""
    return InMemoryDirectoryAccessor(
        {
            "Program.cs": PROGRAM_CS,
            "console.csproj": PROJECT_CSPROJ,
        },
        root="/repo",
    )


@pytest.fixture
def parser(accessor: InMemoryDirectoryAccessor) -> CodeLinkBlockParser:
    return CodeLinkBlockParser(accessor)


@pytest.fixture
def markdown_dir(tmp_path: Path) -> Path:
    """Directory with a markdown document and the files it links to."""
    (tmp_path / "Program.cs").write_text(PROGRAM_CS, encoding="utf-8")
    (tmp_path / "console.csproj").write_text(PROJECT_CSPROJ, encoding="utf-8")
    (tmp_path / "README.md").write_text(
        "\n".join(
            [
                "# Sample",
                "",
                "```csharp ./Program.cs --region Main",
                "ignored body",
                "```",
                "",
                "```csharp --session one",
                'Console.WriteLine("literal");',
                "```",
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    return tmp_path


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture(name="run_cmd")
def run_cmd_fixture():
    return run_cmd
