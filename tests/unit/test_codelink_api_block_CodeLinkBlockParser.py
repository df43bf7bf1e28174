"""Tests for the code-link block recognizer."""

from pathlib import Path

import pytest

from codelink.api.block.BlockState import BlockState
from codelink.api.block.CodeLinkBlock import CodeLinkBlock
from codelink.api.block.CodeLinkBlockParser import CodeLinkBlockParser
from codelink.api.block.FenceLine import FenceLine
from codelink.api.config.CodeLinkConfig import CodeLinkConfig
from codelink.api.files.InMemoryDirectoryAccessor import InMemoryDirectoryAccessor

from tests.conftest import PROGRAM_CS


def _feed(parser: CodeLinkBlockParser, block: CodeLinkBlock, lines: list[str]) -> list[BlockState]:
    states = []
    for line in lines:
        states.append(parser.try_continue(block, line))
        if states[-1] is BlockState.BREAK_DISCARD:
            break
    return states


def test_accessor_is_required():
    with pytest.raises(ValueError, match="directory_accessor is required"):
        CodeLinkBlockParser(None)  # type: ignore[arg-type]


def test_region_content_without_diagnostics(parser):
    block = parser.try_open("```csharp ./Program.cs --region Main", line_number=1)

    assert block is not None
    assert block.source_file == "./Program.cs"
    assert block.region == "Main"
    assert list(block.lines) == PROGRAM_CS.splitlines()[2:5]
    assert list(block.diagnostics) == []
    assert block.project_file == Path("/repo/console.csproj")


def test_whole_file_content_verbatim(parser):
    block = parser.try_open("```csharp Program.cs")
    assert list(block.lines) == PROGRAM_CS.splitlines()
    assert list(block.diagnostics) == []


def test_project_and_package_conflict(parser):
    block = parser.try_open("```csharp --package Foo --project bar.csproj")

    assert block is not None
    assert block.package == "Foo"
    assert block.project_file is None
    assert list(block.diagnostics).count("Can't specify both --project and --package") == 1


def test_conflict_reported_once_with_existing_project(parser):
    block = parser.try_open("```csharp --project console.csproj --package Foo")
    assert list(block.diagnostics) == ["Can't specify both --project and --package"]
    assert block.package == "Foo"


@pytest.mark.parametrize(
    "line,missing,package",
    [
        ("```csharp --project --package Foo", "--project", "Foo"),
        ("```csharp --package --project console.csproj", "--package", None),
        ("```csharp Program.cs --package= --project=", "--package", None),
    ],
)
def test_conflict_reported_when_a_value_is_missing(parser, line, missing, package):
    block = parser.try_open(line)

    assert block is not None
    assert f"Required argument missing for option: {missing}" in block.diagnostics
    assert list(block.diagnostics).count("Can't specify both --project and --package") == 1
    assert block.package == package
    assert block.project_file is None


def test_supplied_flag_without_value_skips_discovery(parser):
    block = parser.try_open("```csharp Program.cs --project")
    assert list(block.diagnostics) == ["Required argument missing for option: --project"]
    assert block.project_file is None


class _CountingAccessor(InMemoryDirectoryAccessor):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.find_calls = 0

    def find_files(self, pattern: str) -> list[str]:
        self.find_calls += 1
        return super().find_files(pattern)


def test_project_discovery_runs_once_per_parser():
    accessor = _CountingAccessor({"Program.cs": PROGRAM_CS, "console.csproj": ""}, root="/repo")
    parser = CodeLinkBlockParser(accessor)

    first = parser.try_open("```csharp Program.cs")
    second = parser.try_open("```csharp Program.cs --region Main")
    literal = parser.try_open("```csharp")

    assert accessor.find_calls == 1
    for block in (first, second, literal):
        assert block.project_file == Path("/repo/console.csproj")


def test_failed_project_discovery_is_cached():
    accessor = _CountingAccessor({"Program.cs": PROGRAM_CS}, root="/repo")
    parser = CodeLinkBlockParser(accessor)

    for _ in range(3):
        block = parser.try_open("```csharp Program.cs")
        assert list(block.diagnostics) == ["No project file could be found at path /repo"]
    assert accessor.find_calls == 1


@pytest.mark.parametrize("line", ["```ruby foo.rb", "```", "```python", "text", "    ```csharp a.cs"])
def test_other_blocks_are_declined(parser, line):
    assert parser.try_open(line) is None


def test_missing_source_file(parser):
    block = parser.try_open("```csharp missing.cs")

    assert block is not None
    assert block.source_file == "missing.cs"
    assert list(block.lines) == []
    assert block.has_linked_content is False
    assert list(block.diagnostics) == ["File not found: missing.cs"]


def test_missing_region_names_the_file(parser):
    block = parser.try_open("```csharp Program.cs --region Nope")
    assert list(block.diagnostics) == ['Region "Nope" not found in file /repo/Program.cs']
    assert list(block.lines) == []


def test_region_without_source_file_is_literal(parser):
    block = parser.try_open("```csharp --region Main")
    assert list(block.diagnostics) == []
    assert parser.try_continue(block, "x") is BlockState.CONTINUE


def test_no_project_file_found():
    parser = CodeLinkBlockParser(InMemoryDirectoryAccessor({"Program.cs": PROGRAM_CS}, root="/repo"))

    block = parser.try_open("```csharp Program.cs")
    assert list(block.diagnostics) == ["No project file could be found at path /repo"]
    assert list(block.lines) == PROGRAM_CS.splitlines()

    literal = parser.try_open("```csharp")
    assert list(literal.diagnostics) == []


def test_explicit_project(parser, accessor):
    accessor.add_file("other/other.csproj", "")
    block = parser.try_open("```csharp Program.cs --project other/other.csproj")
    assert block.project_file == Path("/repo/other/other.csproj")
    assert list(block.diagnostics) == []


def test_explicit_project_not_found(parser):
    block = parser.try_open("```csharp Program.cs --project nope.csproj")
    assert block.project_file is None
    assert list(block.diagnostics) == ["Project file not found: nope.csproj"]


def test_diagnostics_order_grammar_then_validation_then_resolution():
    parser = CodeLinkBlockParser(InMemoryDirectoryAccessor({}, root="/repo"))
    block = parser.try_open("```csharp missing.cs --bogus")
    assert list(block.diagnostics) == [
        "Unrecognized command or argument '--bogus'",
        "No project file could be found at path /repo",
        "File not found: missing.cs",
    ]


def test_session_is_carried(parser):
    block = parser.try_open("```csharp --session run-1")
    assert block.session == "run-1"


def test_fence_metadata(parser):
    block = parser.try_open("  ````csharp", line_number=7)
    assert (block.fence_char, block.fence_count, block.indent, block.line_number) == ("`", 4, 2, 7)
    assert block.info == "csharp"


def test_open_block_hook_accepts_a_matched_fence(parser):
    fence = FenceLine(char="`", count=3, indent=0, info="csharp Program.cs --region Main")
    block = parser.open_block(fence, 3)
    assert len(block.lines) == 3
    assert parser.open_block(FenceLine(char="~", count=3, indent=0, info="csharp"), 3) is None


def test_literal_lines_accumulate_until_closing_fence(parser):
    block = parser.try_open("```csharp")
    states = _feed(parser, block, ["var x = 1;", "", "  nested();", "```"])

    assert states == [BlockState.CONTINUE, BlockState.CONTINUE, BlockState.CONTINUE, BlockState.BREAK_DISCARD]
    assert block.closed is True
    assert block.lines == ("var x = 1;", "", "  nested();")


def test_longer_closing_fence_with_trailing_spaces_closes(parser):
    block = parser.try_open("```csharp")
    states = _feed(parser, block, ["a", "````   "])
    assert states == [BlockState.CONTINUE, BlockState.BREAK_DISCARD]
    assert block.lines == ("a",)


@pytest.mark.parametrize("line", ["``", "``` x", "~~~", "    ```", "x ```"])
def test_non_closing_lines_keep_the_block_open(parser, line):
    block = parser.try_open("```csharp")
    assert parser.try_continue(block, line) is BlockState.CONTINUE
    assert block.closed is False


def test_shorter_fence_does_not_close(parser):
    block = parser.try_open("`````csharp")
    assert parser.try_continue(block, "````") is BlockState.CONTINUE
    assert parser.try_continue(block, "`````") is BlockState.BREAK_DISCARD
    assert block.lines == ("````",)


def test_linked_content_discards_body_lines(parser):
    block = parser.try_open("```csharp Program.cs --region Main")
    states = _feed(parser, block, ["// placeholder", "more", "```"])

    assert states == [BlockState.CONTINUE_DISCARD, BlockState.CONTINUE_DISCARD, BlockState.BREAK_DISCARD]
    assert list(block.lines) == PROGRAM_CS.splitlines()[2:5]


def test_unresolved_source_keeps_literal_body(parser):
    block = parser.try_open("```csharp missing.cs")
    assert parser.try_continue(block, "fallback") is BlockState.CONTINUE
    assert list(block.lines) == ["fallback"]


def test_block_indentation_is_removed_but_nested_indentation_kept(parser):
    block = parser.try_open("  ```csharp")
    _feed(parser, block, ["  a", "    b", " c", "d", "\tt", "  ```"])
    assert block.lines == ("a", "  b", "c", "d", "  t")


def test_closed_block_is_not_mutated(parser):
    block = parser.try_open("```csharp")
    _feed(parser, block, ["x", "```"])

    assert parser.try_continue(block, "late") is BlockState.BREAK_DISCARD
    assert block.lines == ("x",)
    assert block.diagnostics == ()


def test_foreign_block_is_rejected(parser):
    class Other:
        kind = "other"

    with pytest.raises(ValueError, match="requires a code-link block"):
        parser.try_continue(Other(), "x")  # type: ignore[arg-type]


def test_configured_keyword_and_fences():
    accessor = InMemoryDirectoryAccessor({"Library.fs": "let x = 1", "lib.fsproj": ""})
    parser = CodeLinkBlockParser(
        accessor, CodeLinkConfig(keyword="fsharp", fence_chars=["`", "~"], project_glob="*.fsproj")
    )

    assert parser.try_open("```csharp Library.fs") is None
    block = parser.try_open("~~~fsharp Library.fs")
    assert list(block.lines) == ["let x = 1"]
    assert list(block.diagnostics) == []
    assert parser.try_continue(block, "```") is BlockState.CONTINUE_DISCARD
    assert parser.try_continue(block, "~~~") is BlockState.BREAK_DISCARD
