"""Tests for block show command."""

from codelink.api.block.cmd_show import cmd_show

from tests.conftest import PROGRAM_CS


def test_cmd_show_all_blocks(markdown_dir, run_cmd):
    result = run_cmd(cmd_show, path=str(markdown_dir / "README.md"))

    assert result.success is True
    contents = [b["content"] for b in result.output["blocks"]]
    assert contents == ["\n".join(PROGRAM_CS.splitlines()[2:5]), 'Console.WriteLine("literal");']
    assert result.output["warnings"] == []


def test_cmd_show_single_block(markdown_dir, run_cmd):
    result = run_cmd(cmd_show, path=str(markdown_dir / "README.md"), index=1)

    assert result.success is True
    assert len(result.output["blocks"]) == 1
    assert result.output["blocks"][0]["session"] == "one"
    assert result.output["blocks"][0]["line_number"] == 7


def test_cmd_show_index_out_of_range(markdown_dir, run_cmd):
    result = run_cmd(cmd_show, path=str(markdown_dir / "README.md"), index=5)

    assert result.success is False
    assert result.output["errors"] == ["Block index 5 out of range (2 blocks)"]


def test_cmd_show_reports_diagnostics_as_warnings(tmp_path, run_cmd):
    (tmp_path / "app.csproj").write_text("", encoding="utf-8")
    doc = tmp_path / "doc.md"
    doc.write_text("```csharp missing.cs\nfallback\n```\n", encoding="utf-8")

    result = run_cmd(cmd_show, path=str(doc))

    assert result.success is True
    assert result.output["warnings"] == ["File not found: missing.cs"]
    assert result.output["blocks"][0]["content"] == "fallback"
