"""Tests for the windwright command line."""

from click.testing import CliRunner

from windwright import __version__
from windwright.cli.main import cli


def _run(*args):
    return CliRunner().invoke(cli, list(args))


# ---------------------------------------------------------------------------
# Group
# ---------------------------------------------------------------------------


class TestGroup:
    def test_version(self):
        result = _run("--version")
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_commands(self):
        result = _run("--help")
        assert result.exit_code == 0
        for name in ("compile", "order", "classes", "variants"):
            assert name in result.output

    def test_verbose(self):
        result = _run("--verbose", "compile", "underline")
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# compile
# ---------------------------------------------------------------------------


class TestCompile:
    def test_success(self):
        result = _run("compile", "underline", "hover:italic")
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            ".underline{text-decoration-line:underline}",
            r".hover\:italic:hover{font-style:italic}",
        ]

    def test_skips_and_reports(self):
        result = _run("compile", "underline", "nope")
        assert result.exit_code == 1
        assert ".underline{text-decoration-line:underline}" in result.output
        assert "ERROR [nope]" in result.output
        assert "1 compiled, 1 skipped" in result.output

    def test_strict(self):
        result = _run("compile", "--strict", "nope", "underline")
        assert result.exit_code == 1
        assert "ERROR [nope]" in result.output
        assert ".underline{" not in result.output

    def test_requires_candidates(self):
        result = _run("compile")
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# order / classes / variants
# ---------------------------------------------------------------------------


class TestOrder:
    def test_sorted(self):
        result = _run("order", "nope", "md:underline", "p-4", "m-4")
        assert result.exit_code == 0
        assert result.output.splitlines() == ["m-4", "p-4", "md:underline", "nope"]

    def test_keys(self):
        result = _run("order", "--keys", "p-4", "nope")
        assert result.output.splitlines() == ["0\tp-4", "-\tnope"]


class TestListing:
    def test_classes_prefix(self):
        result = _run("classes", "--prefix", "bg-red-5")
        assert result.exit_code == 0
        assert result.output.splitlines() == ["bg-red-50\t/0..100", "bg-red-500\t/0..100"]

    def test_classes_static(self):
        result = _run("classes", "--prefix", "underline")
        assert result.output.splitlines() == ["underline"]

    def test_variants(self):
        result = _run("variants")
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert "hover" in lines
        assert "data-[...]" in lines
        assert any(line.startswith("@[...]\t") for line in lines)
        assert lines.index("hover") < lines.index("md")
