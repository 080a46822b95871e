"""Tests for the protodump command."""

from pathlib import Path

from typer.testing import CliRunner

from protodump.main import app

runner = CliRunner()


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


_MIXED = (
    "#include <stdlib.h>\n"
    "\n"
    "// allocate a pool\n"
    "int *pool_new(int n) { return malloc(n * sizeof(int)); }\n"
    "\n"
    "static void pool_reset(int *p) {}\n"
    "\n"
    "int pool_size(const int *p)\n"
    "{\n"
    "    return 0;\n"
    "}\n"
)


class TestFileInput:
    def test_prints_prototypes(self, tmp_path: Path) -> None:
        src = _write(tmp_path / "pool.c", _MIXED)
        result = runner.invoke(app, ["--file", str(src)])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "int *pool_new(int n);",
            "int pool_size(const int *p);",
        ]

    def test_empty_file(self, tmp_path: Path) -> None:
        src = _write(tmp_path / "empty.c", "")
        result = runner.invoke(app, ["--file", str(src)])
        assert result.exit_code == 0
        assert result.stdout == ""

    def test_missing_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["--file", str(tmp_path / "missing.c")])
        assert result.exit_code == 1

    def test_latin1_encoding(self, tmp_path: Path) -> None:
        src = tmp_path / "l1.c"
        src.write_bytes(b"char *cafe(void) { return \"\xe9\"; }\n")
        bad = runner.invoke(app, ["--file", str(src)])
        assert bad.exit_code == 1
        good = runner.invoke(app, ["--file", str(src), "--encoding", "latin-1"])
        assert good.exit_code == 0
        assert good.stdout.splitlines() == ["char *cafe(void);"]


class TestStdinInput:
    def test_reads_stdin(self) -> None:
        result = runner.invoke(app, ["--stdin"], input="int foo(int x) { return x; }\n")
        assert result.exit_code == 0
        assert result.stdout == "int foo(int x);\n"

    def test_static_only(self) -> None:
        result = runner.invoke(app, ["--stdin"], input="static int bar(void) { return 0; }\n")
        assert result.exit_code == 0
        assert result.stdout == ""

    def test_declaration_only(self) -> None:
        result = runner.invoke(app, ["--stdin"], input="int foo(int);\n")
        assert result.exit_code == 0
        assert result.stdout == ""


class TestUsage:
    def test_no_input_selected(self) -> None:
        result = runner.invoke(app, [])
        assert result.exit_code == 2

    def test_both_inputs_selected(self, tmp_path: Path) -> None:
        src = _write(tmp_path / "a.c", "int a(void) { return 0; }\n")
        result = runner.invoke(app, ["--file", str(src), "--stdin"], input="")
        assert result.exit_code == 2


class TestDebugAndQuery:
    def test_debug_without_extra_patterns_adds_nothing(self, tmp_path: Path) -> None:
        src = _write(tmp_path / "pool.c", _MIXED)
        plain = runner.invoke(app, ["--file", str(src)])
        debug = runner.invoke(app, ["--file", str(src), "-d"])
        assert debug.exit_code == 0
        assert debug.stdout == plain.stdout

    def test_debug_traces_extra_captures(self, tmp_path: Path) -> None:
        src = _write(tmp_path / "pool.c", _MIXED)
        query = _write(tmp_path / "extra.scm", "((comment) @comment)\n")
        plain = runner.invoke(app, ["--file", str(src), "--query", str(query)])
        debug = runner.invoke(app, ["--file", str(src), "--query", str(query), "--debug"])
        assert debug.exit_code == 0
        lines = debug.stdout.splitlines()
        assert 'comment: "// allocate a pool"' in lines
        signatures = [line for line in lines if not line.startswith("comment: ")]
        assert signatures == plain.stdout.splitlines()
        assert signatures == ["int *pool_new(int n);", "int pool_size(const int *p);"]

    def test_bad_query_is_fatal(self, tmp_path: Path) -> None:
        src = _write(tmp_path / "pool.c", _MIXED)
        query = _write(tmp_path / "bad.scm", "((no_such_node) @x)\n")
        result = runner.invoke(app, ["--file", str(src), "--query", str(query)])
        assert result.exit_code == 1

    def test_missing_query_file(self, tmp_path: Path) -> None:
        src = _write(tmp_path / "pool.c", _MIXED)
        result = runner.invoke(app, ["--file", str(src), "--query", str(tmp_path / "nope.scm")])
        assert result.exit_code == 1

    def test_undecodable_query_file(self, tmp_path: Path) -> None:
        src = _write(tmp_path / "pool.c", _MIXED)
        query = tmp_path / "latin.scm"
        query.write_bytes(b"((comment) @c\xff)\n")
        result = runner.invoke(app, ["--file", str(src), "--query", str(query)])
        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "Failed to read query file" in result.output


class TestEncodingOption:
    def test_encoding_applies_to_stdin(self) -> None:
        code = b'char *cafe(void) { return "\xe9"; }\n'
        bad = runner.invoke(app, ["--stdin"], input=code)
        assert bad.exit_code == 1
        good = runner.invoke(app, ["--stdin", "--encoding", "latin-1"], input=code)
        assert good.exit_code == 0
        assert good.stdout == "char *cafe(void);\n"

    def test_unknown_encoding_is_fatal(self, tmp_path: Path) -> None:
        src = _write(tmp_path / "a.c", "int a(void) { return 0; }\n")
        result = runner.invoke(app, ["--file", str(src), "--encoding", "no-such-codec"])
        assert result.exit_code == 1
        assert "Unknown encoding" in result.output
