import subprocess
import sys
from pathlib import Path


def _run(tmp_path: Path, text: str, *extra: str) -> subprocess.CompletedProcess:
    path = tmp_path / "cmds.txt"
    path.write_text(text)
    return subprocess.run(
        [sys.executable, "cmdfile.py", str(path), *extra],
        cwd=Path(__file__).resolve().parents[1],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        timeout=30,
    )


def test_cli_prints_expanded_lines(tmp_path: Path):
    res = _run(
        tmp_path,
        (
            "MACRO foo = a b\n"
            "LONG MACRO bar\n"
            "x y\n"
            "z\n"
            "END MACRO\n"
            "foo() c\n"
            "pre bar() post\n"
        ),
    )
    assert res.returncode == 0, res.stdout + res.stderr
    assert res.stdout.splitlines() == ["a b c", "pre x y post", "pre z post"]


def test_cli_requotes_tokens_with_spaces(tmp_path: Path):
    res = _run(tmp_path, 'run --name "two words"\n')
    assert res.returncode == 0, res.stdout + res.stderr
    assert res.stdout == 'run --name "two words"\n'


def test_cli_unresolved_macro(tmp_path: Path):
    res = _run(tmp_path, "ok\nrun baz()\n")
    assert res.returncode != 0
    assert "baz" in res.stdout
    assert res.stdout.startswith("Error:")
    assert len(res.stdout.splitlines()) == 1


def test_cli_unterminated_long_macro(tmp_path: Path):
    res = _run(tmp_path, "LONG MACRO bar\nx\n")
    assert res.returncode != 0
    assert "LONG MACRO bar" in res.stdout


def test_cli_missing_file(tmp_path: Path):
    res = subprocess.run(
        [sys.executable, "cmdfile.py", str(tmp_path / "nope.txt")],
        cwd=Path(__file__).resolve().parents[1],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )
    assert res.returncode != 0
    assert "nope.txt" in res.stdout


def test_cli_cycle_terminates(tmp_path: Path):
    res = _run(tmp_path, "MACRO a = a()\nrun a()\n")
    assert res.returncode == 0, res.stderr
    assert res.stdout == "run a()\n"


def test_cli_max_passes(tmp_path: Path):
    res = _run(tmp_path, "MACRO a = b()\nMACRO b = done\nrun a()\n", "--max-passes", "1")
    assert res.returncode == 0, res.stderr
    assert res.stdout == "run b()\n"


def test_cli_output_file(tmp_path: Path):
    out = tmp_path / "expanded.txt"
    res = _run(tmp_path, "MACRO foo = a\nfoo() b\n", "-o", str(out))
    assert res.returncode == 0, res.stderr
    assert res.stdout == ""
    assert out.read_text() == "a b\n"


def test_cli_verbose_logs_to_stderr(tmp_path: Path):
    res = _run(tmp_path, "MACRO foo = a\nfoo()\n", "-v")
    assert res.returncode == 0, res.stderr
    assert res.stdout == "a\n"
    assert "Expansion iteration" in res.stderr
    assert "cmdfile.parser" in res.stderr
