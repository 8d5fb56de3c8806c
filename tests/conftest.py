# CLASSIFICATION: COMMUNITY
# Filename: conftest.py v0.1
# Author: Lukas Bower
# Date Modified: 2026-10-19
"""Shared fixtures: isolated log directory and fake JDK tools."""

import os
import stat
import sys
from pathlib import Path

import pytest

from jbuild.config import BuildConfiguration

FAKE_JAVAC = r'''
import sys
from pathlib import Path

args = sys.argv[1:]
print("ARGS " + " ".join(args), flush=True)
out = Path(args[args.index("-d") + 1])
rsp = next(a for a in args if a.startswith("@"))[1:]


def unquote(arg):
    if arg.startswith('"') and arg.endswith('"'):
        return arg[1:-1].replace('\\"', '"').replace("\\\\", "\\")
    return arg


sources = [unquote(a) for a in Path(rsp).read_text(encoding="utf-8").splitlines()]
failed = False
for src in sources:
    text = Path(src).read_text(encoding="utf-8")
    if "syntax error" in text:
        print(f"{src}:1: error: ';' expected", file=sys.stderr, flush=True)
        failed = True
if failed:
    print("1 error", file=sys.stderr, flush=True)
    sys.exit(1)
out.mkdir(parents=True, exist_ok=True)
for src in sources:
    (out / (Path(src).stem + ".class")).write_text("bytecode")
'''

FAKE_JAVA = '''
import sys
from pathlib import Path

args = sys.argv[1:]
cp = Path(args[args.index("-cp") + 1])
entry = args[-1]
if not (cp / (entry + ".class")).exists():
    print(f"Error: Could not find or load main class {entry}", file=sys.stderr)
    sys.exit(1)
print("Hello, world!", flush=True)
print("warning on stderr", file=sys.stderr, flush=True)
print("Goodbye", flush=True)
'''


def _write_tool(path: Path, body: str) -> str:
    path.write_text(f"#!{sys.executable}\n{body}")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(path)


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch):
    log_dir = tmp_path / "log"
    monkeypatch.setenv("JBUILD_LOG", str(log_dir))
    monkeypatch.delenv("JBUILD_CONFIG", raising=False)
    return log_dir


@pytest.fixture
def fake_tools(tmp_path):
    if sys.platform == "win32":
        pytest.skip("fake tools rely on shebang scripts")
    tools = tmp_path / "tools"
    tools.mkdir()
    return (
        _write_tool(tools / "javac", FAKE_JAVAC),
        _write_tool(tools / "java", FAKE_JAVA),
    )


@pytest.fixture
def project(tmp_path, fake_tools):
    root = tmp_path / "proj"
    (root / "src" / "app").mkdir(parents=True)
    (root / "src" / "Main.java").write_text("public final class Main {}\n")
    (root / "src" / "app" / "Util.java").write_text("final class Util {}\n")
    (root / "src" / "README.txt").write_text("not a source\n")
    javac, java = fake_tools
    config = BuildConfiguration(working_dir=str(root), compiler=javac, runtime=java)
    return root, config
