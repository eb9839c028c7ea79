"""Shared test fixtures for filestats tests."""

from pathlib import Path

import pytest

JAVA_SOURCE = "\n".join(
    [
        "package demo;",
        "",
        "// entry point",
        "public class Main {",
        "    public static void main(String[] args) {",
        '        System.out.println("hi"); // greet',
        "    }",
        "",
        "    int x = 1;",
        "}",
    ]
) + "\n"

SHELL_SOURCE = "#!/bin/sh\necho one\n\necho two\necho three\n"

TEXT_SOURCE = "alpha # not a comment here\nbeta // nor here\ngamma\n"


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Two java files, one shell script and one text file."""
    (tmp_path / "Main.java").write_text(JAVA_SOURCE)
    (tmp_path / "Other.JAVA").write_text(JAVA_SOURCE)
    (tmp_path / "run.sh").write_text(SHELL_SOURCE)
    (tmp_path / "notes.txt").write_text(TEXT_SOURCE)
    return tmp_path


@pytest.fixture
def sample_paths(sample_tree: Path) -> list[Path]:
    return sorted(p for p in sample_tree.iterdir() if p.is_file())


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """Files at depth 1, 2 and 3."""
    (tmp_path / "top.py").write_text("print(1)\n")
    (tmp_path / "README").write_text("readme\n")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "mid.py").write_text("a\nb\n")
    (sub / "mid.java").write_text("// c\n")
    deep = sub / "deep"
    deep.mkdir()
    (deep / "bottom.sh").write_text("# x\n")
    return tmp_path
