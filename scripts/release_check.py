"""Pre-release checks for monodiff."""

from __future__ import annotations

import argparse
import subprocess
import sys
import tomllib
from pathlib import Path

README_SECTIONS = ("## Installation", "## CLI Usage", "## Library Usage", "ViewOptions")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run release readiness checks.")
    parser.add_argument(
        "--no-tests",
        dest="tests",
        action="store_false",
        help="Skip the pytest run.",
    )
    parser.add_argument(
        "--with-performance",
        action="store_true",
        help="Include tests marked 'performance' in the pytest run.",
    )
    args = parser.parse_args(argv)

    ok = _check_readme()
    ok &= _check_pyproject()
    if args.tests:
        ok &= _run_pytest(include_performance=args.with_performance)
    return 0 if ok else 1


def _check_readme() -> bool:
    readme = Path("README.md")
    if not readme.exists():
        _fail("README.md is missing")
        return False
    text = readme.read_text(encoding="utf-8")
    missing = [phrase for phrase in README_SECTIONS if phrase not in text]
    if missing:
        _fail(f"README.md missing sections: {', '.join(missing)}")
        return False
    _ok("README.md documents installation, the CLI, and the library API")
    return True


def _check_pyproject() -> bool:
    path = Path("pyproject.toml")
    if not path.exists():
        _fail("pyproject.toml is missing")
        return False
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    project = data.get("project", {})

    missing = [name for name in ("name", "version", "description", "readme", "requires-python") if name not in project]
    if missing:
        _fail(f"pyproject.toml missing project metadata fields: {', '.join(missing)}")
        return False
    if project.get("scripts", {}).get("monodiff") != "monodiff.cli:main":
        _fail("pyproject.toml must map the 'monodiff' console script to monodiff.cli:main")
        return False

    markers = data.get("tool", {}).get("pytest", {}).get("ini_options", {}).get("markers", [])
    if not any(marker.startswith("performance:") for marker in markers):
        _fail("pytest 'performance' marker is not registered")
        return False

    _ok("pyproject.toml metadata, console script, and pytest markers look good")
    return True


def _run_pytest(*, include_performance: bool) -> bool:
    command = [sys.executable, "-m", "pytest"]
    if not include_performance:
        command += ["-m", "not performance"]
    _info("Running " + " ".join(command[1:]))
    result = subprocess.run(command, check=False)
    if result.returncode != 0:
        _fail("pytest reported failures")
        return False
    _ok("pytest passed")
    return True


def _ok(message: str) -> None:
    print(f"[ok] {message}")


def _fail(message: str) -> None:
    print(f"[fail] {message}")


def _info(message: str) -> None:
    print(f"[info] {message}")


if __name__ == "__main__":
    raise SystemExit(main())
