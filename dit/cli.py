"""The dit command."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from dit.errors import DitCoreError
from dit.helpers import resolve_absolute_path
from dit.project import DIT_ROOT
from dit.repository import Dit


class DitCliError(Exception):
    """An error the dit command reports to the user."""


def _fatal(exc: DitCoreError) -> DitCliError:
    return DitCliError(f"fatal: {exc}")


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser of the dit command."""
    parser = argparse.ArgumentParser(
        prog="dit",
        description="Dit - a minimal version control system similar to Git",
    )
    parser.add_argument("-V", "--version", action="version", version="dit 1.0")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init")

    history = commands.add_parser("history")
    history.add_argument("-c", "--count", type=int, default=5)

    commands.add_parser("status")

    branch = commands.add_parser("branch")
    branch.add_argument("name")
    branch.add_argument("-n", "--new", action="store_true")

    add = commands.add_parser("add")
    add.add_argument("files", nargs="*", type=Path)

    unstage = commands.add_parser("unstage")
    unstage.add_argument("files", nargs="*", type=Path)

    commit = commands.add_parser("commit")
    commit.add_argument("-m", "--message", required=True)
    commit.add_argument("-a", "--author", required=True)

    return parser


def find_dit_root(start_dir: str | os.PathLike[str]) -> Path | None:
    """Return the nearest directory at or above ``start_dir`` holding a dit project."""
    start = Path(start_dir).absolute()
    for directory in (start, *start.parents):
        if (directory / DIT_ROOT).is_dir():
            return directory
    return None


class DitHandler:
    """Runs parsed dit commands against the repository found from a directory."""

    def __init__(self, cwd: str | os.PathLike[str] | None = None) -> None:
        if cwd is None:
            try:
                cwd = Path.cwd()
            except OSError as exc:
                raise DitCliError("Could not get current working directory") from exc
        self.cwd = Path(cwd)
        root = find_dit_root(self.cwd)
        try:
            self.dit = Dit(root) if root is not None else None
        except DitCoreError as exc:
            raise _fatal(exc) from exc

    def handle(self, args: argparse.Namespace) -> None:
        """Run the command described by the parsed arguments."""
        try:
            match args.command:
                case "init":
                    self._init()
                case "history":
                    self._history(args.count)
                case "status":
                    self._status()
                case "add":
                    self._add(args.files)
                case "unstage":
                    self._unstage(args.files)
                case "commit":
                    self._commit(args.author, args.message)
                case "branch":
                    self._branch(args.name, args.new)
                case other:
                    raise DitCliError(f"unknown command '{other}'")
        except DitCoreError as exc:
            raise _fatal(exc) from exc

    def get_dit(self) -> Dit:
        """Return the repository, or report that there is none and exit."""
        if self.dit is None:
            print(
                "error: not a dit project (or any of the parent directories)",
                file=sys.stderr,
            )
            print("hint: initialize with `dit init`", file=sys.stderr)
            raise SystemExit(1)
        return self.dit

    def _resolve(self, file: Path) -> Path:
        return resolve_absolute_path(file if file.is_absolute() else self.cwd / file)

    def _init(self) -> None:
        self.dit = Dit(self.cwd)
        print("[+] Initialized a new dit project.")

    def _history(self, count: int) -> None:
        dit = self.get_dit()
        branch_name = dit.branch()
        commits = dit.history(count)

        if branch_name is not None:
            print(f"History for the branch '{branch_name}':\n")
        else:
            print("History (no head):\n")

        for number, commit in enumerate(commits, start=1):
            print(f"  {number}. {commit.hash[:8]}..")
            print(f"{commit.author} - {commit.message}")

    def _status(self) -> None:
        dit = self.get_dit()
        branch_name = dit.branch()
        staged = dit.staged_files()

        if branch_name is not None:
            print(f"On branch '{branch_name}'")
        else:
            print("No current branch")

        print()
        print("Changes to be committed: ")
        for path in staged.files:
            print(f"       {path}")

    def _add(self, files: list[Path]) -> None:
        for file in files:
            absolute = self._resolve(file)
            self.get_dit().stage(absolute)
            print(f"[+] Added '{file}' to the staged files")

    def _unstage(self, files: list[Path]) -> None:
        for file in files:
            absolute = self._resolve(file)
            self.get_dit().unstage(absolute)
            print(f"[+] Unstaged the file `{file}`")

    def _commit(self, author: str, message: str) -> None:
        self.get_dit().commit(author, message)
        print("[+] Committed the changes")

    def _branch(self, name: str, is_new: bool) -> None:
        if is_new:
            self.get_dit().create_branch(name)
            print(f"[+] Created a new branch '{name}'")
        else:
            print("[-] switching branches is not supported yet", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the dit command and return its exit status."""
    try:
        handler = DitHandler()
    except DitCliError as exc:
        print(exc, file=sys.stderr)
        return 1

    args = build_parser().parse_args(argv)
    try:
        handler.handle(args)
    except DitCliError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())