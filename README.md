# dit

A minimal version control system. It stores file contents as
content-addressed blobs, snapshots them into trees, and records commits on
branches. All of this data lives in a `.dit` directory at the root of your
project.

## Installation

```
pip install .
```

## Command line

Run `dit` anywhere inside a project. It looks for the nearest `.dit`
directory, starting in the current directory and then moving up through its
parents. Commands other than `init` fail with a hint to run `dit init` when
no project is found.

```
dit init                               # create .dit in the current directory
dit add src/main.py README.md          # stage files
dit unstage README.md                  # drop a file from the stage
dit status                             # show the branch and the staged files
dit commit -m "initial commit" -a "Alice | alice@example.com"
dit history --count 10                 # latest commits on this branch (default 5); a negative count shows all
dit branch feature --new               # create a branch at the head commit and switch to it
dit --version
```

Short forms: `-c` for `--count`, `-n` for `--new`, `-m` for `--message`,
`-a` for `--author`, `-V` for `--version`. Errors are printed to standard
error prefixed with `fatal:` and the command exits with status 1.

A new project starts on the branch `main`.

## Library

```python
from dit.repository import Dit

repo = Dit("/path/to/project")        # creates .dit if it is missing
repo.stage("/path/to/project/notes.txt")
repo.commit("Alice | alice@example.com", "add notes")

print(repo.branch())                  # "main"
for commit in repo.history(-1):       # newest first
    print(commit.hash[:8], commit.author, commit.message)
```

`Dit` also offers `unstage(path)`, `create_branch(name)` and
`staged_files()`, which returns a `StagedFiles` whose `files` maps
project-relative paths to the staged copies.

Every error is raised as a subclass of `dit.errors.DitCoreError`: for
example `BranchError` when a branch name is already taken, `ProjectError`
when a file lies outside the project, and `FsError` when a file cannot be
read or written.

## On-disk layout

```
.dit/
  blobs/      file contents, named by their SHA-256 hash
  trees/      snapshots mapping project-relative paths to blob hashes
  commits/    commit metadata as JSON, named by the commit hash
  branches/   one file per branch holding its head commit hash
  stage/      copies of staged files plus the staged_files index
  head        name of the current branch
```

## What it does not do

- `dit branch NAME` without `--new` does not switch branches; it only prints
  that switching is not supported yet.
- There is no checkout or restore: committed contents are kept as blobs, but
  no command writes them back into the working directory.
- `dit status` lists only the staged files. It does not report untracked
  files or files changed since the last commit.
- There are no diffs, merges or file removals from a commit.