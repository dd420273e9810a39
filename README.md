# modrelease

A small release helper for a repository that holds several Go modules, each
with its own `go.mod`. It keeps the modules' version strings and the
requirements between them in step, and then creates the git tags for a
release.

## Install

    pip install .

It needs `go` and `git` on the `PATH`.

## Usage

Run it from the root of the repository:

    modrelease prepare

`prepare` does the following for every `go.mod` under the current directory,
walking the tree in name order:

- In the module's `version.go`, if there is one, it rewrites every
  `return "..."` statement so that it returns the version planned for that
  module. A module with no `version.go` is left as it is.
- It reads the module's requirements with `go mod edit -json`. Each
  requirement whose path starts with the repository's own module path
  (`PREFIX` in `modrelease.release`) is set to the planned version of that
  module with `go mod edit -require=<path>@v<version>`.

When it has finished, commit the changes in the working tree and open a pull
request for review.

    modrelease tag

`tag` runs `git tag` once for each module in `VERSIONS`, naming the tag after
the module's directory and version, such as `exporter/trace/v1.11.2`, or
`v0.35.2` for the root module. It prints `Creating tag <name>` before each
one. When it has finished, push the tags with `git push --tags`.

With no argument, or with more than one, it prints a usage line and exits with
status 1. If a `go` or `git` command fails, or its output cannot be parsed, the
error is printed to standard error and the exit status is 1. Any other single
argument does nothing and exits with status 0.

## Versions

The planned versions are fixed in the module: `STABLE` and `UNSTABLE`, and the
`VERSIONS` mapping from a module directory (relative to the repository root,
with a trailing `/`, or `""` for the root) to one of them. A module whose
directory is not in `VERSIONS` gets an empty version.

## As a library

```python
from modrelease.release import Module, all_modules, prepare

for module in all_modules("."):
    print(module.path, module.version())

prepare(".")
```

`all_modules(root)` returns a `Module` for every `go.mod` under `root`.
`Module` holds the `path` of a `go.mod` file and the `root` of the repository.
Its methods are `requires()`, `edit_requirement(dep, version)`, `version()`
and `update_version()`. Failures of the `go` and `git` commands raise
`ReleaseError`.

## What it does not do

It does not read versions from a configuration file or the command line, does
not commit the changes that `prepare` makes, and does not push the tags that
`tag` creates.