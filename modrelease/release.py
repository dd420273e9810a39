"""Prepare and tag releases of a multi-module Go repository."""

from __future__ import annotations

import json
import os
import re
import subprocess
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from pathlib import Path

PREFIX = "github.com/GoogleCloudPlatform/opentelemetry-operations-go"

STABLE = "1.11.2"
UNSTABLE = "0.35.2"

VERSIONS: dict[str, str] = {
    "": UNSTABLE,
    "exporter/trace/": STABLE,
    "example/trace/http/": UNSTABLE,
    "exporter/metric/": UNSTABLE,
    "example/metric/": UNSTABLE,
    "exporter/collector/": UNSTABLE,
    "exporter/collector/googlemanagedprometheus/": UNSTABLE,
    "internal/resourcemapping/": UNSTABLE,
    "internal/cloudmock/": UNSTABLE,
    "detectors/gcp/": STABLE,
    "propagator/": UNSTABLE,
    "e2e-test-server/": UNSTABLE,
}

USAGE = "Usage: modrelease (prepare|tag)"

_VERSION_PATTERN = re.compile(rb'return ".*"')


class ReleaseError(Exception):
    """A release step failed."""


def _run(cmd: list[str], *, capture: bool) -> bytes:
    """Run a command, passing its stderr through, and return its stdout."""
    try:
        result = subprocess.run(
            cmd,
            stdout=subprocess.PIPE if capture else subprocess.DEVNULL,
            check=True,
        )
    except (subprocess.CalledProcessError, OSError) as err:
        raise ReleaseError(f'running "{" ".join(cmd)}": {err}') from err
    return result.stdout if capture else b""


@dataclass(frozen=True)
class Module:
    """A go.mod file within the repository rooted at ``root``."""

    path: Path
    root: Path = field(default=Path("."))

    def requires(self) -> list[str]:
        """Return the module paths listed in the require block."""
        cmd = ["go", "mod", "edit", "-json", str(self.path)]
        out = _run(cmd, capture=True)
        try:
            parsed = json.loads(out)
            requirements = parsed.get("Require") or []
            return [req.get("Path", "") for req in requirements]
        except (ValueError, AttributeError, TypeError) as err:
            raise ReleaseError(
                f'parsing output from "{" ".join(cmd)}": {err}'
            ) from err

    def edit_requirement(self, dep: str, version: str) -> None:
        """Set the required version of ``dep`` in this go.mod."""
        _run(
            ["go", "mod", "edit", f"-require={dep}@v{version}", str(self.path)],
            capture=False,
        )

    def version(self) -> str:
        """Return the release version planned for this module, or ''."""
        rel = Path(os.path.relpath(self.path.parent, self.root)).as_posix()
        mod_dir = "" if rel == "." else rel + "/"
        return VERSIONS.get(mod_dir, "")

    def update_version(self) -> None:
        """Rewrite the version string returned in the module's version.go."""
        version_file = self.path.parent / "version.go"
        content = version_file.read_bytes()
        replacement = b'return "' + self.version().encode() + b'"'
        version_file.write_bytes(_VERSION_PATTERN.sub(lambda _m: replacement, content))


def _walk(directory: Path) -> Iterator[Path]:
    for entry in sorted(os.scandir(directory), key=lambda e: e.name):
        path = directory / entry.name
        if entry.name == "go.mod":
            yield path
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(path)


def all_modules(root: str | os.PathLike[str] = ".") -> list[Module]:
    """Return every go.mod under ``root`` in lexical walk order."""
    root_path = Path(root)
    return [Module(path, root_path) for path in _walk(root_path)]


def prepare(root: str | os.PathLike[str] = ".") -> None:
    """Update version files and internal requirements of every module."""
    for module in all_modules(root):
        try:
            module.update_version()
        except FileNotFoundError:
            pass

        for dep in module.requires():
            if not dep.startswith(PREFIX):
                continue
            suffix = dep[len(PREFIX):]
            if suffix:
                suffix = suffix[1:] + "/"
            module.edit_requirement(dep, VERSIONS.get(suffix, ""))


def tag() -> None:
    """Create a git tag for every released module."""
    for directory, version in VERSIONS.items():
        name = f"{directory}v{version}"
        print(f"Creating tag {name}")
        _run(["git", "tag", name], capture=False)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the release command named in ``argv``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(USAGE)
        return 1

    command = args[0]
    try:
        if command == "prepare":
            prepare()
            print(
                "Changes needed for release are in the working tree. "
                "Commit them and make a PR for review."
            )
        elif command == "tag":
            tag()
            print("Now push the newly created tags to Github using git push --tags")
    except (ReleaseError, OSError) as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())