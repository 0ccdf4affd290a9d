from dataclasses import dataclass, field, replace
from typing import Optional

from pubspec_errors import MalformedVersionError


PARTS = ("major", "minor", "patch")


def _parse_component(value, text):
    # str.isdigit accepts non-ASCII digits such as "²"
    if not value or not (value.isascii() and value.isdigit()):
        raise MalformedVersionError(text, f"non-numeric component {value!r}")
    return int(value)


@dataclass(frozen=True)
class VersionString:
    """A pubspec version of the form MAJOR.MINOR.PATCH+BUILD.

    BUILD is opaque metadata and is carried through bumps untouched. The
    major and minor components keep their original text (e.g. "01") until
    that component itself is bumped or reset.
    """
    major: int
    minor: int
    patch: int
    build: str
    major_text: Optional[str] = field(default=None, compare=False, repr=False)
    minor_text: Optional[str] = field(default=None, compare=False, repr=False)

    @classmethod
    def parse(cls, text):
        if not isinstance(text, str):
            raise MalformedVersionError(text, "version must be a string")
        core, sep, build = text.partition("+")
        if not sep:
            raise MalformedVersionError(text, "missing '+BUILD' suffix")
        if not build:
            raise MalformedVersionError(text, "empty build metadata")

        components = core.split(".")
        if len(components) != 3:
            raise MalformedVersionError(
                text, f"expected 3 numeric components, got {len(components)}"
            )
        major, minor, patch = (_parse_component(c, text) for c in components)
        return cls(major, minor, patch, build,
                   major_text=components[0], minor_text=components[1])

    @property
    def version_name(self) -> str:
        major = self.major_text if self.major_text is not None else str(self.major)
        minor = self.minor_text if self.minor_text is not None else str(self.minor)
        return f"{major}.{minor}.{self.patch}"

    @property
    def version_code(self) -> str:
        return self.build

    def bump(self, part: str = "patch") -> "VersionString":
        if part == "major":
            return replace(self, major=self.major + 1, minor=0, patch=0,
                           major_text=None, minor_text=None)
        elif part == "minor":
            return replace(self, minor=self.minor + 1, patch=0, minor_text=None)
        elif part == "patch":
            return replace(self, patch=self.patch + 1)
        raise ValueError(f"unknown version part {part!r}, expected one of {PARTS}")

    def __str__(self):
        return f"{self.version_name}+{self.build}"
