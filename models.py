"""Data models for the version bump tool."""
import re
from dataclasses import dataclass

# Leading numeric prefix, read the way a lenient float/int parse would
_DECIMAL_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))")
_INTEGER_PREFIX = re.compile(r"^\s*([+-]?\d+)")


def increment_name(name: str) -> str:
    """
    Propose the next version name.

    The leading decimal number of ``name`` is bumped by 0.1 and formatted
    to one decimal place, e.g. "1.2" -> "1.3", "2.9" -> "3.0", "1" -> "1.1".

    Args:
        name: Current version name as found in the project file

    Returns:
        Proposed version name, or "" if ``name`` does not start with a number
    """
    match = _DECIMAL_PREFIX.match(name)
    if not match:
        return ""
    return f"{float(match.group(1)) + 0.1:.1f}"


def increment_code(code: str) -> str:
    """Propose the next version code / build number ("7" -> "8")."""
    match = _INTEGER_PREFIX.match(code)
    if not match:
        return ""
    return str(int(match.group(1)) + 1)


@dataclass
class VersionPair:
    """A version name together with its version code (or build number)."""
    name: str
    code: str

    @property
    def is_complete(self) -> bool:
        """Both values were found and are non-empty."""
        return bool(self.name) and bool(self.code)

    def bumped(self) -> "VersionPair":
        """Return the default proposal for the next release."""
        return VersionPair(
            name=increment_name(self.name),
            code=increment_code(self.code),
        )


@dataclass(frozen=True)
class PlatformFile:
    """Console wording for one platform's project file."""
    label: str  # e.g. "Android", "iOS"
    emoji: str
    code_label: str  # "version code" or "build number"
    name_label: str = "version name"

    @property
    def display(self) -> str:
        return f"{self.emoji} {self.label}"


ANDROID = PlatformFile(label="Android", emoji="🤖", code_label="version code")
IOS = PlatformFile(label="iOS", emoji="🍎", code_label="build number")
