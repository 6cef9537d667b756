"""Version updaters for the Android and iOS project files."""
import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Tuple

from config import Settings, settings as default_settings
from models import ANDROID, IOS, PlatformFile, VersionPair
from prompts import ask_text, info, success, warning

logger = logging.getLogger(__name__)


class VersionBumpError(Exception):
    """Fatal condition that stops the bump before anything is written."""


class MissingVersionFieldError(VersionBumpError):
    """A version field could not be located in the project file."""

    def __init__(self, path: str, name_field: str, code_field: str):
        self.path = path
        self.name_field = name_field
        self.code_field = code_field
        super().__init__(f"Could not find {name_field} or {code_field} in {path}")


class VersionFileNotFoundError(VersionBumpError):
    """The project file to update does not exist."""


class VersionUpdater(ABC):
    """
    Reads, prompts for and rewrites the version fields of one project file.

    Subclasses provide the file location, the extraction patterns and the
    substitutions. ``replace_all`` picks between replacing the first
    occurrence of each substitution or every occurrence.
    """

    platform: PlatformFile
    name_field: str
    code_field: str
    name_pattern: re.Pattern
    code_pattern: re.Pattern
    replace_all: bool = False

    def __init__(self, config: Optional[Settings] = None):
        self.settings = config or default_settings

    @abstractmethod
    def locate(self) -> Path:
        """Return the path of the project file to update."""

    @abstractmethod
    def substitutions(self, current: VersionPair, new: VersionPair) -> List[Tuple[str, str]]:
        """Return the (old, new) substrings to swap in the file text."""

    def display_path(self, path: Path) -> str:
        """Path as shown in error messages."""
        return str(path)

    def extract(self, text: str) -> VersionPair:
        """Extract the current version pair using first-match searches."""
        name_match = self.name_pattern.search(text)
        code_match = self.code_pattern.search(text)
        return VersionPair(
            name=self.clean_name(name_match.group(1)) if name_match else "",
            code=code_match.group(1) if code_match else "",
        )

    def clean_name(self, raw: str) -> str:
        return raw

    def replace(self, text: str, current: VersionPair, new: VersionPair) -> Tuple[str, List[str]]:
        """
        Apply the substitutions to the file text.

        Returns:
            Tuple of (updated text, old substrings that were not found)
        """
        missing = []
        for old, updated in self.substitutions(current, new):
            count = text.count(old)
            if not count:
                logger.info(f"'{old}' not found, leaving it unchanged")
                missing.append(old)
                continue
            if self.replace_all:
                logger.info(f"Replacing {count} occurrence(s) of '{old}'")
                text = text.replace(old, updated)
            else:
                text = text.replace(old, updated, 1)
        return text, missing

    def read_versions(self) -> Tuple[Path, str, VersionPair]:
        """
        Locate the project file and extract its current versions.

        Returns:
            Tuple of (path, file text, current version pair)

        Raises:
            VersionFileNotFoundError: if the project file does not exist
            MissingVersionFieldError: if either field is absent or empty
        """
        path = self.locate()
        if not path.is_file():
            raise VersionFileNotFoundError(f"Could not find {self.display_path(path)}")

        # newline="" keeps CRLF / LF endings exactly as they are on disk
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
        current = self.extract(text)
        logger.info(f"Read {self.platform.label} versions from {path}: {current}")

        if not current.is_complete:
            raise MissingVersionFieldError(
                self.display_path(path), self.name_field, self.code_field
            )
        return path, text, current

    def prompt(self, current: VersionPair) -> VersionPair:
        """Show the current values and ask for the new ones."""
        proposal = current.bumped()
        platform = self.platform

        info(f"Current {platform.display} {platform.name_label}:", current.name)
        name = ask_text(
            f"New {platform.label} {platform.name_label}:",
            default=proposal.name,
            empty_message=f"Please enter a {platform.name_label}",
        )

        info(f"Current {platform.display} {platform.code_label}:", current.code)
        code = ask_text(
            f"New {platform.label} {platform.code_label}:",
            default=proposal.code,
            empty_message=f"Please enter a {platform.code_label}",
        )
        return VersionPair(name=name, code=code)

    def run(self) -> VersionPair:
        """Bump the versions interactively and write the file back."""
        path, text, current = self.read_versions()
        new = self.prompt(current)

        updated, missing = self.replace(text, current, new)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(updated)

        platform = self.platform
        success(
            f"Updated {platform.display} {platform.name_label} from",
            current.name, "to", new.name,
            f"and {platform.code_label} from",
            current.code, "to", new.code,
        )
        for old in missing:
            warning(f"'{old}' not found in {self.display_path(path)}, left unchanged")
        return new


class AndroidVersionUpdater(VersionUpdater):
    """Updates versionName / versionCode in android/app/build.gradle."""

    platform = ANDROID
    name_field = "versionName"
    code_field = "versionCode"
    name_pattern = re.compile(r'versionName\s*"([^\r\n]*)"')
    code_pattern = re.compile(r"versionCode\s*(\d*)")

    def locate(self) -> Path:
        return self.settings.resolve(self.settings.android_build_gradle)

    def display_path(self, path: Path) -> str:
        return self.settings.android_build_gradle

    def substitutions(self, current: VersionPair, new: VersionPair) -> List[Tuple[str, str]]:
        return [
            (f'versionName "{current.name}"', f'versionName "{new.name}"'),
            (f"versionCode {current.code}", f"versionCode {new.code}"),
        ]


class IOSVersionUpdater(VersionUpdater):
    """Updates MARKETING_VERSION / CURRENT_PROJECT_VERSION in project.pbxproj."""

    platform = IOS
    name_field = "MARKETING_VERSION"
    code_field = "CURRENT_PROJECT_VERSION"
    name_pattern = re.compile(r"MARKETING_VERSION\s*=\s([^\r\n]*)")
    code_pattern = re.compile(r"CURRENT_PROJECT_VERSION\s*=\s*(\d*)")
    # Xcode repeats both keys once per build configuration
    replace_all = True

    def locate(self) -> Path:
        pattern = self.settings.ios_project_glob
        matches = sorted(self.settings.project_root.glob(pattern))
        if not matches:
            raise VersionFileNotFoundError(
                f"Could not find an Xcode project matching {pattern}"
            )
        if len(matches) > 1:
            logger.info(f"Found {len(matches)} Xcode projects, using {matches[0]}")
        return matches[0]

    def clean_name(self, raw: str) -> str:
        return raw.replace(";", "", 1)

    def substitutions(self, current: VersionPair, new: VersionPair) -> List[Tuple[str, str]]:
        return [
            (f"MARKETING_VERSION = {current.name}", f"MARKETING_VERSION = {new.name}"),
            (f"CURRENT_PROJECT_VERSION = {current.code}", f"CURRENT_PROJECT_VERSION = {new.code}"),
        ]
