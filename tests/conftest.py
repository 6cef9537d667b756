"""Shared fixtures: synthetic project trees and scripted keyboard input."""
import pytest

from config import Settings

BUILD_GRADLE = """\
android {
    defaultConfig {
        applicationId "com.example.app"
        minSdkVersion rootProject.ext.minSdkVersion
        versionCode 5
        versionName "1.0"
    }
}
"""

PROJECT_PBXPROJ = """\
/* Begin XCBuildConfiguration section */
		13B07F941A680F5B00A75B9A /* Debug */ = {
			buildSettings = {
				CURRENT_PROJECT_VERSION = 3;
				MARKETING_VERSION = 1.0;
				PRODUCT_NAME = Example;
			};
			name = Debug;
		};
		13B07F951A680F5B00A75B9A /* Release */ = {
			buildSettings = {
				CURRENT_PROJECT_VERSION = 3;
				MARKETING_VERSION = 1.0;
				PRODUCT_NAME = Example;
			};
			name = Release;
		};
/* End XCBuildConfiguration section */
"""


@pytest.fixture
def project(tmp_path):
    """A project root with an Android and an iOS app."""
    gradle = tmp_path / "android" / "app" / "build.gradle"
    gradle.parent.mkdir(parents=True)
    gradle.write_text(BUILD_GRADLE, encoding="utf-8")

    pbxproj = tmp_path / "ios" / "Example.xcodeproj" / "project.pbxproj"
    pbxproj.parent.mkdir(parents=True)
    pbxproj.write_text(PROJECT_PBXPROJ, encoding="utf-8")
    return tmp_path


@pytest.fixture
def project_settings(project):
    return Settings(project_root=project)


@pytest.fixture
def answers(monkeypatch):
    """Script the answers returned by input(); records every prompt shown."""
    prompts = []

    def script(*lines):
        remaining = iter(lines)

        def fake_input(prompt=""):
            prompts.append(prompt)
            try:
                return next(remaining)
            except StopIteration:
                raise AssertionError(f"Unexpected prompt: {prompt!r}")

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts

    return script
