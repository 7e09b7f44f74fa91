"""
Test configuration and fixtures
"""
import pytest

from jserrorcollector.extractor import XpiExtractor


class FakeDriver:
    """Stands in for a selenium WebDriver; the page holds a JSErrorCollector queue"""

    def __init__(self, queued=None, installed=True):
        self.installed = installed
        self.queued = list(queued or [])
        self.scripts = []
        self.addons = []

    def execute_script(self, script, *args):
        self.scripts.append(script)
        if "pump()" in script:
            if not self.installed:
                return []
            drained, self.queued = self.queued, []
            return drained
        if script.startswith("return !!"):
            return self.installed
        raise AssertionError(f"unexpected script: {script}")

    def install_addon(self, path, temporary=False):
        self.addons.append((path, temporary))
        return "JSErrorCollector@jserrorcollector"


class FakeProfile:
    """Records extensions the way FirefoxProfile.add_extension would receive them"""

    def __init__(self):
        self.extensions = []

    def add_extension(self, extension):
        self.extensions.append(extension)


@pytest.fixture
def extractor(tmp_path):
    """Extractor writing into a per-test temp directory"""
    return XpiExtractor(temp_dir=tmp_path)


@pytest.fixture
def profile():
    return FakeProfile()


@pytest.fixture
def driver_factory():
    return FakeDriver
