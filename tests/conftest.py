"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from vcs_jump.vcs.locator import VcsInfo, VcsKind


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point the user config at a file that doesn't exist."""
    monkeypatch.setenv("VCS_JUMP_CONFIG", str(tmp_path / "missing-config.yaml"))
    for name in ("VISUAL", "EDITOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def git_vcs(temp_dir):
    """A git backend rooted at the temp directory."""
    return VcsInfo(kind=VcsKind.GIT, root=temp_dir)


@pytest.fixture
def hg_vcs(temp_dir):
    """An hg backend rooted at the temp directory."""
    return VcsInfo(kind=VcsKind.HG, root=temp_dir)


@pytest.fixture
def completed():
    """Factory for fake subprocess.run results."""

    def _make(stdout="", returncode=0, stderr=""):
        result = MagicMock()
        result.stdout = stdout
        result.stderr = stderr
        result.returncode = returncode
        return result

    return _make


@pytest.fixture
def sample_git_diff():
    """Sample "git diff --relative" output with two files."""
    return """diff --git a/new_file.py b/new_file.py
new file mode 100644
index 0000000..e69de29
--- /dev/null
+++ b/new_file.py
@@ -0,0 +1,3 @@
+def hello():
+    print("Hello, world!")
+
diff --git a/existing_file.py b/existing_file.py
index 1234567..abcdefg 100644
--- a/existing_file.py
+++ b/existing_file.py
@@ -1,5 +1,6 @@
 def main():
-    print("old")
+    print("new")
 
 def helper():
     return True
@@ -20,3 +21,4 @@ def other():
 a = 1
 b = 2
+c = 3
"""
