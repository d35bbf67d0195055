"""Shared pytest fixtures for Tent tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from tent.core.config import Config
from tent.core.repository import Repository


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.tentconfig and TENT_* variables."""
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', tmp_path / 'global.tentconfig')
    for var in ('TENT_COLOR_UI', 'TENT_CORE_ABBREV', 'TENT_CORE_LOGLEVEL', 'TENT_LOG_LEVEL'):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(temp_dir)
    repo.init()
    return repo


@pytest.fixture
def write_file(repo):
    """Write text into a file of the work tree and return its path."""
    def _write(name, content):
        path = repo.work_tree / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path
    return _write


@pytest.fixture
def repo_with_commits(repo, write_file):
    """
    Repository with two commits.
    
    first:  a.txt = "hello\\n"
    second: a.txt = "hello\\nworld\\n", b.txt = "new file\\n"
    """
    write_file('a.txt', 'hello\n')
    repo.add('a.txt')
    first = repo.commit('first')
    
    write_file('a.txt', 'hello\nworld\n')
    write_file('b.txt', 'new file\n')
    repo.add('a.txt')
    repo.add('b.txt')
    second = repo.commit('second')
    
    repo.first_commit = first
    repo.second_commit = second
    return repo
