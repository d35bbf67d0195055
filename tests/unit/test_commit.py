"""Commit graph tests: creating commits and walking history."""

import pytest
from tent.core.errors import ObjectNotFoundError, MalformedStateError, TentIOError
from tent.core.index import IndexEntry
from tent.core.objects import Commit


def test_current_head_none_before_first_commit(repo):
    """Test a fresh repository has no HEAD commit."""
    assert repo.graph.current_head() is None


def test_first_commit_has_no_parent(repo, write_file):
    """Test the root commit records parent None."""
    write_file('a.txt', 'hello\n')
    entry = repo.add('a.txt')
    commit_hash = repo.commit('first')
    
    commit = repo.graph.read_commit(commit_hash)
    assert commit.parent is None
    assert commit.message == 'first'
    assert commit.files == [entry]


def test_commit_hash_is_hash_of_stored_record(repo):
    """Test the returned hash names the serialized commit."""
    commit_hash = repo.commit('empty')
    commit = repo.graph.read_commit(commit_hash)
    assert commit.hash == commit_hash


def test_second_commit_links_parent(repo, write_file):
    """Test each commit points at the previous HEAD."""
    write_file('a.txt', 'v1\n')
    repo.add('a.txt')
    first = repo.commit('first')
    
    write_file('a.txt', 'v2\n')
    repo.add('a.txt')
    second = repo.commit('second')
    
    assert repo.graph.read_commit(second).parent == first
    assert repo.graph.current_head() == second


def test_empty_commit_allowed(repo):
    """Test committing with nothing staged records an empty file list."""
    commit_hash = repo.commit('nothing')
    assert repo.graph.read_commit(commit_hash).files == []


def test_same_files_different_message(repo):
    """Test commits of identical file sets get distinct hashes."""
    files = [IndexEntry('a.txt', 'a' * 40)]
    first = repo.graph.commit('one', files)
    second = repo.graph.commit('two', files)
    assert first != second


def test_commit_clears_index(repo, write_file):
    """Test the staging area is empty after commit."""
    write_file('a.txt', 'x\n')
    repo.add('a.txt')
    repo.commit('first')
    assert len(repo.read_index()) == 0
    assert not repo.journal_file.exists()


def test_history_order_and_termination(repo):
    """Test history runs newest first and stops at the root."""
    hashes = [repo.commit(f'c{i}') for i in range(4)]
    
    walked = [h for h, _ in repo.graph.history(hashes[-1])]
    assert walked == list(reversed(hashes))


def test_history_restartable(repo):
    """Test history can be walked again from the same start."""
    repo.commit('one')
    repo.commit('two')
    head = repo.graph.current_head()
    
    first_walk = [h for h, _ in repo.graph.history(head)]
    second_walk = [h for h, _ in repo.graph.history(head)]
    assert len(first_walk) == 2
    assert first_walk == second_walk


def test_history_is_lazy(repo):
    """Test history reads commits only as they are consumed."""
    repo.commit('one')
    head = repo.commit('two')
    parent = repo.graph.read_commit(head).parent
    repo.store.object_path(parent).unlink()
    
    walk = repo.graph.history(head)
    assert next(walk)[0] == head
    with pytest.raises(ObjectNotFoundError):
        next(walk)


def test_history_cycle_detected(repo):
    """Test a self-referencing commit chain is reported, not looped over."""
    fake = '1' * 40
    commit = Commit(message='loop', parent=fake, timestamp='2024-01-01T00:00:00.000Z')
    repo.store.object_path(fake).write_bytes(commit.serialize())
    
    with pytest.raises(MalformedStateError):
        list(repo.graph.history(fake))


def test_read_commit_missing(repo):
    """Test reading an unknown commit raises ObjectNotFoundError."""
    with pytest.raises(ObjectNotFoundError, match='Commit'):
        repo.graph.read_commit('0' * 40)


def test_read_commit_on_blob(repo, write_file):
    """Test a blob hash is not accepted as a commit."""
    write_file('a.txt', 'hello\n')
    entry = repo.add('a.txt')
    with pytest.raises(MalformedStateError):
        repo.graph.read_commit(entry.hash)


class TestResolve:
    """Tests for resolving commit references."""
    
    def test_resolve_head(self, repo):
        head = repo.commit('one')
        assert repo.graph.resolve('HEAD') == head
    
    def test_resolve_head_without_commits(self, repo):
        with pytest.raises(ObjectNotFoundError, match='No commits yet'):
            repo.graph.resolve('HEAD')
    
    def test_resolve_full_hash(self, repo):
        head = repo.commit('one')
        assert repo.graph.resolve(head) == head
    
    def test_resolve_prefix(self, repo):
        head = repo.commit('one')
        assert repo.graph.resolve(head[:7]) == head
        assert repo.graph.resolve(head[:7].upper()) == head
    
    @pytest.mark.parametrize('ref', ['abc', 'nothex!', '0' * 40, '../HEAD'])
    def test_resolve_unknown(self, repo, ref):
        repo.commit('one')
        with pytest.raises(ObjectNotFoundError):
            repo.graph.resolve(ref)
    
    def test_resolve_ambiguous(self, repo):
        repo.store.object_path('abcd' + '0' * 36).write_bytes(b'x')
        repo.store.object_path('abcd' + '1' * 36).write_bytes(b'y')
        with pytest.raises(ObjectNotFoundError, match='Ambiguous'):
            repo.graph.resolve('abcd')


class TestRecovery:
    """Tests for finishing interrupted commits."""
    
    def test_interrupted_commit_is_rolled_forward(self, repo, write_file, monkeypatch):
        """Test a commit that failed while moving HEAD completes later."""
        write_file('a.txt', 'hello\n')
        repo.add('a.txt')
        first = repo.commit('first')
        repo.add('a.txt')
        
        def broken_write_head(commit_hash):
            raise TentIOError(str(repo.head_file), 'disk full')
        
        with monkeypatch.context() as m:
            m.setattr(repo.refs, 'write_head', broken_write_head)
            with pytest.raises(TentIOError):
                repo.commit('second')
        
        assert repo.refs.read_head() == first
        assert repo.journal_file.exists()
        pending = repo.journal_file.read_text()
        
        assert repo.graph.recover() == pending
        assert repo.refs.read_head() == pending
        assert repo.graph.read_commit(pending).parent == first
        assert len(repo.read_index()) == 0
        assert not repo.journal_file.exists()
    
    def test_recover_runs_before_operations(self, repo):
        """Test façade operations complete a pending commit first."""
        commit_hash = repo.store.put(Commit.create('pending', None, []).serialize())
        repo.journal_file.write_text(commit_hash)
        
        assert [h for h, _ in repo.log()] == [commit_hash]
        assert not repo.journal_file.exists()
    
    def test_recover_nothing_pending(self, repo):
        assert repo.graph.recover() is None
    
    def test_recover_discards_unknown_journal(self, repo):
        """Test a journal naming a missing object is dropped."""
        repo.journal_file.write_text('0' * 40)
        assert repo.graph.recover() is None
        assert not repo.journal_file.exists()
        assert repo.refs.read_head() is None
