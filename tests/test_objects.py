"""Commit object tests."""

import json
import pytest
from tent.core.errors import MalformedStateError
from tent.core.index import IndexEntry
from tent.core.objects import Commit, utc_timestamp, parse_timestamp
from datetime import datetime, timezone


FILES = [IndexEntry('a.txt', 'a' * 40), IndexEntry('b.txt', 'b' * 40)]


def test_commit_serialize_format():
    """Test commit serializes to compact JSON in a fixed key order."""
    commit = Commit(message='first', parent=None, timestamp='2024-01-01T00:00:00.000Z',
                    files=[IndexEntry('a.txt', 'a' * 40)])
    
    expected = ('{"message":"first","parent":null,"timestamp":"2024-01-01T00:00:00.000Z",'
                '"files":[{"path":"a.txt","hash":"' + 'a' * 40 + '"}]}')
    assert commit.serialize() == expected.encode()


def test_commit_roundtrip():
    """Test deserialize reverses serialize."""
    commit = Commit.create('msg', 'c' * 40, FILES, timestamp='2024-01-01T00:00:00.000Z')
    loaded = Commit.deserialize(commit.serialize())
    
    assert loaded.message == 'msg'
    assert loaded.parent == 'c' * 40
    assert loaded.timestamp == '2024-01-01T00:00:00.000Z'
    assert loaded.files == FILES
    assert loaded.hash == commit.hash


def test_commit_hash_depends_on_message():
    """Test commits with same files and parent but different messages differ."""
    ts = '2024-01-01T00:00:00.000Z'
    one = Commit.create('one', None, FILES, timestamp=ts)
    two = Commit.create('two', None, FILES, timestamp=ts)
    assert one.hash != two.hash


def test_commit_hash_depends_on_timestamp():
    """Test commits with same files and message but different times differ."""
    one = Commit.create('same', None, FILES, timestamp='2024-01-01T00:00:00.000Z')
    two = Commit.create('same', None, FILES, timestamp='2024-01-01T00:00:00.001Z')
    assert one.hash != two.hash


def test_commit_create_sets_timestamp():
    """Test create stamps the commit with the current UTC time."""
    commit = Commit.create('msg', None, [])
    assert commit.timestamp.endswith('Z')
    assert parse_timestamp(commit.timestamp).tzinfo is not None


def test_commit_find_file_returns_first_match():
    """Test find_file returns the first entry for a path."""
    commit = Commit(files=[IndexEntry('a.txt', '1' * 40), IndexEntry('a.txt', '2' * 40)])
    assert commit.find_file('a.txt').hash == '1' * 40
    assert commit.find_file('missing.txt') is None


@pytest.mark.parametrize('data', [
    b'hello\n',
    b'[]',
    b'{"message": "x"}',
    json.dumps({'message': 'x', 'parent': 5, 'timestamp': 't', 'files': []}).encode(),
    json.dumps({'message': 'x', 'parent': None, 'timestamp': 't', 'files': {}}).encode(),
    json.dumps({'message': 'x', 'parent': None, 'timestamp': 't', 'files': [{'path': 'a'}]}).encode(),
    b'\xff\xfe',
])
def test_commit_deserialize_rejects_malformed(data):
    """Test non-commit content raises MalformedStateError."""
    with pytest.raises(MalformedStateError):
        Commit.deserialize(data)


def test_utc_timestamp_format():
    """Test timestamps use millisecond precision and a Z suffix."""
    moment = datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=timezone.utc)
    assert utc_timestamp(moment) == '2024-05-06T07:08:09.123Z'
    assert parse_timestamp('2024-05-06T07:08:09.123Z') == moment.replace(microsecond=123000)
