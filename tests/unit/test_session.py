"""
Unit tests for session management.

Tests SQLiteSession, MemorySession, and SessionData.
"""
import pytest
import tempfile
from pathlib import Path

from chilipy.core.session import (
    SessionStorage,
    SessionData,
    SQLiteSession,
    MemorySession
)

URL = 'https://cube.example.org/api/v1/'


def make_data(username='alice', token='tok123'):
    return SessionData(url=URL, username=username, token=token)


class TestSessionData:
    """Tests for SessionData model."""
    
    def test_create_session_data(self):
        data = make_data()
        
        assert data.url == URL
        assert data.username == 'alice'
        assert data.token == 'tok123'
    
    def test_session_data_to_dict(self):
        result = make_data().to_dict()
        
        assert result['url'] == URL
        assert result['username'] == 'alice'
        assert result['token'] == 'tok123'
        assert 'created_at' in result
        assert 'updated_at' in result
    
    def test_session_data_from_dict(self):
        data = SessionData.from_dict({
            'url': URL,
            'username': 'alice',
            'token': 'tok123',
            'created_at': '2024-01-01T12:00:00',
            'updated_at': '2024-01-01T12:00:00'
        })
        
        assert data.username == 'alice'
        assert data.created_at.year == 2024
    
    def test_json_round_trip(self):
        data = make_data()
        
        loaded = SessionData.from_json(data.to_json())
        
        assert loaded.token == data.token
        assert loaded.created_at == data.created_at
    
    def test_is_valid(self):
        assert make_data().is_valid() is True
        assert make_data(token='').is_valid() is False
        assert make_data(username='').is_valid() is False
    
    def test_update_timestamp(self):
        data = make_data()
        old_time = data.updated_at
        
        data.update_timestamp()
        
        assert data.updated_at >= old_time


class TestMemorySession:
    """Tests for MemorySession storage."""
    
    def test_implements_protocol(self):
        assert isinstance(MemorySession(), SessionStorage)
    
    def test_save_and_load(self):
        session = MemorySession()
        session.save(make_data())
        
        loaded = session.load()
        
        assert loaded is not None
        assert loaded.token == 'tok123'
    
    def test_exists_and_delete(self):
        session = MemorySession()
        assert session.exists() is False
        
        session.save(make_data())
        assert session.exists() is True
        
        session.delete()
        assert session.exists() is False
        assert session.load() is None

    def test_save_refreshes_timestamp(self):
        data = make_data()
        data.updated_at = data.created_at.replace(year=2000)

        with MemorySession() as session:
            session.save(data)

            assert session.load().updated_at.year != 2000


class TestSQLiteSession:
    """Tests for SQLiteSession storage."""
    
    @pytest.fixture
    def temp_session(self):
        """Create a temporary session file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            session = SQLiteSession("test_session", Path(tmpdir))
            yield session
            session.close()
    
    def test_implements_protocol(self, temp_session):
        assert isinstance(temp_session, SessionStorage)
    
    def test_creates_session_file(self, tmp_path):
        session = SQLiteSession("chris", tmp_path)
        
        assert (tmp_path / "chris.session").exists()
        assert session.path == tmp_path / "chris.session"
        
        session.close()
    
    def test_full_path_name(self, tmp_path):
        session = SQLiteSession(str(tmp_path / "explicit.session"))
        
        assert session.path == tmp_path / "explicit.session"
        
        session.close()
    
    def test_save_and_load(self, temp_session):
        temp_session.save(make_data())
        
        loaded = temp_session.load()
        
        assert loaded is not None
        assert loaded.url == URL
        assert loaded.username == 'alice'
        assert loaded.token == 'tok123'
    
    def test_exists_and_delete(self, temp_session):
        assert temp_session.exists() is False
        
        temp_session.save(make_data())
        assert temp_session.exists() is True
        
        temp_session.delete()
        assert temp_session.exists() is False
        assert temp_session.load() is None
    
    def test_delete_file(self, tmp_path):
        session = SQLiteSession("test_session", tmp_path)
        session.save(make_data())
        
        session.delete_file()
        
        assert not session.path.exists()
    
    def test_persistence(self, tmp_path):
        """Test that data persists across sessions."""
        first = SQLiteSession("persistent", tmp_path)
        first.save(make_data(token='persistent-token'))
        first.close()
        
        second = SQLiteSession("persistent", tmp_path)
        loaded = second.load()
        second.close()
        
        assert loaded.token == 'persistent-token'
    
    def test_overwrite_session(self, temp_session):
        """Test that saving replaces the previous login."""
        temp_session.save(make_data(username='first', token='t1'))
        temp_session.save(make_data(username='second', token='t2'))
        
        loaded = temp_session.load()
        
        assert loaded.username == 'second'
        assert loaded.token == 't2'
    
    def test_context_manager(self, tmp_path):
        with SQLiteSession("context_test", tmp_path) as session:
            session.save(make_data())
            assert session.exists() is True
