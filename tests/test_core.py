"""
Tests for logging setup and database helpers
"""
import importlib
import logging
import sys

import pytest
from unittest.mock import AsyncMock, MagicMock, Mock
from loguru import logger

import profile_scoring
from profile_scoring.core import database, logging_config
from profile_scoring.core.config import settings


class TestLoggingConfiguration:
    """Test that logging is only configured on request"""

    @pytest.fixture
    def restore_logging(self):
        root = logging.getLogger()
        sqlalchemy_logger = logging.getLogger("sqlalchemy.engine")
        saved = (list(root.handlers), root.level, list(sqlalchemy_logger.handlers))
        yield
        root.handlers[:] = saved[0]
        root.setLevel(saved[1])
        sqlalchemy_logger.handlers = saved[2]
        logger.remove()
        logger.add(sys.stderr)

    def test_import_keeps_host_logging(self, restore_logging):
        received = []
        sink_id = logger.add(received.append, level="INFO")
        handler = logging.StreamHandler()
        logging.getLogger().addHandler(handler)

        importlib.reload(logging_config)
        importlib.reload(profile_scoring)
        logger.info("host message")

        assert len(received) == 1
        assert handler in logging.getLogger().handlers
        logger.remove(sink_id)

    def test_configure_logging_routes_standard_logging(self, restore_logging):
        logging_config.configure_logging()

        assert any(isinstance(h, logging_config.InterceptHandler) for h in logging.getLogger().handlers)
        assert isinstance(logging.getLogger("sqlalchemy.engine").handlers[0], logging_config.InterceptHandler)

        received = []
        logger.add(received.append, level="WARNING")
        logging.getLogger("host.module").warning("routed through loguru")

        assert any("routed through loguru" in message for message in received)


def async_context(value):
    """Async context manager mock yielding value"""
    manager = MagicMock()
    manager.__aenter__ = AsyncMock(return_value=value)
    manager.__aexit__ = AsyncMock(return_value=False)
    return manager


class TestDatabase:
    """Test engine, session and schema helpers"""

    @pytest.fixture
    def session(self, monkeypatch):
        session = Mock()
        session.commit = AsyncMock()
        session.rollback = AsyncMock()
        session.close = AsyncMock()
        monkeypatch.setattr(database, "get_session_factory", lambda: Mock(return_value=async_context(session)))
        return session

    def test_engine_is_created_once_with_pool_settings(self, monkeypatch):
        create_engine = Mock(return_value=Mock())
        monkeypatch.setattr(database, "create_async_engine", create_engine)
        monkeypatch.setattr(database, "_engine", None)
        monkeypatch.setattr(settings, "DEBUG", False)

        engine = database.get_engine()

        assert database.get_engine() is engine
        create_engine.assert_called_once()
        args, kwargs = create_engine.call_args
        assert args == (settings.DATABASE_URL,)
        assert kwargs["pool_size"] == settings.DB_POOL_SIZE
        assert kwargs["max_overflow"] == settings.DB_MAX_OVERFLOW
        assert kwargs["pool_pre_ping"] is True

    def test_debug_engine_uses_null_pool(self, monkeypatch):
        create_engine = Mock(return_value=Mock())
        monkeypatch.setattr(database, "create_async_engine", create_engine)
        monkeypatch.setattr(database, "_engine", None)
        monkeypatch.setattr(settings, "DEBUG", True)

        database.get_engine()

        kwargs = create_engine.call_args.kwargs
        assert kwargs["poolclass"] is database.NullPool
        assert "pool_size" not in kwargs

    @pytest.mark.asyncio
    async def test_session_commits_on_success(self, session):
        async with database.get_db_session() as active:
            assert active is session

        session.commit.assert_awaited_once()
        session.rollback.assert_not_awaited()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_session_rolls_back_on_error(self, session):
        with pytest.raises(ValueError):
            async with database.get_db_session():
                raise ValueError("bad snapshot")

        session.rollback.assert_awaited_once()
        session.commit.assert_not_awaited()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_init_db_creates_snapshot_table(self, monkeypatch):
        conn = Mock()
        conn.run_sync = AsyncMock()
        engine = Mock()
        engine.begin.return_value = async_context(conn)
        monkeypatch.setattr(database, "get_engine", lambda: engine)

        await database.init_db()

        conn.run_sync.assert_awaited_once_with(database.Base.metadata.create_all)
        assert "profile_completeness" in database.Base.metadata.tables

    @pytest.mark.asyncio
    async def test_close_db_disposes_engine(self, monkeypatch):
        engine = Mock()
        engine.dispose = AsyncMock()
        monkeypatch.setattr(database, "_engine", engine)
        monkeypatch.setattr(database, "_session_factory", Mock())

        await database.close_db()

        engine.dispose.assert_awaited_once()
        assert database._engine is None
        assert database._session_factory is None
