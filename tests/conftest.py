import pytest
from logkv import KVEngine, RecordLog


@pytest.fixture
def log_path(tmp_path):
    """Path to a log file inside a fresh temporary directory."""
    return str(tmp_path / 'testFile.txt')


@pytest.fixture
def temp_log(log_path):
    """Temporary RecordLog instance."""
    log = RecordLog(log_path)
    yield log
    log.close()


@pytest.fixture
def temp_engine(log_path):
    """Temporary KVEngine instance."""
    engine = KVEngine(log_path)
    yield engine
    engine.close()
