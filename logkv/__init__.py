"""logkv - Persistent Key/Value store on a single append-only log."""
__version__ = '1.0.0'

from .core.engine import KVEngine
from .core.log import RecordLog
from .core.record import Record

__all__ = ['KVEngine', 'RecordLog', 'Record']
