"""Core storage engine components."""
from .record import Record, SET, DELETE, GET
from .log import RecordLog
from .engine import KVEngine

__all__ = ['KVEngine', 'RecordLog', 'Record', 'SET', 'DELETE', 'GET']
