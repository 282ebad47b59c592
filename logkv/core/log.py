"""Append-only record log backed by a single text file."""
import os
from typing import List

from .record import Record, encode_record, decode_line
from ..utils.config import Config


class RecordLog:
    """Append-only log of records, one line per record."""

    def __init__(self, path: str):
        self.path = path
        self.file = open(path, 'ab', buffering=0)  # Unbuffered, nothing held back after a failed write

    def append(self, record: Record):
        """Append a record and force it to disk."""
        self.file.write(encode_record(record).encode(Config.LOG_ENCODING))
        if Config.FSYNC_ON_APPEND:
            os.fsync(self.file.fileno())  # Force write to disk

    def replay(self) -> List[Record]:
        """Read every valid record in the log, oldest first."""
        # newline='' keeps '\n' as the only record delimiter
        with open(self.path, 'r', encoding=Config.LOG_ENCODING, newline='') as f:
            content = f.read()

        records = []
        for line in content.split(Config.RECORD_DELIMITER):
            record = decode_line(line)
            if record is not None:
                records.append(record)
        return records

    def close(self):
        """Close log file."""
        self.file.close()
