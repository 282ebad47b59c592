"""Record type and line encoding for the append-only log."""
from typing import NamedTuple, Optional

from ..utils.config import Config


SET = 'SET'
DELETE = 'DELETE'
# Recognized when decoding but never written by the engine.
GET = 'GET'

OPERATIONS = (SET, DELETE, GET)


class Record(NamedTuple):
    """A single logged operation."""
    op: str
    key: str
    value: str = ''


def encode_record(record: Record) -> str:
    """
    Encode a record as one newline-terminated line.

    SET records carry three fields (tag, key, value); every other
    tag is written as tag and key only.
    """
    if record.op not in OPERATIONS:
        raise ValueError(f"Unknown operation: {record.op!r}")

    sep = Config.FIELD_SEPARATOR
    if record.op == SET:
        fields = (record.op, record.key, record.value)
    else:
        fields = (record.op, record.key)
    return sep.join(fields) + Config.RECORD_DELIMITER


def decode_line(line: str) -> Optional[Record]:
    """
    Decode a single log line.

    Returns None for lines with fewer than two fields or an
    unrecognized tag. The value is taken only when the line has
    exactly three fields.
    """
    fields = line.split(Config.FIELD_SEPARATOR)
    if len(fields) < 2:
        return None

    op = fields[0]
    if op not in OPERATIONS:
        return None

    value = fields[2] if len(fields) == 3 else ''
    return Record(op, fields[1], value)
