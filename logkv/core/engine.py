"""Key/Value engine over the append-only record log."""
from typing import Dict

from .log import RecordLog
from .record import Record, SET, DELETE


class KVEngine:
    """
    Key/Value store that keeps no state besides the log.

    Writes append a single record. Reads replay the whole log and fold
    it in order, so the last SET for a key wins unless a later DELETE
    removes it.
    """

    def __init__(self, path: str):
        self.log = RecordLog(path)

    def put(self, key: str, value: str):
        """Store key-value pair."""
        self.log.append(Record(SET, key, value))

    def get(self, key: str) -> str:
        """Return the effective value for key, or '' if it has none."""
        state: Dict[str, str] = {}
        for record in self.log.replay():
            if record.op == SET:
                state[record.key] = record.value
            elif record.op == DELETE:
                state.pop(record.key, None)
        return state.get(key, '')

    def delete(self, key: str):
        """Write a tombstone for key, whether or not it is set."""
        self.log.append(Record(DELETE, key))

    def close(self):
        """Close the underlying log."""
        self.log.close()
