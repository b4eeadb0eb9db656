import logging


logger = logging.getLogger(__name__)


class BaseStore:
    """Mapping of string keys to non-negative counts.

    Unknown keys read as 0. increment() creates a key at 1.
    """

    def get(self, key):
        raise NotImplementedError()

    def increment(self, key):
        raise NotImplementedError()


class HeapStore(BaseStore):
    def __init__(self):
        self.counts = {}

    def get(self, key):
        return self.counts.get(key, 0)

    def increment(self, key):
        self.counts[key] = self.counts.get(key, 0) + 1


class MappingStore(BaseStore):
    """Counts kept in a mapping owned by the caller.

    Anything with __getitem__/__setitem__/get works: a dict, a shelf, a
    dbm database. Values are read back through int(). Pass as_text=True
    for mappings that only hold strings or bytes, such as dbm, and counts
    are written as decimal strings.
    """

    def __init__(self, mapping, as_text=False):
        self.mapping = mapping
        self.as_text = as_text

    def get(self, key):
        return int(self.mapping.get(key, 0))

    def increment(self, key):
        count = self.get(key) + 1
        self.mapping[key] = str(count) if self.as_text else count


class SqliteStore(BaseStore):
    def __init__(self, db):
        self.db = db
        self.db.execute(
            'CREATE TABLE IF NOT EXISTS '
            'counters(name PRIMARY KEY, count) '
            'WITHOUT ROWID'
        )
        logger.debug("counters table ready")

    def get(self, key):
        for (count,) in self.db.execute(
            "SELECT count "
            "FROM counters "
            "WHERE name = ?",
            (key,)
        ):
            return count
        return 0

    def increment(self, key):
        self.db.execute(
            "INSERT INTO counters(name, count) "
            "VALUES (?, 1) "
            "ON CONFLICT(name) DO UPDATE "
            "SET count = count + 1",
            (key,)
        )
