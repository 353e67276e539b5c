# logging_config.py

import logging
import sqlite3
from datetime import datetime, timezone

MAX_LOG_ENTRIES = 10000  # Maximum number of log entries to keep
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class SQLiteHandler(logging.Handler):
    def __init__(self, db_path: str, max_entries: int = MAX_LOG_ENTRIES):
        super().__init__()
        self.db_path = db_path
        self.max_entries = max_entries
        self.create_table()

    def create_table(self):
        """Creates the logs table if it doesn't exist."""
        conn = sqlite3.connect(self.db_path)
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS logs (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    timestamp TEXT NOT NULL,
                    level TEXT NOT NULL,
                    message TEXT NOT NULL,
                    module TEXT,
                    exception TEXT
                )
            """)
            conn.execute("CREATE INDEX IF NOT EXISTS idx_logs_id ON logs (id DESC)")
            conn.commit()
        finally:
            conn.close()

    def emit(self, record):
        """Inserts a log record and drops the oldest rows beyond max_entries."""
        conn = None
        try:
            conn = sqlite3.connect(self.db_path)
            exception = record.exc_text
            if record.exc_info and not exception:
                exception = logging.Formatter().formatException(record.exc_info)

            conn.execute("""
                INSERT INTO logs (timestamp, level, message, module, exception)
                VALUES (:timestamp, :level, :message, :module, :exception)
            """, {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "level": record.levelname,
                "message": record.getMessage(),
                "module": record.module,
                "exception": exception,
            })

            count = conn.execute("SELECT COUNT(*) FROM logs").fetchone()[0]
            if count > self.max_entries:
                conn.execute("""
                    DELETE FROM logs
                    WHERE id IN (
                        SELECT id FROM logs
                        ORDER BY id ASC
                        LIMIT ?
                    )
                """, (count - self.max_entries,))
            conn.commit()
        except Exception:
            self.handleError(record)
        finally:
            if conn is not None:
                conn.close()


# Handlers installed by setup_logging, replaced on the next call.
_installed_handlers = []


def setup_logging(debug_mode: bool = False, db_path: str = "", max_entries: int = MAX_LOG_ENTRIES):
    logger = logging.getLogger()
    level = logging.DEBUG if debug_mode else logging.INFO
    logger.setLevel(level)

    for handler in _installed_handlers:
        logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    # Console handler for real-time logs
    console_handler = logging.StreamHandler()
    _installed_handlers.append(console_handler)

    # SQLite handler for persistent logs
    if db_path:
        _installed_handlers.append(SQLiteHandler(db_path=db_path, max_entries=max_entries))

    for handler in _installed_handlers:
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
