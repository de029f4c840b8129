"""
Parts Inventory - Database Manager
==================================
Mengelola koneksi dan operasi database PostgreSQL.

Satu koneksi dipakai selama sesi (autocommit). SQL memakai placeholder
$1, $2, ... yang diterjemahkan ke parameter psycopg2 sebelum dieksekusi.
"""

import logging
import re
import time

import pandas as pd
import psycopg2

from partsdb.config import describe_database
from partsdb.errors import ConnectionFailure, ExecutionError

logger = logging.getLogger(__name__)

PLACEHOLDER_PATTERN = re.compile(r'\$(\d+)')


def to_pyformat(sql, params=None):
    """
    Terjemahkan placeholder $N ke format psycopg2 %(pN)s.

    Returns:
        tuple: (sql, dict params)
    """
    params = list(params or [])
    # '%' literal harus di-escape untuk psycopg2
    sql = sql.replace('%', '%%')

    used = set()

    def replace(match):
        position = int(match.group(1))
        if position < 1 or position > len(params):
            raise ValueError(f"Placeholder ${position} has no parameter ({len(params)} given)")
        used.add(position)
        return f"%(p{position})s"

    converted = PLACEHOLDER_PATTERN.sub(replace, sql)
    if len(used) != len(params):
        raise ValueError(f"{len(params)} parameters given but {len(used)} placeholders used")

    return converted, {f"p{i}": value for i, value in enumerate(params, 1)}


class DatabaseManager:
    """Mengelola koneksi dan operasi database"""

    def __init__(self, db_config, connect_func=None, sleep=time.sleep):
        self.db_config = db_config
        self.conn = None
        self._connect_func = connect_func or psycopg2.connect
        self._sleep = sleep

    def connect(self, retries=3, retry_delay=2, startup_delay=0):
        """
        Connect ke database dan cek dengan ping.

        Args:
            retries: Jumlah percobaan ping
            retry_delay: Detik antar percobaan
            startup_delay: Detik menunggu PostgreSQL sebelum percobaan pertama

        Raises:
            ConnectionFailure: jika semua percobaan gagal
        """
        label = describe_database(self.db_config)

        if startup_delay:
            logger.info("Waiting for PostgreSQL to start (%ss)...", startup_delay)
            self._sleep(startup_delay)

        last_error = None
        for attempt in range(1, retries + 1):
            try:
                if self.conn is None or self.conn.closed:
                    self.conn = self._connect_func(**self.db_config)
                    self.conn.autocommit = True
                self.ping()
                logger.info("Connected to database %s", label)
                return True
            except (psycopg2.Error, ExecutionError) as e:
                last_error = e
                logger.info("Attempt %d: connection check error: %s", attempt, str(e).strip())
                self._close_quietly()
                if attempt < retries:
                    self._sleep(retry_delay)

        logger.error("Error: could not connect to database %s", label)
        raise ConnectionFailure(f"Could not connect to {label}: {last_error}")

    def _close_quietly(self):
        if self.conn is not None:
            try:
                self.conn.close()
            except psycopg2.Error:
                pass
            self.conn = None

    def disconnect(self):
        """Disconnect dari database"""
        if self.conn is not None:
            self._close_quietly()
            logger.info("Database connection closed")

    def ping(self):
        """Cek apakah koneksi masih aktif (SELECT 1)"""
        if self.conn is None or self.conn.closed:
            raise ExecutionError("SELECT 1", ConnectionError("connection is closed"))
        self._run("SELECT 1", None, lambda cur: cur.fetchone())
        return True

    def _run(self, sql, params, fetch):
        query, bound = to_pyformat(sql, params)
        try:
            with self.conn.cursor() as cur:
                cur.execute(query, bound)
                return fetch(cur)
        except psycopg2.Error as e:
            raise ExecutionError(sql, e) from e

    def query(self, sql, params=None):
        """Execute SELECT dan return DataFrame"""
        def fetch(cur):
            columns = [desc[0] for desc in cur.description]
            data = cur.fetchall()
            return pd.DataFrame(data, columns=columns, dtype=object)

        return self._run(sql, params, fetch)

    def query_row(self, sql, params=None):
        """Execute query yang mengembalikan satu row (misal INSERT ... RETURNING id)"""
        row = self._run(sql, params, lambda cur: cur.fetchone())
        if row is None:
            raise ExecutionError(sql, LookupError("query returned no rows"))
        return row

    def execute(self, sql, params=None):
        """Execute UPDATE/INSERT dan return jumlah row yang terpengaruh"""
        return self._run(sql, params, lambda cur: cur.rowcount)
