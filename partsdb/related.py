"""
Parts Inventory - Related Insert
================================
Insert satu record ke pasangan tabel terkait.

Alur: SelectRelation -> InsertFirst -> ResolveFK -> InsertSecond -> Done
Error di state mana pun -> Failed.

Kedua INSERT TIDAK dibungkus transaksi: jika insert kedua gagal,
record di tabel pertama tetap ada.
"""

import logging

from partsdb.builder import build_insert
from partsdb.resolver import resolve_foreign_key

logger = logging.getLogger(__name__)

SELECT_RELATION = 'select_relation'
INSERT_FIRST = 'insert_first'
RESOLVE_FK = 'resolve_fk'
INSERT_SECOND = 'insert_second'
DONE = 'done'
FAILED = 'failed'


class RelatedInsert:
    """Satu record untuk relasi (first -> second)"""

    def __init__(self, db, catalog, relation):
        self.db = db
        self.catalog = catalog
        self.relation = relation
        self.first_table = catalog.table(relation.first)
        self.second_table = catalog.table(relation.second)
        self.state = SELECT_RELATION
        self.inserted_id = None
        self._foreign_key = None

    def _fail(self):
        self.state = FAILED

    def insert_first(self, values):
        """
        Insert ke tabel pertama dengan RETURNING id.

        Args:
            values: value untuk semua kolom non-id tabel pertama

        Returns:
            id record baru
        """
        self.state = INSERT_FIRST
        try:
            sql, params = build_insert(self.first_table, values, returning=True)
            logger.info("Executing insert into related tables: %s with parameters %s", sql, params)
            row = self.db.query_row(sql, params)
        except Exception:
            self._fail()
            raise

        self.inserted_id = row[0]
        self.state = RESOLVE_FK
        return self.inserted_id

    @property
    def foreign_key(self):
        """Kolom FK di tabel kedua (di-resolve sekali)"""
        if self._foreign_key is None:
            try:
                self._foreign_key = resolve_foreign_key(self.relation, self.catalog)
            except Exception:
                self._fail()
                raise
        return self._foreign_key

    def second_columns(self):
        """Kolom tabel kedua yang harus diisi operator (tanpa id dan FK)"""
        return tuple(c for c in self.second_table.insert_columns if c != self.foreign_key)

    def insert_second(self, values):
        """
        Insert ke tabel kedua, FK diisi otomatis dengan id dari insert pertama.

        Args:
            values: dict {column: value} untuk second_columns()

        Returns:
            int: jumlah row yang terpengaruh
        """
        if self.inserted_id is None:
            self._fail()
            raise RuntimeError("insert_first must succeed before insert_second")

        foreign_key = self.foreign_key
        self.state = INSERT_SECOND
        try:
            ordered = [
                self.inserted_id if column == foreign_key else values[column]
                for column in self.second_table.insert_columns
            ]
            sql, params = build_insert(self.second_table, ordered)
            logger.info("Executing insert into second table: %s with parameters %s", sql, params)
            affected = self.db.execute(sql, params)
        except Exception:
            self._fail()
            raise

        self.state = DONE
        return affected
