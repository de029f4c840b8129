"""
Parts Inventory - Catalog
=========================
Definisi statis tabel dan relasi yang didukung.

Catalog dibuat sekali saat startup (build_catalog) lalu dipassing ke
komponen yang membutuhkan. Semua descriptor immutable.
"""

from dataclasses import dataclass
from typing import Tuple


# =============================================================================
# TABLES & RELATIONS
# =============================================================================
TABLES = (
    ('categories', ('id', 'name', 'description')),
    ('manufacturers', ('id', 'name', 'country', 'founded_year')),
    ('components', ('id', 'name', 'category_id', 'manufacturer_id', 'model', 'price')),
    ('stock', ('id', 'component_id', 'quantity', 'warehouse_location')),
)

# Urutan ini = urutan di menu "insert into related tables"
RELATIONS = (
    ('components', 'stock', ('component_id',)),
    ('categories', 'components', ('category_id',)),
    ('manufacturers', 'components', ('manufacturer_id',)),
)

PRIMARY_KEY = 'id'


@dataclass(frozen=True)
class TableDescriptor:
    """Nama tabel dan kolom-kolomnya (index 0 selalu primary key 'id')"""

    name: str
    columns: Tuple[str, ...]

    @property
    def insert_columns(self):
        """Kolom yang diisi saat INSERT (semua kecuali id)"""
        return self.columns[1:]

    @property
    def updatable_columns(self):
        return tuple(c for c in self.columns if c != PRIMARY_KEY)

    def has_column(self, column):
        return column in self.columns


@dataclass(frozen=True)
class RelationDescriptor:
    """Pasangan tabel (first -> second) dan FK yang valid di tabel second"""

    first: str
    second: str
    foreign_keys: Tuple[str, ...] = ()

    @property
    def label(self):
        return f"{self.first} and {self.second}"


@dataclass(frozen=True)
class Catalog:
    tables: Tuple[TableDescriptor, ...]
    relations: Tuple[RelationDescriptor, ...]

    def table(self, name):
        """
        Get descriptor berdasarkan nama tabel.

        Raises:
            KeyError: jika tabel tidak ada di catalog
        """
        for table in self.tables:
            if table.name == name:
                return table
        available = ', '.join(self.table_names())
        raise KeyError(f"Table '{name}' not in catalog. Available: {available}")

    def table_names(self):
        return [t.name for t in self.tables]


def build_catalog(tables=TABLES, relations=RELATIONS):
    """Build catalog immutable dari definisi TABLES dan RELATIONS"""
    descriptors = tuple(
        TableDescriptor(name=name, columns=tuple(columns))
        for name, columns in tables
    )
    for descriptor in descriptors:
        if not descriptor.columns or descriptor.columns[0] != PRIMARY_KEY:
            raise ValueError(f"Table '{descriptor.name}' must start with '{PRIMARY_KEY}' column")

    catalog = Catalog(
        tables=descriptors,
        relations=tuple(
            RelationDescriptor(first=first, second=second, foreign_keys=tuple(fks))
            for first, second, fks in relations
        ),
    )

    # Pastikan semua relasi menunjuk ke tabel yang ada
    for relation in catalog.relations:
        catalog.table(relation.first)
        catalog.table(relation.second)

    return catalog
