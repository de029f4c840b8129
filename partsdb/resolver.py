"""
Parts Inventory - Relation Resolver
===================================
Tentukan kolom foreign key di tabel kedua yang menunjuk ke tabel pertama.

Urutan prioritas (match pertama menang):
  1. stock <- components          : component_id
  2. components <- categories     : category_id
     components <- manufacturers  : manufacturer_id
  3. Fallback: kolom pertama di tabel kedua yang bukan 'id'
"""

import logging

from partsdb.catalog import PRIMARY_KEY

logger = logging.getLogger(__name__)


def resolve_foreign_key(relation, catalog):
    """
    Resolve FK column untuk relasi.

    Args:
        relation: RelationDescriptor (first, second)
        catalog: Catalog

    Returns:
        str: nama kolom FK di tabel second
    """
    first = catalog.table(relation.first)
    second = catalog.table(relation.second)

    if ('stock' in second.name and first.name == 'components'
            and second.has_column('component_id')):
        return 'component_id'

    if 'components' in second.name:
        if first.name == 'categories' and second.has_column('category_id'):
            return 'category_id'
        if first.name == 'manufacturers' and second.has_column('manufacturer_id'):
            return 'manufacturer_id'

    for column in second.columns:
        if column != PRIMARY_KEY:
            # Bisa salah kolom untuk relasi di luar catalog
            logger.warning(
                "No known foreign key for %s; falling back to column '%s'",
                relation.label, column,
            )
            return column

    raise ValueError(f"Table '{second.name}' has no column to reference '{first.name}'")
