"""
Parts Inventory - Query Builder
===============================
Generate SQL SELECT/UPDATE/INSERT dengan positional placeholder ($1, $2, ...).

Value dari operator SELALU jadi parameter, tidak pernah masuk ke teks SQL.
Hanya nama tabel/kolom dari catalog yang di-interpolate.
"""

import re

from partsdb.catalog import PRIMARY_KEY

# Valid identifier pattern untuk SQL (letters, numbers, underscore)
VALID_IDENTIFIER_PATTERN = re.compile(r'^[a-zA-Z_][a-zA-Z0-9_]*$')


def placeholder(position):
    """Positional placeholder, 1-based"""
    return f"${position}"


def _check_column(table, column):
    """Kolom harus ada di descriptor (dan identifier valid)"""
    if not table.has_column(column) or not VALID_IDENTIFIER_PATTERN.match(column):
        raise ValueError(f"Column '{column}' not in table '{table.name}'")
    return column


def build_select(table):
    """SELECT semua record, urut berdasarkan id"""
    return f"SELECT * FROM {table.name} ORDER BY {PRIMARY_KEY}", []


def build_filter(table, conditions):
    """
    SELECT dengan filter equality yang digabung AND.

    Args:
        table: TableDescriptor
        conditions: list of (column, value), minimal 1

    Returns:
        tuple: (sql, params)
    """
    conditions = list(conditions)
    if not conditions:
        raise ValueError("At least one filter condition is required")

    where_parts = []
    params = []
    for i, (column, value) in enumerate(conditions, 1):
        _check_column(table, column)
        where_parts.append(f"{column} = {placeholder(i)}")
        params.append(value)

    sql = f"SELECT * FROM {table.name} WHERE {' AND '.join(where_parts)} ORDER BY {PRIMARY_KEY}"
    return sql, params


def build_update(table, column, value, ids):
    """
    UPDATE satu kolom untuk satu atau beberapa id.

    Satu id  -> ... WHERE id = $2
    Banyak id -> ... WHERE id IN ($2, $3, ...)
    """
    ids = list(ids)
    if not ids:
        raise ValueError("At least one id is required")
    if column == PRIMARY_KEY:
        raise ValueError(f"Column '{PRIMARY_KEY}' cannot be updated")
    _check_column(table, column)

    params = [value] + ids
    if len(ids) == 1:
        where = f"{PRIMARY_KEY} = {placeholder(2)}"
    else:
        id_placeholders = ', '.join(placeholder(i) for i in range(2, len(ids) + 2))
        where = f"{PRIMARY_KEY} IN ({id_placeholders})"

    sql = f"UPDATE {table.name} SET {column} = {placeholder(1)} WHERE {where}"
    return sql, params


def build_insert(table, values, returning=False):
    """
    INSERT satu record ke semua kolom kecuali id.

    Args:
        table: TableDescriptor
        values: value per kolom, urut sesuai table.insert_columns
        returning: tambahkan RETURNING id (untuk insert ke tabel terkait)
    """
    columns = table.insert_columns
    values = list(values)
    if len(values) != len(columns):
        raise ValueError(
            f"Table '{table.name}' needs {len(columns)} values, got {len(values)}"
        )

    placeholders = ', '.join(placeholder(i) for i in range(1, len(columns) + 1))
    sql = f"INSERT INTO {table.name} ({', '.join(columns)}) VALUES ({placeholders})"
    if returning:
        sql += f" RETURNING {PRIMARY_KEY}"
    return sql, values
