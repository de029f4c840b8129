import re

import pytest

from partsdb.builder import build_filter, build_insert, build_select, build_update

PLACEHOLDER = re.compile(r'\$(\d+)')


def placeholders(sql):
    return [int(n) for n in PLACEHOLDER.findall(sql)]


def test_select(catalog):
    sql, params = build_select(catalog.table('stock'))
    assert sql == 'SELECT * FROM stock ORDER BY id'
    assert params == []


def test_filter_single_condition(catalog):
    sql, params = build_filter(catalog.table('manufacturers'), [('country', 'Japan')])
    assert sql == 'SELECT * FROM manufacturers WHERE country = $1 ORDER BY id'
    assert params == ['Japan']


def test_filter_conditions_joined_by_and_in_order(catalog):
    sql, params = build_filter(
        catalog.table('components'),
        [('manufacturer_id', '3'), ('model', 'NE555'), ('price', '12')],
    )
    assert sql == (
        'SELECT * FROM components '
        'WHERE manufacturer_id = $1 AND model = $2 AND price = $3 ORDER BY id'
    )
    assert params == ['3', 'NE555', '12']
    assert placeholders(sql) == [1, 2, 3]


def test_filter_requires_a_condition(catalog):
    with pytest.raises(ValueError):
        build_filter(catalog.table('stock'), [])


def test_filter_rejects_unknown_column(catalog):
    with pytest.raises(ValueError):
        build_filter(catalog.table('stock'), [('name; DROP TABLE stock', 'x')])


def test_values_never_reach_sql_text(catalog):
    hostile = "x' OR '1'='1"
    sql, params = build_filter(catalog.table('categories'), [('name', hostile)])
    assert hostile not in sql
    assert params == [hostile]


def test_update_single_id(catalog):
    sql, params = build_update(catalog.table('stock'), 'quantity', '25', ['4'])
    assert sql == 'UPDATE stock SET quantity = $1 WHERE id = $2'
    assert params == ['25', '4']


def test_update_many_ids(catalog):
    sql, params = build_update(
        catalog.table('components'), 'price', '99', ['1', '2', '7']
    )
    assert sql == 'UPDATE components SET price = $1 WHERE id IN ($2, $3, $4)'
    assert params == ['99', '1', '2', '7']
    assert len(placeholders(sql)) == len(params)


def test_update_never_touches_id(catalog):
    with pytest.raises(ValueError):
        build_update(catalog.table('stock'), 'id', '1', ['2'])


def test_update_requires_ids(catalog):
    with pytest.raises(ValueError):
        build_update(catalog.table('stock'), 'quantity', '1', [])


def test_insert_skips_id(catalog):
    sql, params = build_insert(
        catalog.table('manufacturers'), ['Texas Instruments', 'USA', '1930']
    )
    assert sql == (
        'INSERT INTO manufacturers (name, country, founded_year) VALUES ($1, $2, $3)'
    )
    assert params == ['Texas Instruments', 'USA', '1930']


def test_insert_returning_id(catalog):
    sql, params = build_insert(
        catalog.table('categories'), ['Capacitors', 'Ceramic and electrolytic'], returning=True
    )
    assert sql == (
        'INSERT INTO categories (name, description) VALUES ($1, $2) RETURNING id'
    )
    assert len(placeholders(sql)) == len(params) == 2


def test_insert_requires_every_column(catalog):
    with pytest.raises(ValueError):
        build_insert(catalog.table('stock'), ['1', '10'])
