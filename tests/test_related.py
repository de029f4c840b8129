import pytest

from partsdb import related
from partsdb.errors import ExecutionError
from partsdb.related import RelatedInsert


def relation_for(catalog, first, second):
    for relation in catalog.relations:
        if (relation.first, relation.second) == (first, second):
            return relation
    raise AssertionError(f"no relation {first}-{second}")


def test_components_then_stock_chains_returned_id(catalog, fake_db):
    fake_db.returning_ids = [41]
    flow = RelatedInsert(fake_db, catalog, relation_for(catalog, 'components', 'stock'))

    new_id = flow.insert_first(['NE555', '2', '3', 'NE555P', '10'])
    assert new_id == 41
    assert flow.state == related.RESOLVE_FK
    assert flow.foreign_key == 'component_id'
    assert flow.second_columns() == ('quantity', 'warehouse_location')

    flow.insert_second({'quantity': '100', 'warehouse_location': 'A-1'})
    assert flow.state == related.DONE

    (kind1, sql1, params1), (kind2, sql2, params2) = fake_db.calls
    assert kind1 == 'query_row'
    assert sql1 == (
        'INSERT INTO components (name, category_id, manufacturer_id, model, price) '
        'VALUES ($1, $2, $3, $4, $5) RETURNING id'
    )
    assert kind2 == 'execute'
    assert sql2 == (
        'INSERT INTO stock (component_id, quantity, warehouse_location) VALUES ($1, $2, $3)'
    )
    assert params2 == [41, '100', 'A-1']


def test_foreign_key_placed_in_column_order(catalog, fake_db):
    fake_db.returning_ids = [5]
    flow = RelatedInsert(fake_db, catalog, relation_for(catalog, 'manufacturers', 'components'))
    flow.insert_first(['Microchip', 'USA', '1989'])
    flow.insert_second({'name': 'PIC16', 'category_id': '1', 'model': 'F84A', 'price': '3'})

    _, sql, params = fake_db.calls[-1]
    assert sql.startswith('INSERT INTO components (name, category_id, manufacturer_id, model, price)')
    assert params == ['PIC16', '1', 5, 'F84A', '3']


def test_first_insert_failure_marks_failed(catalog, fake_db):
    fake_db.fail_on = 'INSERT INTO categories'
    flow = RelatedInsert(fake_db, catalog, relation_for(catalog, 'categories', 'components'))

    with pytest.raises(ExecutionError):
        flow.insert_first(['Sensors', 'Temperature'])
    assert flow.state == related.FAILED
    assert flow.inserted_id is None


def test_second_insert_failure_keeps_first_row(catalog, fake_db):
    fake_db.returning_ids = [9]
    fake_db.fail_on = 'INSERT INTO stock'
    flow = RelatedInsert(fake_db, catalog, relation_for(catalog, 'components', 'stock'))
    flow.insert_first(['LM317', '1', '1', 'T', '2'])

    with pytest.raises(ExecutionError):
        flow.insert_second({'quantity': '5', 'warehouse_location': 'B'})

    assert flow.state == related.FAILED
    # Tanpa transaksi: insert pertama sudah tereksekusi dan tidak di-rollback
    assert [kind for kind, _, _ in fake_db.calls] == ['query_row', 'execute']


def test_second_insert_requires_first(catalog, fake_db):
    flow = RelatedInsert(fake_db, catalog, relation_for(catalog, 'components', 'stock'))
    with pytest.raises(RuntimeError):
        flow.insert_second({'quantity': '5', 'warehouse_location': 'B'})
    assert flow.state == related.FAILED
