"""
Parts Inventory - Input Validator
=================================
Whitelist untuk value yang diketik operator.

Value hanya boleh berisi huruf Latin, huruf Cyrillic, angka, whitespace ASCII,
tanda '-' dan '.'. Kolom numerik juga harus berupa integer.
"""

import re

from partsdb.errors import InvalidCharacters, NotANumber

# Whitelist karakter untuk free-text value (whitespace hanya ASCII: spasi, \t, \n, \f, \r)
WHITELIST_PATTERN = re.compile(r'[a-zA-Zа-яА-ЯёЁ0-9 \t\n\f\r\-.]+')

# Integer dengan tanda opsional, hanya digit ASCII
INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')

# Kolom yang harus berisi integer
# NOTE: price juga integer-only, walaupun harga bisa pecahan
NUMERIC_COLUMNS = frozenset({
    'price',
    'quantity',
    'founded_year',
    'category_id',
    'manufacturer_id',
    'component_id',
})


def is_numeric_column(column_name):
    return column_name in NUMERIC_COLUMNS


def is_integer(value):
    return INTEGER_PATTERN.fullmatch(value) is not None


def validate(value, column_name):
    """
    Validasi value untuk kolom tertentu.

    Args:
        value: String dari operator (sudah di-strip)
        column_name: Nama kolom tujuan

    Returns:
        str: value yang sama jika valid

    Raises:
        InvalidCharacters: ada karakter di luar whitelist (atau value kosong)
        NotANumber: kolom numerik tapi value bukan integer
    """
    if not WHITELIST_PATTERN.fullmatch(value):
        raise InvalidCharacters(value, column_name)

    if is_numeric_column(column_name) and not is_integer(value):
        raise NotANumber(value, column_name)

    return value


def validate_id(value):
    """Validasi ID record (untuk UPDATE)"""
    if not is_integer(value):
        raise NotANumber(value, 'id')
    return value
