"""
Parts Inventory - Table Renderer
================================
Tampilkan result set sebagai tabel teks yang rata kolom.

Format:
  id | name
  ---+-----
  1  | A
  2  | BB

  Found records: 2
"""

from dataclasses import dataclass
from typing import Tuple

COLUMN_SEPARATOR = ' | '
DIVIDER_SEPARATOR = '-+-'


def cell_text(value):
    """NULL -> string kosong, selain itu (termasuk NaN) representasi teks biasa"""
    if value is None:
        return ''
    return str(value)


@dataclass(frozen=True)
class ResultGrid:
    """Header dan rows (semua cell sudah string) dari satu query"""

    headers: Tuple[str, ...]
    rows: Tuple[Tuple[str, ...], ...]

    def __post_init__(self):
        for row in self.rows:
            if len(row) != len(self.headers):
                raise ValueError(
                    f"Row has {len(row)} cells, expected {len(self.headers)}"
                )

    @classmethod
    def from_frame(cls, df):
        """Convert DataFrame hasil query ke ResultGrid"""
        headers = tuple(str(col) for col in df.columns)
        rows = tuple(
            tuple(cell_text(value) for value in record)
            for record in df.itertuples(index=False, name=None)
        )
        return cls(headers=headers, rows=rows)

    @property
    def row_count(self):
        return len(self.rows)

    def is_empty(self):
        return not self.rows


def column_widths(headers, rows):
    """Lebar tiap kolom = max(panjang header, panjang semua cell di kolom itu)"""
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            if len(cell) > widths[i]:
                widths[i] = len(cell)
    return widths


def pad_right(text, width):
    """Pad dengan spasi sampai width. Text yang lebih panjang dipotong ke width."""
    if len(text) >= width:
        return text[:width]
    return text + ' ' * (width - len(text))


def format_line(cells, widths):
    return COLUMN_SEPARATOR.join(pad_right(cell, w) for cell, w in zip(cells, widths))


def format_divider(widths):
    return DIVIDER_SEPARATOR.join('-' * w for w in widths)


def render(headers, rows):
    """
    Render headers + rows jadi blok teks.

    Args:
        headers: list nama kolom
        rows: list of list string (gunakan cell_text untuk value mentah)

    Returns:
        str: header, divider, data rows, baris kosong, lalu 'Found records: N'
    """
    headers = [str(h) for h in headers]
    rows = [list(row) for row in rows]
    widths = column_widths(headers, rows)

    lines = [format_line(headers, widths), format_divider(widths)]
    lines.extend(format_line(row, widths) for row in rows)
    lines.append('')
    lines.append(f"Found records: {len(rows)}")
    return '\n'.join(lines)


def render_grid(grid):
    return render(grid.headers, grid.rows)
