"""
Parts Inventory - Errors
========================
Exception yang dipakai di seluruh aplikasi.

Validation error dan ExecutionError hanya membatalkan operasi menu saat ini,
ConnectionFailure saat startup menghentikan program.
"""


class PartsDBError(Exception):
    """Base exception untuk parts inventory"""


class ValidationError(PartsDBError, ValueError):
    """Input operator tidak valid"""

    def __init__(self, value, column=None, message=None):
        self.value = value
        self.column = column
        super().__init__(message or f"Invalid value: '{value}'")


class InvalidCharacters(ValidationError):
    """Value mengandung karakter di luar whitelist"""

    def __init__(self, value, column=None):
        super().__init__(value, column, "Error: value contains invalid characters")


class NotANumber(ValidationError):
    """Value untuk kolom numerik bukan integer"""

    def __init__(self, value, column=None):
        if column in (None, 'id'):
            message = "Error: ID must be a number"
        else:
            message = f"Error: field '{column}' must be a number"
        super().__init__(value, column, message)


class InvalidMenuChoice(PartsDBError, ValueError):
    """Pilihan menu di luar range atau bukan angka"""

    def __init__(self, raw, upper, lower=0):
        self.raw = raw
        self.lower = lower
        self.upper = upper
        super().__init__(f"Error: choose a number from {lower} to {upper}")


class ConnectionFailure(PartsDBError):
    """Gagal connect ke database setelah semua retry"""


class ExecutionError(PartsDBError):
    """Query atau statement gagal di database"""

    def __init__(self, sql, original):
        self.sql = sql
        self.original = original
        super().__init__(str(original).strip() or original.__class__.__name__)


class NoMatchingRows(PartsDBError):
    """Filter tidak menemukan record (bukan hard error)"""

    def __init__(self, table):
        self.table = table
        super().__init__("No records found for the given filters")
