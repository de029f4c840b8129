"""Parts Inventory - console untuk database inventory komponen elektronik."""

__version__ = '1.0.0'
