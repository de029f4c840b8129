#!/usr/bin/env python3
"""
Parts Inventory
===============
Console untuk melihat, memfilter, mengubah, dan menambah data
inventory komponen elektronik di PostgreSQL.

Jalankan dengan: python run.py
"""

import sys
import os

# Tambahkan root directory ke path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from partsdb.app import main

if __name__ == "__main__":
    sys.exit(main())
