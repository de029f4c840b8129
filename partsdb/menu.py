"""
Parts Inventory - Menu
======================
Shell interaktif: tampilkan menu, baca input operator, panggil
builder/validator/renderer/resolver, tampilkan hasil.

Semua input/output console ada di sini.
"""

import logging

from partsdb.builder import build_filter, build_insert, build_select, build_update
from partsdb.errors import ExecutionError, InvalidMenuChoice, NoMatchingRows, ValidationError
from partsdb.related import RelatedInsert
from partsdb.renderer import ResultGrid, render_grid
from partsdb.validator import is_integer, validate, validate_id

logger = logging.getLogger(__name__)

MENU_ITEMS = [
    ('1', 'View table'),
    ('2', 'Filter'),
    ('3', 'Update record'),
    ('4', 'Add record'),
    ('5', 'Add record to related tables'),
    ('0', 'Exit'),
]


def parse_choice(raw, upper, lower=0):
    """
    Parse pilihan menu numerik.

    Raises:
        InvalidMenuChoice: bukan angka atau di luar [lower, upper]
    """
    if not is_integer(raw):
        raise InvalidMenuChoice(raw, upper, lower)
    choice = int(raw)
    if choice < lower or choice > upper:
        raise InvalidMenuChoice(raw, upper, lower)
    return choice


class PartsInventoryCLI:
    """CLI untuk parts inventory"""

    def __init__(self, db, catalog):
        self.db = db
        self.catalog = catalog

    # =========================================================================
    # INPUT HELPERS
    # =========================================================================
    def prompt(self, text):
        return input(text).strip()

    def read_count(self, text):
        """Baca jumlah (minimal 1). Return None jika tidak valid."""
        raw = self.prompt(text)
        if not is_integer(raw) or int(raw) < 1:
            print("Error: enter a number greater than 0")
            return None
        return int(raw)

    def choose(self, title, options, prompt_text):
        """
        Tampilkan daftar bernomor dan baca pilihan.

        Returns:
            int: index (0-based), atau None untuk 'kembali'

        Raises:
            InvalidMenuChoice
        """
        print(f"\n=== {title} ===")
        for i, option in enumerate(options, 1):
            print(f"{i}. {option}")
        print("0. Back to menu")

        choice = parse_choice(self.prompt(prompt_text), len(options))
        if choice == 0:
            return None
        return choice - 1

    def select_table(self, title):
        """Pilih tabel. Return TableDescriptor atau None."""
        try:
            index = self.choose(title, self.catalog.table_names(), "Select table: ")
        except InvalidMenuChoice as e:
            print(e)
            return None
        if index is None:
            return None
        return self.catalog.tables[index]

    def select_column(self, table, columns=None, title=None):
        """Pilih kolom dari tabel. Return nama kolom atau None."""
        columns = list(columns or table.columns)
        title = title or f"SELECT COLUMN IN '{table.name}'"
        try:
            index = self.choose(title, columns, "Select column: ")
        except InvalidMenuChoice as e:
            print(e)
            return None
        if index is None:
            return None
        return columns[index]

    def read_value(self, column, text=None):
        """Baca value untuk kolom dan validasi (raise ValidationError)"""
        value = self.prompt(text or f"Enter value for '{column}': ")
        return validate(value, column)

    # =========================================================================
    # MAIN MENU
    # =========================================================================
    def show_main_menu(self):
        """
        Loop main menu sampai operator memilih 0.

        Returns:
            int: exit status
        """
        actions = {
            1: self.menu_view_table,
            2: self.menu_filter,
            3: self.menu_update,
            4: self.menu_insert,
            5: self.menu_insert_related,
        }

        while True:
            print("\n=== MENU ===")
            for key, label in MENU_ITEMS:
                print(f"{key}. {label}")

            try:
                raw = self.prompt("Select menu item: ")
                try:
                    choice = parse_choice(raw, len(actions))
                except InvalidMenuChoice as e:
                    print(e)
                    continue

                if choice == 0:
                    print("Exiting...")
                    self.disconnect()
                    return 0

                self.run_operation(actions[choice])

            except (KeyboardInterrupt, EOFError):
                print("\nExiting...")
                self.disconnect()
                return 0

    def run_operation(self, action):
        """Jalankan satu operasi menu. Error hanya membatalkan operasi ini."""
        try:
            action()
        except ValidationError as e:
            print(e)
            logger.info("Input rejected (%s): '%s' for column '%s'",
                        e.__class__.__name__, e.value, e.column)
        except NoMatchingRows as e:
            print(e)
            logger.info("Filter on %s: no records found", e.table)

    def _report_failure(self, what, error):
        logger.error("Error while trying to %s: %s", what, error)
        print(f"Error: could not {what}")

    # =========================================================================
    # 1. VIEW TABLE
    # =========================================================================
    def menu_view_table(self):
        """Menu 1: tampilkan semua record dari tabel"""
        while True:
            try:
                index = self.choose(
                    "SELECT TABLE TO VIEW", self.catalog.table_names(), "Select table: "
                )
            except InvalidMenuChoice as e:
                print(e)
                continue

            if index is None:
                return

            table = self.catalog.tables[index]
            sql, params = build_select(table)
            logger.info("Executing query: %s", sql)

            try:
                df = self.db.query(sql, params)
            except ExecutionError as e:
                self._report_failure("execute query", e)
                continue

            grid = ResultGrid.from_frame(df)
            print("\n" + render_grid(grid))
            logger.info("View table %s: found %d records", table.name, grid.row_count)
            return

    # =========================================================================
    # 2. FILTER
    # =========================================================================
    def menu_filter(self):
        """Menu 2: filter tabel dengan N kondisi (AND)"""
        count = self.read_count("\nEnter number of filters (at least 1): ")
        if count is None:
            return

        table = self.select_table("SELECT TABLE TO FILTER")
        if table is None:
            return

        conditions = []
        for i in range(count):
            print(f"\n=== Filter {i + 1} of {count} ===")
            column = self.select_column(table)
            if column is None:
                return
            value = self.read_value(column, f"Enter value to filter by '{column}': ")
            conditions.append((column, value))

        sql, params = build_filter(table, conditions)
        logger.info("Executing filter: %s with parameters %s", sql, params)

        try:
            df = self.db.query(sql, params)
        except ExecutionError as e:
            self._report_failure("execute filter", e)
            return

        grid = ResultGrid.from_frame(df)
        if grid.is_empty():
            raise NoMatchingRows(table.name)

        print("\n" + render_grid(grid))
        logger.info("Filter table %s: found %d records", table.name, grid.row_count)

    # =========================================================================
    # 3. UPDATE
    # =========================================================================
    def menu_update(self):
        """Menu 3: update satu kolom untuk satu atau beberapa id"""
        count = self.read_count("\nEnter number of records to update (at least 1): ")
        if count is None:
            return

        table = self.select_table("SELECT TABLE TO UPDATE")
        if table is None:
            return

        columns = table.updatable_columns
        if not columns:
            print("Table has no columns to update")
            return

        ids = []
        for i in range(count):
            ids.append(validate_id(self.prompt(f"Enter ID of record {i + 1} to update: ")))

        column = self.select_column(
            table, columns, title=f"SELECT COLUMN TO UPDATE IN '{table.name}'"
        )
        if column is None:
            return

        value = self.read_value(
            column, f"Enter new value for '{column}' in table '{table.name}': "
        )

        sql, params = build_update(table, column, value, ids)
        logger.info("Executing update: %s with parameters %s", sql, params)

        try:
            affected = self.db.execute(sql, params)
        except ExecutionError as e:
            self._report_failure("update records", e)
            return

        print(f"Updated records: {affected}")
        logger.info("Update table %s: %d records updated", table.name, affected)

    # =========================================================================
    # 4. INSERT
    # =========================================================================
    def menu_insert(self):
        """Menu 4: tambah N record ke satu tabel"""
        count = self.read_count("\nEnter number of records to create (at least 1): ")
        if count is None:
            return

        table = self.select_table("SELECT TABLE TO ADD TO")
        if table is None:
            return

        for i in range(count):
            print(f"\n=== Data for record {i + 1} of {count} ===")
            values = [self.read_value(column) for column in table.insert_columns]

            sql, params = build_insert(table, values)
            logger.info("Executing insert: %s with parameters %s", sql, params)

            try:
                self.db.execute(sql, params)
            except ExecutionError as e:
                self._report_failure("add record", e)
                return

            print(f"Record {i + 1} added successfully")
            logger.info("Record added to table %s", table.name)

        print(f"\nTotal records added: {count}")

    # =========================================================================
    # 5. INSERT INTO RELATED TABLES
    # =========================================================================
    def menu_insert_related(self):
        """Menu 5: tambah record ke pasangan tabel terkait"""
        count = self.read_count("\nEnter number of records to create (at least 1): ")
        if count is None:
            return

        labels = [relation.label for relation in self.catalog.relations]
        try:
            index = self.choose("SELECT RELATED TABLES", labels, "Select related tables: ")
        except InvalidMenuChoice as e:
            print(e)
            return
        if index is None:
            return

        relation = self.catalog.relations[index]

        for i in range(count):
            print(f"\n=== Data for related tables {i + 1} of {count} ===")
            if not self._insert_related_record(relation):
                return

        print(f"\nTotal related records added: {count}")

    def _insert_related_record(self, relation):
        """Satu record untuk relasi. Return False jika gagal (batch dibatalkan)."""
        flow = RelatedInsert(self.db, self.catalog, relation)
        first, second = flow.first_table, flow.second_table

        print(f"\n--- Data for table '{first.name}' ---")
        first_values = [self.read_value(column) for column in first.insert_columns]

        try:
            inserted_id = flow.insert_first(first_values)
        except ExecutionError as e:
            self._report_failure("add record to the first table", e)
            return False

        print(f"✓ Record added to '{first.name}' with ID: {inserted_id}")

        foreign_key = flow.foreign_key
        print(f"\n--- Data for table '{second.name}' ---")
        print(f"Foreign key '{foreign_key}' = {inserted_id} will be set in '{second.name}'")
        print(f"  Set automatically: {foreign_key} = {inserted_id}")

        second_values = {
            column: self.read_value(column) for column in flow.second_columns()
        }

        try:
            flow.insert_second(second_values)
        except ExecutionError as e:
            self._report_failure("add record to the second table", e)
            return False

        print(f"✓ Record added to '{second.name}' successfully")
        logger.info("Records added to related tables %s", relation.label)
        return True

    def disconnect(self):
        """Disconnect dari database"""
        if self.db:
            self.db.disconnect()
