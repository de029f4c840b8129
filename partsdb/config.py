"""
Parts Inventory - Configuration
===============================
Konfigurasi dari environment variables.

- DB_HOST, DB_PORT, DB_NAME, DB_SSLMODE: koneksi database
- LOG_FILE: file log (append)
- DB_STARTUP_DELAY, DB_CONNECT_RETRIES, DB_RETRY_DELAY: startup

Username dan password diketik operator saat startup.
"""

import os


# =============================================================================
# DEFAULTS
# =============================================================================
DEFAULTS = {
    'DB_HOST': 'localhost',
    'DB_PORT': '5432',
    'DB_NAME': 'postgres',
    'DB_SSLMODE': 'disable',
    'LOG_FILE': '/logs/app.log',
    'DB_STARTUP_DELAY': '5',
    'DB_CONNECT_RETRIES': '3',
    'DB_RETRY_DELAY': '2',
}


# =============================================================================
# FUNCTIONS
# =============================================================================
def get_setting(name, environ=None):
    """Ambil setting dari environment, fallback ke DEFAULTS"""
    environ = os.environ if environ is None else environ
    value = environ.get(name)
    if value is None or value == '':
        return DEFAULTS[name]
    return value


def _get_number(name, cast, environ=None):
    raw = get_setting(name, environ)
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"Setting {name} must be a number, got '{raw}'")


def load_database_config(user, password, environ=None):
    """
    Load konfigurasi koneksi database.

    Args:
        user: Username dari prompt
        password: Password dari prompt
        environ: Mapping environment (default os.environ)

    Returns:
        dict: {host, port, dbname, user, password, sslmode} untuk psycopg2.connect
    """
    return {
        'host': get_setting('DB_HOST', environ),
        'port': get_setting('DB_PORT', environ),
        'dbname': get_setting('DB_NAME', environ),
        'user': user,
        'password': password,
        'sslmode': get_setting('DB_SSLMODE', environ),
    }


def load_startup_config(environ=None):
    """
    Load konfigurasi startup (log file, delay, retry).

    Returns:
        dict: {log_file, startup_delay, retries, retry_delay}
    """
    return {
        'log_file': get_setting('LOG_FILE', environ),
        'startup_delay': _get_number('DB_STARTUP_DELAY', float, environ),
        'retries': _get_number('DB_CONNECT_RETRIES', int, environ),
        'retry_delay': _get_number('DB_RETRY_DELAY', float, environ),
    }


def describe_database(db_config):
    """Label koneksi untuk ditampilkan/log (tanpa password)"""
    return f"{db_config['dbname']}@{db_config['host']}:{db_config['port']}"
