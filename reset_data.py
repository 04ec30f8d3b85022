"""
reset_data.py
-------------
Utility script to clear all stored data (vehicles, customers, rentals) from the
pickle files in the configured data directory (LOCATECAR_DATA_DIR).

This script is designed for development and testing purposes.

Usage:
    $ python reset_data.py

After running this script, you can repopulate sample data by executing:
    $ python seeds.py
"""

from locatecar.config import Config
from locatecar.logging_config import configure_logging
from locatecar.models.store import Store


def main():
    """Empty every repository and persist the empty collections."""
    configure_logging(Config.LOG_LEVEL)
    if not Config.DATA_DIR:
        print("LOCATECAR_DATA_DIR is empty; nothing is persisted, nothing to clear.")
        return

    store = Store(Config.DATA_DIR)
    store.clear()

    print(f"Data in {Config.DATA_DIR} has been cleared.")
    print("Tip: run `python seeds.py` to regenerate demo data.")


if __name__ == "__main__":
    main()
