"""
Junk Shop Ledger GUI
- Enter weighed-material lines, see the price of each line and the grand total.
- Save transactions, browse/filter/sort saved lines, export CSV or Excel, print a receipt.

Run:
  python junkshop_gui.py

Dependencies:
  pip install openpyxl
(Tkinter ships with most Python distributions; on some Linux you may need: sudo apt-get install python3-tk)
"""
from __future__ import annotations

try:
    import tkinter as tk
    from tkinter import messagebox
except ModuleNotFoundError:
    tk = None
    messagebox = None

from app_logging import get_logger
from config import load_settings, records_path, settings_path
from errors import StoreError
from storage import JsonRecordStore

logger = get_logger(__name__)


def main():
    """Main entry point for the application"""
    if tk is None:
        raise RuntimeError(
            'tkinter is not available. Install it (e.g., on Ubuntu: sudo apt-get install python3-tk) '
            'and re-run to use the GUI.'
        )

    from main_app import JunkShopApp

    path = settings_path()
    settings = load_settings(path)
    root = tk.Tk()
    try:
        store = JsonRecordStore(records_path(settings))
    except StoreError as ex:
        logger.error("Cannot open record store: %s", ex)
        root.withdraw()
        messagebox.showerror("Junk Shop Ledger", str(ex))
        root.destroy()
        return 1

    JunkShopApp(root, settings, store, path)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
