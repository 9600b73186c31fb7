"""
Dialog windows for Junk Shop Ledger GUI
"""
from __future__ import annotations
from typing import Optional

try:
    import tkinter as tk
    from tkinter import ttk, messagebox, filedialog, simpledialog
except ModuleNotFoundError:
    tk = None
    ttk = None
    messagebox = None
    filedialog = None
    simpledialog = None

from app_logging import get_logger
from models import Language

logger = get_logger(__name__)

LANGUAGE_NAMES = {
    Language.EN: "English",
    Language.ZH_TW: "繁體中文",
    Language.FIL: "Filipino",
}


def ask_unlock_code(master, t: dict) -> Optional[str]:
    """Prompt for the unlock code; None when cancelled"""
    return simpledialog.askstring(t["title"], t["record"]["enterCode"], show="*", parent=master)


class InvoiceDialog(tk.Toplevel):
    """Shows rendered receipt or report text and lets the operator save it as a text file"""

    def __init__(self, master, t: dict, text: str, default_name: str, title: Optional[str] = None):
        super().__init__(master)
        self.heading = title or t["record"]["invoice"]
        self.title(self.heading)
        self.resizable(False, True)
        self.t = t
        self.text = text
        self.default_name = default_name

        frm = ttk.Frame(self, padding=10)
        frm.grid(row=0, column=0, sticky="nsew")
        self.rowconfigure(0, weight=1)
        frm.rowconfigure(0, weight=1)

        lines = text.splitlines() or [""]
        box = tk.Text(frm, width=max(len(s) for s in lines) + 2, height=min(40, len(lines) + 1),
                      font=("Courier", 11), wrap="none")
        box.insert("1.0", text)
        box.configure(state="disabled")
        box.grid(row=0, column=0, sticky="nsew")

        btns = ttk.Frame(frm)
        btns.grid(row=1, column=0, sticky="e", pady=(10, 0))
        ttk.Button(btns, text=t["invoice"]["print"], command=self._save).grid(row=0, column=0, padx=4)
        ttk.Button(btns, text=t["invoice"]["close"], command=self.destroy).grid(row=0, column=1, padx=4)

        self.bind("<Escape>", lambda *_: self.destroy())
        self.grab_set()
        self.transient(master)

    def _save(self):
        """Save receipt text to a file"""
        fp = filedialog.asksaveasfilename(
            parent=self,
            title=self.heading,
            initialfile=self.default_name,
            defaultextension=".txt",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")]
        )
        if not fp:
            return
        try:
            with open(fp, "w", encoding="utf-8") as f:
                f.write(self.text)
            logger.info("Saved %s to %s", self.heading, fp)
        except OSError as ex:
            logger.error("Could not save %s to %s: %s", self.heading, fp, ex)
            messagebox.showerror(self.heading, str(ex), parent=self)


class LanguageDialog(tk.Toplevel):
    """Dialog for choosing the UI language"""

    def __init__(self, master, t: dict, current: Language):
        super().__init__(master)
        self.title(t["settings"]["title"])
        self.resizable(False, False)
        self.result: Optional[Language] = None
        self._by_name = {name: lang for lang, name in LANGUAGE_NAMES.items()}

        frm = ttk.Frame(self, padding=10)
        frm.grid(row=0, column=0, sticky="nsew")

        ttk.Label(frm, text=t["settings"]["selectLanguage"]).grid(row=0, column=0, columnspan=2, sticky="w")
        self.v_lang = tk.StringVar(value=LANGUAGE_NAMES[current])
        ttk.Combobox(frm, textvariable=self.v_lang, values=list(self._by_name),
                     width=18, state="readonly").grid(row=1, column=0, columnspan=2, sticky="w", pady=6)

        ttk.Button(frm, text="OK", command=self._ok).grid(row=2, column=0, pady=(10, 0))
        ttk.Button(frm, text="Cancel", command=self.destroy).grid(row=2, column=1, pady=(10, 0), sticky="e")

        self.bind("<Return>", lambda *_: self._ok())
        self.grab_set()
        self.transient(master)

    def _ok(self):
        self.result = self._by_name.get(self.v_lang.get())
        self.destroy()
