"""
Main application window for Junk Shop Ledger GUI
"""
from __future__ import annotations
from typing import Dict, List, Optional, Tuple

try:
    import tkinter as tk
    from tkinter import ttk, messagebox, filedialog
except ModuleNotFoundError:
    tk = None
    ttk = None
    messagebox = None
    filedialog = None

from app_logging import get_logger
from calculations import grand_total, line_result
from config import save_settings
from csv_handler import export_rows_to_csv, report_filename
from errors import (
    DuplicateSubmissionError,
    EmptyRecordError,
    LockedError,
    SaveRejected,
    StoreError,
    ZeroTotalError,
)
from excel_export import export_excel
from gui_dialogs import InvoiceDialog, LanguageDialog, ask_unlock_code
from invoice import build_invoice, render_invoice_text, render_report_text
from models import ASC, ExpenseRecord, LineItem, ReportRow, Settings
from recording import RecordSession, check_unlock_code
from reports import Report, ReportBrowser
from storage import RecordStore
from translations import get_translation, report_headers
from utils import format_number, today_str

logger = get_logger(__name__)

VIEW_COLUMNS = ("index", "date", "material", "weight", "deduction", "price", "result")


class EntryRow:
    """Tk variables behind one row of the record grid"""

    def __init__(self):
        self.material = tk.StringVar()
        self.weight = tk.StringVar()
        self.deduction = tk.StringVar()
        self.price = tk.StringVar()
        self.result = tk.StringVar(value="0")

    def item(self) -> LineItem:
        return LineItem(self.material.get(), self.weight.get(), self.deduction.get(), self.price.get())

    def clear(self):
        for v in (self.material, self.weight, self.deduction, self.price):
            v.set("")


class JunkShopApp(ttk.Frame):
    """Main application window"""

    def __init__(self, master: tk.Tk, settings: Settings, store: RecordStore, settings_file: Optional[str] = None):
        super().__init__(master, padding=8)
        self.master = master
        self.settings = settings
        self.settings_file = settings_file
        self.store = store
        self.t = get_translation(settings.language)

        self.master.title(f"{self.t['title']} - {settings.company_name}")
        self.master.geometry("980x640")
        self.grid(row=0, column=0, sticky="nsew")
        self.master.rowconfigure(0, weight=1)
        self.master.columnconfigure(0, weight=1)

        # Date is fixed for the life of the window
        self.day = today_str()
        gate = self._ask_unlock if settings.unlock_code else None
        self.session = RecordSession(store, self.day, settings.company_name, unlock_gate=gate)

        self.records: Tuple[ExpenseRecord, ...] = ()
        self.browser = ReportBrowser()
        self.report: Report = self.browser.report(self.records)
        self.view_rows: Dict[str, ReportRow] = {}
        self.entry_rows: List[EntryRow] = []

        self._build_menu()
        self._build_ui()

        self.subscription = store.subscribe(self._on_records)
        self.bind("<Destroy>", self._on_destroy)

    # ---------- Menu ----------
    def _build_menu(self):
        """Build application menu bar"""
        menubar = tk.Menu(self.master)
        filem = tk.Menu(menubar, tearoff=0)
        filem.add_command(label=self.t["view"]["exportCSV"] + "…", command=self.export_csv_dialog)
        filem.add_command(label=self.t["view"]["exportExcel"] + "…", command=self.export_excel_dialog)
        filem.add_command(label=self.t["view"]["printList"] + "…", command=self.print_report)
        filem.add_separator()
        filem.add_command(label="Exit", command=self.master.destroy)
        menubar.add_cascade(label="File", menu=filem)

        settingsm = tk.Menu(menubar, tearoff=0)
        settingsm.add_command(label=self.t["settings"]["language"] + "…", command=self.choose_language)
        menubar.add_cascade(label=self.t["settings"]["title"], menu=settingsm)

        self.master.config(menu=menubar)

    # ---------- UI ----------
    def _build_ui(self):
        """Build main UI with tabs"""
        nb = ttk.Notebook(self)
        nb.grid(row=0, column=0, sticky="nsew")
        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.tab_record = ttk.Frame(nb, padding=8)
        self.tab_view = ttk.Frame(nb, padding=8)
        nb.add(self.tab_record, text=self.t["record"]["title"])
        nb.add(self.tab_view, text=self.t["view"]["title"])

        self._build_record_tab()
        self._build_view_tab()

    def _build_record_tab(self):
        """Build record entry tab"""
        tr = self.t["record"]
        self.tab_record.columnconfigure(0, weight=1)

        head = ttk.Frame(self.tab_record)
        head.grid(row=0, column=0, sticky="ew")
        ttk.Label(head, text=self.settings.company_name, font=("TkDefaultFont", 16, "bold")).pack()
        ttk.Label(head, text=f"{tr['date']}: {self.day}").pack(pady=(2, 6))

        self.grid_frame = ttk.Frame(self.tab_record)
        self.grid_frame.grid(row=1, column=0, sticky="nsew")
        self.tab_record.rowconfigure(1, weight=1)
        headers = (tr["colIndex"], tr["colMaterial"], tr["colWeight"], tr["colDeduction"], tr["colPrice"], tr["colResult"])
        for c, text in enumerate(headers):
            ttk.Label(self.grid_frame, text=text, font=("TkDefaultFont", 10, "bold")).grid(row=0, column=c, padx=3, sticky="w")
        for _ in range(self.settings.blank_rows):
            self.add_row()

        foot = ttk.Frame(self.tab_record)
        foot.grid(row=2, column=0, sticky="ew", pady=(8, 0))
        self.total_var = tk.StringVar(value="0")
        ttk.Label(foot, text=tr["grandTotal"] + ":", font=("TkDefaultFont", 12, "bold")).pack(side="left")
        ttk.Label(foot, textvariable=self.total_var, font=("TkDefaultFont", 12, "bold")).pack(side="left", padx=6)

        ttk.Button(foot, text=tr["clear"], command=self.clear_rows).pack(side="right", padx=3)
        ttk.Button(foot, text=tr["invoice"], command=self.show_invoice).pack(side="right", padx=3)
        self.save_button = ttk.Button(foot, text=tr["save"], command=self.save_record)
        self.save_button.pack(side="right", padx=3)
        ttk.Button(foot, text=tr["addRow"], command=self.add_row).pack(side="right", padx=3)

    def _build_view_tab(self):
        """Build records report tab"""
        tv = self.t["view"]
        self.tab_view.columnconfigure(0, weight=1)

        filt = ttk.Frame(self.tab_view)
        filt.grid(row=0, column=0, sticky="ew")
        self.f_start = tk.StringVar(value="")
        self.f_end = tk.StringVar(value="")
        self.f_material = tk.StringVar(value="")
        ttk.Label(filt, text=tv["filterDateStart"] + " (YYYY-MM-DD)").pack(side="left")
        ttk.Entry(filt, textvariable=self.f_start, width=12).pack(side="left", padx=4)
        ttk.Label(filt, text=tv["filterDateEnd"]).pack(side="left")
        ttk.Entry(filt, textvariable=self.f_end, width=12).pack(side="left", padx=4)
        ttk.Label(filt, text=tv["filterMaterial"]).pack(side="left")
        ttk.Entry(filt, textvariable=self.f_material, width=16).pack(side="left", padx=4)
        for v in (self.f_start, self.f_end, self.f_material):
            v.trace_add("write", lambda *_: self._on_filter_change())

        ttk.Button(filt, text=tv["exportCSV"], command=self.export_csv_dialog).pack(side="right", padx=3)
        ttk.Button(filt, text=tv["exportExcel"], command=self.export_excel_dialog).pack(side="right", padx=3)
        ttk.Button(filt, text=tv["printList"], command=self.print_report).pack(side="right", padx=3)

        self.view_tree = ttk.Treeview(self.tab_view, columns=VIEW_COLUMNS, show="headings", height=12,
                                      selectmode="browse")
        widths = [40, 100, 260, 90, 90, 90, 110]
        for c, w in zip(VIEW_COLUMNS, widths):
            anchor = "w" if c in ("date", "material") else "e"
            self.view_tree.column(c, width=w, anchor=anchor)
            if c == "index":
                self.view_tree.heading(c, text=tv["colIndex"])
            else:
                self.view_tree.heading(c, command=lambda k=c: self.sort_by(k))
        self.view_tree.grid(row=1, column=0, sticky="nsew", pady=6)
        self.tab_view.rowconfigure(1, weight=1)

        yscroll = ttk.Scrollbar(self.tab_view, orient="vertical", command=self.view_tree.yview)
        self.view_tree.configure(yscroll=yscroll.set)
        yscroll.grid(row=1, column=1, sticky="ns")

        bottom = ttk.Frame(self.tab_view)
        bottom.grid(row=2, column=0, sticky="ew")
        self.view_total_var = tk.StringVar(value="")
        ttk.Label(bottom, textvariable=self.view_total_var, font=("TkDefaultFont", 11, "bold")).pack(side="left")
        ttk.Button(bottom, text=tv["delete"], command=self.delete_selected_record).pack(side="left", padx=12)

        ttk.Button(bottom, text="▶", width=3, command=self.next_page).pack(side="right")
        self.page_var = tk.StringVar(value="")
        ttk.Label(bottom, textvariable=self.page_var).pack(side="right", padx=6)
        ttk.Button(bottom, text="◀", width=3, command=self.previous_page).pack(side="right")

        self._update_headings()

    # ---------- Record entry ----------
    def add_row(self):
        """Append an empty row to the entry grid"""
        row = EntryRow()
        r = len(self.entry_rows) + 1
        ttk.Label(self.grid_frame, text=str(r)).grid(row=r, column=0, padx=3, sticky="w")
        ttk.Entry(self.grid_frame, textvariable=row.material, width=24).grid(row=r, column=1, padx=3, pady=1)
        for c, var in ((2, row.weight), (3, row.deduction), (4, row.price)):
            ttk.Entry(self.grid_frame, textvariable=var, width=12, justify="right").grid(row=r, column=c, padx=3, pady=1)
        ttk.Label(self.grid_frame, textvariable=row.result, width=12, anchor="e").grid(row=r, column=5, padx=3)
        for var in (row.weight, row.deduction, row.price, row.material):
            var.trace_add("write", lambda *_, rr=row: self._on_row_change(rr))
        self.entry_rows.append(row)

    def _items(self) -> List[LineItem]:
        return [row.item() for row in self.entry_rows]

    def _on_row_change(self, row: EntryRow):
        row.result.set(f"{line_result(row.item()):,}")
        self.total_var.set(f"{grand_total(self._items()):,}")

    def clear_rows(self):
        """Reset the grid after confirmation"""
        if not messagebox.askyesno(self.t["record"]["clear"], self.t["record"]["clear"] + "?"):
            return
        for row in self.entry_rows:
            row.clear()

    def _ask_unlock(self) -> bool:
        code = ask_unlock_code(self.master, self.t)
        if code is None:
            return False
        ok = check_unlock_code(code, self.settings.unlock_code)
        if not ok:
            messagebox.showerror(self.t["title"], self.t["record"]["invalidCode"])
        return ok

    def save_record(self):
        """Save the grid as a new record"""
        tr = self.t["record"]
        items = self._items()
        self.save_button.state(["disabled"])
        try:
            try:
                self.session.save(items)
            except ZeroTotalError:
                if not messagebox.askyesno(tr["save"], tr["zeroTotal"]):
                    return
                self.session.save(items, allow_zero_total=True)
        except DuplicateSubmissionError:
            messagebox.showinfo(tr["save"], tr["saved"])
            return
        except EmptyRecordError:
            messagebox.showinfo(tr["save"], tr["empty"])
            return
        except LockedError:
            return
        except SaveRejected as ex:
            messagebox.showinfo(tr["save"], str(ex))
            return
        except StoreError as ex:
            logger.error("Save failed: %s", ex)
            messagebox.showerror(tr["save"], f"Error uploading: {ex}")
            return
        finally:
            self.save_button.state(["!disabled"])
        messagebox.showinfo(tr["save"], tr["uploadSuccess"])

    def show_invoice(self):
        """Open the receipt for the current rows"""
        items = self._items()
        inv = build_invoice(items, self.day, grand_total(items), self.settings.company_name)
        text = render_invoice_text(inv, self.t["invoice"])
        name = f"invoice_{self.day}_{inv.number.split()[-1]}.txt"
        dlg = InvoiceDialog(self.master, self.t, text, name)
        self.master.wait_window(dlg)

    # ---------- Records view ----------
    def _on_records(self, records):
        """Store callback: replace the snapshot and redraw the report"""
        self.records = records
        self.refresh_view()

    def _on_filter_change(self):
        self.browser.apply_filter_input(self.f_start.get(), self.f_end.get(), self.f_material.get())
        self.refresh_view()

    def sort_by(self, key: str):
        self.browser.sort_by(key)
        self._update_headings()
        self.refresh_view()

    def _update_headings(self):
        tv = self.t["view"]
        titles = {
            "date": tv["colDate"], "material": tv["colMaterial"], "weight": tv["colWeight"],
            "deduction": tv["colDeduction"], "price": tv["colPrice"], "result": tv["colResult"],
        }
        sort = self.browser.sort
        for key, title in titles.items():
            if key == sort.key:
                title += " ▲" if sort.direction == ASC else " ▼"
            self.view_tree.heading(key, text=title)

    def next_page(self):
        self.browser.next_page(self.report)
        self.refresh_view()

    def previous_page(self):
        self.browser.previous_page(self.report)
        self.refresh_view()

    def refresh_view(self):
        """Rebuild the report from the current snapshot and redraw the page"""
        self.report = self.browser.report(self.records)
        rows = self.browser.current_rows(self.report)

        for iid in self.view_tree.get_children():
            self.view_tree.delete(iid)
        self.view_rows = {}
        offset = (self.browser.page - 1) * self.browser.page_size
        for i, r in enumerate(rows, start=offset + 1):
            values = (
                i, r.date, r.material,
                format_number(r.weight), f"{format_number(r.deduction)}%",
                format_number(r.price), f"{r.result:,}",
            )
            self.view_tree.insert("", "end", iid=r.id, values=values)
            self.view_rows[r.id] = r

        tv = self.t["view"]
        if self.report.count:
            self.view_total_var.set(f"{tv['totalSummary']}: {self.report.total:,}  ({self.report.count})")
        else:
            self.view_total_var.set(tv["noRecords"])
        pages = max(1, self.browser.total_pages(self.report))
        self.page_var.set(f"{tv['page']} {self.browser.page} / {pages}")

    def delete_selected_record(self):
        """Delete the whole record the selected row belongs to"""
        tv = self.t["view"]
        sel = self.view_tree.selection()
        if not sel:
            return
        row = self.view_rows.get(sel[0])
        if row is None:
            return
        if not messagebox.askyesno(tv["delete"], tv["delete"] + "?"):
            return
        if self.settings.unlock_code and not self._ask_unlock():
            return
        try:
            self.store.delete_record(row.record_id)
        except StoreError as ex:
            logger.error("Delete failed: %s", ex)
            messagebox.showerror(tv["delete"], "Error deleting record")

    # ---------- Export ----------
    def print_report(self):
        """Open the whole filtered list, every page, as printable text"""
        tv = self.t["view"]
        text = render_report_text(self.report, report_headers(self.t), tv, self.settings.company_name)
        name = f"amc_report_{today_str()}.txt"
        dlg = InvoiceDialog(self.master, self.t, text, name, title=tv["printList"])
        self.master.wait_window(dlg)

    def export_csv_dialog(self):
        """Export the filtered, sorted report to CSV"""
        tv = self.t["view"]
        fp = filedialog.asksaveasfilename(
            title=tv["exportCSV"],
            initialfile=report_filename(today_str()),
            defaultextension=".csv",
            filetypes=[("CSV files", "*.csv"), ("All files", "*.*")]
        )
        if not fp:
            return
        try:
            export_rows_to_csv(self.report.rows, fp, report_headers(self.t))
            messagebox.showinfo(tv["exportCSV"], f"Exported {self.report.count} rows to:\n{fp}")
        except OSError as ex:
            logger.error("CSV export failed: %s", ex)
            messagebox.showerror(tv["exportCSV"], str(ex))

    def export_excel_dialog(self):
        """Export the filtered, sorted report to an Excel workbook"""
        tv = self.t["view"]
        fp = filedialog.asksaveasfilename(
            title=tv["exportExcel"],
            initialfile=report_filename(today_str()).replace(".csv", ".xlsx"),
            defaultextension=".xlsx",
            filetypes=[("Excel Workbook", "*.xlsx")]
        )
        if not fp:
            return
        try:
            export_excel(self.report.rows, fp, report_headers(self.t), self.browser.filters, tv["totalSummary"])
            messagebox.showinfo(tv["exportExcel"], f"Exported: {fp}")
        except OSError as ex:
            logger.error("Excel export failed: %s", ex)
            messagebox.showerror(tv["exportExcel"], str(ex))

    # ---------- Settings ----------
    def choose_language(self):
        dlg = LanguageDialog(self.master, self.t, self.settings.language)
        self.master.wait_window(dlg)
        if dlg.result is None or dlg.result == self.settings.language:
            return
        self.settings.language = dlg.result
        try:
            save_settings(self.settings, self.settings_file)
        except OSError as ex:
            messagebox.showerror(self.t["settings"]["title"], str(ex))
            return
        messagebox.showinfo(self.t["settings"]["title"], self.t["settings"]["selectLanguage"])

    def _on_destroy(self, event):
        if event.widget is self:
            self.subscription.close()
