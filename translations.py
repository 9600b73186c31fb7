"""
UI strings for Junk Shop Ledger
"""
from __future__ import annotations
from typing import Dict, Union

from models import Language

TRANSLATIONS: Dict[Language, dict] = {
    Language.EN: {
        "title": "Junk Shop Ledger",
        "record": {
            "title": "Record",
            "date": "Date",
            "colIndex": "#",
            "colMaterial": "Material",
            "colWeight": "Weight (kg)",
            "colDeduction": "Deduction %",
            "colPrice": "Price",
            "colResult": "Result",
            "grandTotal": "Grand Total",
            "addRow": "Add Row",
            "save": "Save",
            "saved": "Already saved",
            "invoice": "Invoice",
            "enterCode": "Enter code",
            "invalidCode": "Invalid code",
            "uploadSuccess": "Record saved successfully!",
            "clear": "Clear",
            "zeroTotal": "Total is 0. Save anyway?",
            "empty": "Nothing to save.",
        },
        "invoice": {
            "proofCopy": "Proof of Purchase",
            "item": "Item",
            "qty": "Qty",
            "price": "Price",
            "amt": "Amt",
            "totalAmount": "TOTAL",
            "cash": "Cash",
            "print": "Save…",
            "close": "Close",
            "signature": "Signature",
            "footerNote": "Thank you!",
        },
        "view": {
            "title": "View Records",
            "filterDateStart": "From",
            "filterDateEnd": "To",
            "filterMaterial": "Material",
            "exportCSV": "Export CSV",
            "exportExcel": "Export Excel",
            "printList": "Print List",
            "colIndex": "#",
            "colDate": "Date",
            "colMaterial": "Material",
            "colWeight": "Weight",
            "colDeduction": "Deduction",
            "colPrice": "Price",
            "colResult": "Result",
            "noRecords": "No records found",
            "delete": "Delete",
            "totalSummary": "Total",
            "page": "Page",
        },
        "settings": {
            "title": "Settings",
            "language": "Language",
            "selectLanguage": "Select language (applies after restart)",
        },
    },
    Language.ZH_TW: {
        "title": "回收場帳本",
        "record": {
            "title": "記錄",
            "date": "日期",
            "colIndex": "#",
            "colMaterial": "材料",
            "colWeight": "重量 (kg)",
            "colDeduction": "扣重 %",
            "colPrice": "單價",
            "colResult": "金額",
            "grandTotal": "總計",
            "addRow": "新增一列",
            "save": "儲存",
            "saved": "已儲存",
            "invoice": "收據",
            "enterCode": "請輸入密碼",
            "invalidCode": "密碼錯誤",
            "uploadSuccess": "記錄已成功儲存！",
            "clear": "清除",
            "zeroTotal": "總計為 0，仍要儲存嗎？",
            "empty": "沒有可儲存的資料。",
        },
        "invoice": {
            "proofCopy": "收購證明",
            "item": "品名",
            "qty": "數量",
            "price": "單價",
            "amt": "金額",
            "totalAmount": "總計",
            "cash": "現金",
            "print": "儲存…",
            "close": "關閉",
            "signature": "簽名",
            "footerNote": "謝謝惠顧！",
        },
        "view": {
            "title": "查看記錄",
            "filterDateStart": "起始日期",
            "filterDateEnd": "結束日期",
            "filterMaterial": "材料",
            "exportCSV": "匯出 CSV",
            "exportExcel": "匯出 Excel",
            "printList": "列印清單",
            "colIndex": "#",
            "colDate": "日期",
            "colMaterial": "材料",
            "colWeight": "重量",
            "colDeduction": "扣重",
            "colPrice": "單價",
            "colResult": "金額",
            "noRecords": "沒有記錄",
            "delete": "刪除",
            "totalSummary": "合計",
            "page": "頁",
        },
        "settings": {
            "title": "設定",
            "language": "語言",
            "selectLanguage": "選擇語言（重新啟動後生效）",
        },
    },
    Language.FIL: {
        "title": "Talaan ng Junk Shop",
        "record": {
            "title": "Itala",
            "date": "Petsa",
            "colIndex": "#",
            "colMaterial": "Materyal",
            "colWeight": "Timbang (kg)",
            "colDeduction": "Bawas %",
            "colPrice": "Presyo",
            "colResult": "Halaga",
            "grandTotal": "Kabuuan",
            "addRow": "Magdagdag ng Hilera",
            "save": "I-save",
            "saved": "Na-save na",
            "invoice": "Resibo",
            "enterCode": "Ilagay ang code",
            "invalidCode": "Maling code",
            "uploadSuccess": "Matagumpay na na-save ang tala!",
            "clear": "Burahin",
            "zeroTotal": "Ang kabuuan ay 0. I-save pa rin?",
            "empty": "Walang maise-save.",
        },
        "invoice": {
            "proofCopy": "Katibayan ng Pagbili",
            "item": "Item",
            "qty": "Dami",
            "price": "Presyo",
            "amt": "Halaga",
            "totalAmount": "KABUUAN",
            "cash": "Cash",
            "print": "I-save…",
            "close": "Isara",
            "signature": "Lagda",
            "footerNote": "Salamat po!",
        },
        "view": {
            "title": "Tingnan ang mga Tala",
            "filterDateStart": "Mula",
            "filterDateEnd": "Hanggang",
            "filterMaterial": "Materyal",
            "exportCSV": "I-export CSV",
            "exportExcel": "I-export Excel",
            "printList": "I-print ang Listahan",
            "colIndex": "#",
            "colDate": "Petsa",
            "colMaterial": "Materyal",
            "colWeight": "Timbang",
            "colDeduction": "Bawas",
            "colPrice": "Presyo",
            "colResult": "Halaga",
            "noRecords": "Walang nakitang tala",
            "delete": "Burahin",
            "totalSummary": "Kabuuan",
            "page": "Pahina",
        },
        "settings": {
            "title": "Mga Setting",
            "language": "Wika",
            "selectLanguage": "Pumili ng wika (pagkatapos mag-restart)",
        },
    },
}


def get_translation(language: Union[Language, str]) -> dict:
    """String table for a language, English when unknown"""
    try:
        return TRANSLATIONS[Language(language)]
    except ValueError:
        return TRANSLATIONS[Language.EN]


def report_headers(t: dict) -> tuple:
    """Report column titles in export order"""
    v = t["view"]
    return (v["colDate"], v["colMaterial"], v["colWeight"], v["colDeduction"], v["colPrice"], v["colResult"])
