"""
Spreadsheet helpers shared by the CSV and Excel export views.
"""
import csv
import io

from django.http import HttpResponse

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def csv_response(filename: str, headers: list[str], rows: list[list]) -> HttpResponse:
    resp = HttpResponse(content_type="text/csv")
    resp["Content-Disposition"] = f'attachment; filename="{filename}"'
    w = csv.writer(resp)
    w.writerow(headers)
    for r in rows:
        w.writerow(["" if v is None else v for v in r])
    return resp


def xlsx_response(filename: str, title: str, headers: list[str], rows: list[list]) -> HttpResponse:
    wb = Workbook()
    write_sheet(wb.active, title, headers, rows)

    bio = io.BytesIO()
    wb.save(bio)

    resp = HttpResponse(bio.getvalue(), content_type=XLSX_CONTENT_TYPE)
    resp["Content-Disposition"] = f'attachment; filename="{filename}"'
    return resp


def autosize_columns(ws):
    for col in range(1, ws.max_column + 1):
        max_len = 0
        for row in range(1, ws.max_row + 1):
            v = ws.cell(row=row, column=col).value
            if v is not None:
                max_len = max(max_len, len(str(v)))
        ws.column_dimensions[get_column_letter(col)].width = min(max(12, max_len + 2), 55)


def write_sheet(ws, title: str, headers: list[str], rows: list[list]):
    ws.title = title
    ws.append(headers)

    header_font = Font(bold=True)
    for i in range(1, len(headers) + 1):
        c = ws.cell(row=1, column=i)
        c.font = header_font
        c.alignment = Alignment(vertical="center")

    for r in rows:
        ws.append(r)

    autosize_columns(ws)
