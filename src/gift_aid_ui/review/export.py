"""
CSV export of the loaded result set.

The export always covers every loaded record, not just the visible page.
Fields are quoted only when they contain a comma, a quote, a carriage
return or a line feed; quotes inside a field are doubled. Rows end with
CRLF and the file is written with a UTF-8 byte-order mark so spreadsheet
applications detect the encoding.
"""

import csv
import io
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from gift_aid_ui import settings
from gift_aid_ui.errors import ValidationError
from gift_aid_ui.models.transaction import COLUMNS, Column, Transaction

BOM = "\ufeff"
LINE_TERMINATOR = "\r\n"


class ExportFormatter:
    """Serializes transactions to delimited text."""

    def __init__(self, columns: Sequence[Column] = COLUMNS, delimiter: str = ",") -> None:
        self._columns = tuple(columns)
        self._delimiter = delimiter

    @property
    def header(self) -> list[str]:
        return [column.label for column in self._columns]

    def row(self, record: Transaction) -> list[str]:
        return [
            "" if (value := record.value(c.field_name)) is None else str(value)
            for c in self._columns
        ]

    def format(self, records: Iterable[Transaction]) -> str:
        """Return the header row followed by one row per record."""
        buffer = io.StringIO()
        writer = csv.writer(
            buffer,
            delimiter=self._delimiter,
            quoting=csv.QUOTE_MINIMAL,
            lineterminator=LINE_TERMINATOR,
        )
        writer.writerow(self.header)
        for record in records:
            writer.writerow(self.row(record))
        return buffer.getvalue()


@dataclass(frozen=True)
class ExportFile:
    """A ready-to-download export."""

    filename: str
    content: str
    record_count: int
    media_type: str = "text/csv"

    @property
    def data(self) -> bytes:
        """File bytes: UTF-8 with a byte-order mark."""
        return (BOM + self.content).encode("utf-8")


def export_filename(export_date: date | None = None, prefix: str = settings.EXPORT_PREFIX) -> str:
    """Return e.g. 'Gift_Aid_Sales_Invoice_Transactions_2025-12-18.csv'."""
    return f"{prefix}_{(export_date or date.today()).isoformat()}.csv"


def build_export(
    records: Sequence[Transaction],
    export_date: date | None = None,
    formatter: ExportFormatter | None = None,
) -> ExportFile:
    """
    Build the export file for the given records.

    Raises:
        ValidationError: If there are no records to export.
    """
    if not records:
        raise ValidationError("No data available to export")
    formatter = formatter or ExportFormatter()
    return ExportFile(
        filename=export_filename(export_date),
        content=formatter.format(records),
        record_count=len(records),
    )
