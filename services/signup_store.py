"""
Spreadsheet-backed store for newsletter signups.

This module provides the record store used by the signup workflow and the
report generator. Signups are kept in a single ``.xlsx`` workbook: one sheet,
one header row naming the six signup columns, then one row per signup.

The workbook is created lazily on the first successful append. Appends made
by one process are serialized with a lock and written through a temporary
file so readers never observe a half-written workbook. Separate processes
writing the same file are not coordinated.
"""

import logging
import os
import threading
import zipfile
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import IllegalCharacterError, InvalidFileException

from models.signup_record import SIGNUP_COLUMNS, SignupRecord
from services.service_constants import DEFAULT_REPORT_LIMIT, DEFAULT_SHEET_NAME

logger = logging.getLogger(__name__)

# Errors openpyxl and the filesystem raise for missing, locked or corrupt workbooks
# and for cell text openpyxl refuses to write
WORKBOOK_ERRORS = (
    OSError,
    InvalidFileException,
    IllegalCharacterError,
    zipfile.BadZipFile,
    KeyError,
    ValueError,
)


class StoreError(Exception):
    """Exception raised when a signup cannot be written to the store."""
    pass


class SignupStore:
    """
    Append-only signup table stored in an Excel workbook.

    Args:
        path: Location of the ``.xlsx`` file
        sheet_name: Title given to the sheet when the workbook is created
    """

    def __init__(self, path: Union[str, Path], sheet_name: str = DEFAULT_SHEET_NAME):
        self.path = Path(path)
        self.sheet_name = sheet_name
        self._lock = threading.Lock()

    @property
    def exists(self) -> bool:
        return self.path.is_file()

    def append(self, record: SignupRecord) -> None:
        """
        Append one signup row, creating the workbook with a header row if needed.

        Args:
            record: Signup to persist

        Raises:
            StoreError: If the workbook cannot be opened, created, or saved
        """
        with self._lock:
            try:
                workbook = self._open_or_create()
                worksheet = workbook.worksheets[0]
                worksheet.append(record.to_row())
                self._save(workbook)
            except WORKBOOK_ERRORS as e:
                raise StoreError(f"Could not append signup to {self.path}: {e}") from e

        logger.info("Signup row appended to %s", self.path)

    def read_recent(self, limit: int = DEFAULT_REPORT_LIMIT) -> List[Dict[str, Any]]:
        """
        Return the last ``limit`` signups as dictionaries keyed by column header.

        A missing or unreadable workbook is treated as an empty store.

        Args:
            limit: Maximum number of trailing rows to return

        Returns:
            List of row dictionaries, oldest first
        """
        if limit <= 0 or not self.exists:
            return []

        try:
            rows = self._read_rows()
        except WORKBOOK_ERRORS as e:
            logger.info("Could not read signup workbook %s: %s", self.path, e)
            return []

        return rows[-limit:]

    def _open_or_create(self) -> Workbook:
        if self.exists:
            return load_workbook(self.path)

        logger.info("Creating new signup workbook: %s", self.path)
        workbook = Workbook()
        worksheet = workbook.active
        worksheet.title = self.sheet_name
        worksheet.append(SIGNUP_COLUMNS)
        return workbook

    def _save(self, workbook: Workbook) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")
        try:
            workbook.save(tmp_path)
            os.replace(tmp_path, self.path)
        finally:
            if tmp_path.exists():
                tmp_path.unlink()

    def _read_rows(self) -> List[Dict[str, Any]]:
        workbook = load_workbook(self.path, read_only=True, data_only=True)
        try:
            values = list(workbook.worksheets[0].iter_rows(values_only=True))
        finally:
            workbook.close()

        if not values:
            return []

        header = [_cell_text(cell) for cell in values[0]]
        rows = []
        for raw in values[1:]:
            if raw is None or all(cell is None or cell == '' for cell in raw):
                continue
            rows.append({
                column: _cell_text(cell)
                for column, cell in zip(header, raw)
                if column
            })
        return rows


def _cell_text(value: Optional[Any]) -> Any:
    """Normalize a worksheet cell value for report rendering."""
    if value is None:
        return ''
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value
