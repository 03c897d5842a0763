"""
Tests for the spreadsheet-backed signup store.
"""

import threading
from datetime import date

import pytest
from openpyxl import Workbook, load_workbook

from models.signup_record import SIGNUP_COLUMNS, SignupRecord
from services.signup_store import SignupStore, StoreError


def make_record(name: str, email: str, children: str = 'N/A', day: date = date(2025, 11, 2)) -> SignupRecord:
    return SignupRecord(date=day, parent_name=name, parent_email=email, children_names=children)


class TestSignupStoreAppend:
    """Appending rows to the workbook."""

    def test_first_append_creates_workbook_with_header(self, store, store_path) -> None:
        assert not store.exists

        store.append(make_record('Jane Doe', 'jane@example.com', 'Sam'))

        workbook = load_workbook(store_path)
        worksheet = workbook.worksheets[0]
        rows = list(worksheet.iter_rows(values_only=True))
        assert worksheet.title == 'Signups'
        assert list(rows[0]) == SIGNUP_COLUMNS
        assert list(rows[1]) == ['2025-11-02', 'Jane Doe', 'jane@example.com', 'Sam', 'active', 'web_form']

    def test_append_keeps_existing_rows(self, store) -> None:
        store.append(make_record('Jane', 'jane@example.com'))
        store.append(make_record('John', 'john@example.com'))

        names = [row['Parent Name'] for row in store.read_recent(10)]
        assert names == ['Jane', 'John']

    def test_append_creates_parent_directories(self, tmp_path) -> None:
        store = SignupStore(tmp_path / 'nested' / 'dir' / 'signups.xlsx')

        store.append(make_record('Jane', 'jane@example.com'))

        assert store.exists

    def test_custom_sheet_name(self, store_path) -> None:
        store = SignupStore(store_path, sheet_name='Families')
        store.append(make_record('Jane', 'jane@example.com'))

        assert load_workbook(store_path).worksheets[0].title == 'Families'

    def test_no_temporary_file_left_behind(self, store, store_path) -> None:
        store.append(make_record('Jane', 'jane@example.com'))

        assert sorted(p.name for p in store_path.parent.iterdir()) == [store_path.name]

    def test_corrupt_workbook_raises_and_is_not_overwritten(self, store, store_path) -> None:
        store_path.write_bytes(b'this is not a workbook')

        with pytest.raises(StoreError):
            store.append(make_record('Jane', 'jane@example.com'))

        assert store_path.read_bytes() == b'this is not a workbook'

    def test_illegal_cell_text_raises_store_error(self, store) -> None:
        with pytest.raises(StoreError):
            store.append(make_record('Jane\x07', 'jane@example.com'))

        assert not store.exists

    def test_appends_from_several_threads_are_all_kept(self, store) -> None:
        def add_batch(batch: int) -> None:
            for i in range(5):
                store.append(make_record(f"Parent {batch}-{i}", f"parent{batch}.{i}@example.com"))

        threads = [threading.Thread(target=add_batch, args=(batch,)) for batch in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        rows = store.read_recent(20)
        assert len(rows) == 20
        assert len({row['Email'] for row in rows}) == 20


class TestSignupStoreReadRecent:
    """Reading the most recent rows."""

    def test_missing_file_is_empty(self, store) -> None:
        assert store.read_recent(5) == []

    def test_non_positive_limit_is_empty(self, store) -> None:
        store.append(make_record('Jane', 'jane@example.com'))
        assert store.read_recent(0) == []
        assert store.read_recent(-1) == []

    def test_returns_last_rows_oldest_first(self, store) -> None:
        for i in range(7):
            store.append(make_record(f"Parent {i}", f"parent{i}@example.com"))

        rows = store.read_recent(5)

        assert [row['Parent Name'] for row in rows] == [f"Parent {i}" for i in range(2, 7)]
        assert set(rows[0]) == set(SIGNUP_COLUMNS)

    def test_repeated_reads_are_identical(self, store) -> None:
        store.append(make_record('Jane', 'jane@example.com', 'Sam'))
        store.append(make_record('John', 'john@example.com'))

        assert store.read_recent(5) == store.read_recent(5)

    def test_corrupt_file_is_empty(self, store, store_path) -> None:
        store_path.write_bytes(b'garbage')
        assert store.read_recent(5) == []

    def test_blank_rows_and_native_dates(self, store_path) -> None:
        workbook = Workbook()
        worksheet = workbook.active
        worksheet.append(SIGNUP_COLUMNS)
        worksheet.append([date(2025, 1, 5), 'Jane', 'jane@example.com', None, 'active', 'web_form'])
        worksheet.append([None] * len(SIGNUP_COLUMNS))
        worksheet.append(['2025-01-06', 'John', 'john@example.com', 'Ann', 'active', 'web_form'])
        workbook.save(store_path)

        rows = SignupStore(store_path).read_recent(5)

        assert len(rows) == 2
        assert rows[0]['Date'] == '2025-01-05'
        assert rows[0]['Children Names'] == ''
        assert rows[1]['Parent Name'] == 'John'
