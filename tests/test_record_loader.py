from datetime import datetime
from pathlib import Path

import pandas as pd
import pytest
from openpyxl import Workbook

from services.record_loader import InMemoryRecordLoader, SpreadsheetRecordLoader, clean_cell


@pytest.fixture
def loader(tmp_path):
    return SpreadsheetRecordLoader(Path(tmp_path) / 'data.xlsx', Path(tmp_path) / 'data.csv')


def write_xlsx(path, frame):
    with pd.ExcelWriter(path, engine='openpyxl') as writer:
        frame.to_excel(writer, sheet_name='Tracker', index=False)


def test_missing_file_returns_empty(loader):
    result = loader.load()

    assert result.rows == []
    assert result.source is None


def test_xlsx_rows_are_tagged_and_blanks_normalized(loader):
    frame = pd.DataFrame({
        'NO': [1, None, 2],
        'AJL/DMI': ['A001', None, 'A002'],
        'Aircraft': ['9M-LNR', '9M-LNR', '9M-LNF'],
        'SPARE EDD': [datetime(2024, 5, 1), None, None],
        'Custom Note': ['x', None, 'z'],
    })
    write_xlsx(loader.xlsx_path, frame)

    result = loader.load()

    assert result.source == loader.xlsx_path
    assert [r.row_id for r in result.rows] == [0, 1, 2]
    first, second, third = result.rows
    assert first.no == 1
    assert first.ajl == 'A001'
    assert first.spare_edd == '2024-05-01'
    assert first.extra == {'Custom Note': 'x'}
    assert second.no == ''
    assert second.ajl == ''
    assert second.get('Custom Note') == ''
    assert third.aircraft == '9M-LNF'
    # columns absent from the sheet read as empty
    assert third.get('BOOK') == ''


def test_blank_spacer_rows_are_skipped_in_xlsx(loader):
    workbook = Workbook()
    sheet = workbook.active
    sheet.append(['NO', 'AJL/DMI', 'Aircraft'])
    sheet.append([1, 'A001', '9M-LNR'])
    sheet.append([None, None, None])
    sheet.append([2, 'A002', '9M-LNR'])
    workbook.save(loader.xlsx_path)

    rows = loader.load().rows

    assert [(r.row_id, r.no, r.ajl) for r in rows] == [(0, 1, 'A001'), (1, 2, 'A002')]


def test_blank_spacer_rows_are_skipped_in_csv(loader):
    loader.csv_path.write_text(
        'NO,AJL/DMI,Aircraft\n1,A001,9M-LNR\n,,\n,,9M-LNR\n2,A002,9M-LNR\n',
        encoding='utf-8'
    )

    rows = loader.load().rows

    # a row with any value is kept, so merged cells still fill down
    assert [(r.row_id, r.ajl, r.aircraft) for r in rows] == [
        (0, 'A001', '9M-LNR'),
        (1, '', '9M-LNR'),
        (2, 'A002', '9M-LNR'),
    ]


def test_only_first_sheet_is_read(loader):
    with pd.ExcelWriter(loader.xlsx_path, engine='openpyxl') as writer:
        pd.DataFrame({'AJL/DMI': ['A001']}).to_excel(writer, sheet_name='First', index=False)
        pd.DataFrame({'AJL/DMI': ['Z999', 'Z998']}).to_excel(writer, sheet_name='Second', index=False)

    rows = loader.load().rows

    assert [r.ajl for r in rows] == ['A001']


def test_csv_used_when_no_xlsx(loader):
    pd.DataFrame({'AJL/DMI': ['A001', ''], 'System': ['HYD', 'HYD']}).to_csv(loader.csv_path, index=False)

    result = loader.load()

    assert result.source == loader.csv_path
    assert [r.ajl for r in result.rows] == ['A001', '']
    assert [r.system for r in result.rows] == ['HYD', 'HYD']


def test_xlsx_preferred_over_csv(loader):
    write_xlsx(loader.xlsx_path, pd.DataFrame({'AJL/DMI': ['FROM-XLSX']}))
    pd.DataFrame({'AJL/DMI': ['FROM-CSV']}).to_csv(loader.csv_path, index=False)

    result = loader.load()

    assert result.source == loader.xlsx_path
    assert [r.ajl for r in result.rows] == ['FROM-XLSX']


def test_source_is_resolved_on_every_load(loader):
    pd.DataFrame({'AJL/DMI': ['FROM-CSV']}).to_csv(loader.csv_path, index=False)
    assert loader.load().source == loader.csv_path

    write_xlsx(loader.xlsx_path, pd.DataFrame({'AJL/DMI': ['FROM-XLSX']}))
    assert loader.load().source == loader.xlsx_path


def test_malformed_file_fails_open(loader, caplog):
    loader.xlsx_path.write_bytes(b'this is not a workbook')
    pd.DataFrame({'AJL/DMI': ['FROM-CSV']}).to_csv(loader.csv_path, index=False)

    result = loader.load()

    assert result.rows == []
    assert result.source is None
    assert 'Failed to read data file' in caplog.text


def test_clean_cell():
    assert clean_cell(None) == ''
    assert clean_cell(float('nan')) == ''
    assert clean_cell(3.0) == 3
    assert clean_cell(2.5) == 2.5
    assert clean_cell(0) == 0
    assert clean_cell('  text ') == '  text '
    assert clean_cell(pd.Timestamp('2024-01-02')) == '2024-01-02'
    assert clean_cell(datetime(2024, 1, 2, 13, 30)) == '2024-01-02 13:30:00'


def test_in_memory_loader():
    loader = InMemoryRecordLoader([{'AJL/DMI': 'A001', 'Aircraft': None}])

    rows = loader.load().rows

    assert rows[0].row_id == 0
    assert rows[0].aircraft == ''
    assert InMemoryRecordLoader().load().rows == []
