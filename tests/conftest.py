from pathlib import Path

import pytest

from api_server import create_app
from app.config import PROJECT_ROOT, AppConfig
from services.credential_store import InMemoryCredentialStore
from services.record_loader import InMemoryRecordLoader
from services.status_store import InMemoryStatusStore
from services.tracker_service import TrackerService


def make_record(no='', ajl='', defect='', book='', aircraft='', system='', **extra):
    """One spreadsheet row as the loader would see it"""
    record = {
        'NO': no,
        'AJL/DMI': ajl,
        'DEFECT/TASK': defect,
        'SPARES': '',
        'DFP': '',
        'REMARKS': '',
        'ROBBING DECLARATION': '',
        'RECEIVING AIRCRAFT': '',
        '9M-LDJ Compatibility': '',
        'MATPLAN UPDATE': '',
        'SPARE EDD': '',
        'OPTION': '',
        'BOOK': book,
        'Aircraft': aircraft,
        'System': system,
    }
    record.update(extra)
    return record


@pytest.fixture
def sample_records():
    """Two merged AJL entries on 9M-LNR plus one entry on another aircraft"""
    return [
        make_record(no=1, ajl='A001', defect='Hyd leak', book='B1', aircraft='9M-LNR', system='HYD', SPARES='P/N 1'),
        make_record(aircraft='9M-LNR', system='HYD', SPARES='P/N 2'),
        make_record(no=2, ajl='A002', defect='Fuel pump', book='B2', aircraft=' 9M-LNR ', system='FUEL'),
        make_record(no=3, ajl='B001', defect='Bleed valve', book='B3', aircraft='9M-LNF', system='PNEU'),
        make_record(aircraft='9M-LNF', system='PNEU', REMARKS='second line'),
    ]


@pytest.fixture
def users():
    return [{'id': 'planner', 'password': 'secret'}, {'id': 'lead', 'password': 'hunter2'}]


@pytest.fixture
def tracker(sample_records, users):
    return TrackerService(
        records=InMemoryRecordLoader(sample_records),
        statuses=InMemoryStatusStore(),
        credentials=InMemoryCredentialStore(users)
    )


@pytest.fixture
def test_config(tmp_path):
    return AppConfig(
        debug=False,
        log_level='DEBUG',
        port=5000,
        data_dir=Path(tmp_path),
        static_dir=PROJECT_ROOT / 'public'
    )


@pytest.fixture
def client(test_config, tracker):
    app = create_app(test_config, tracker)
    app.testing = True
    return app.test_client()
