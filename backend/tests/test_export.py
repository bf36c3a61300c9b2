from datetime import datetime

from spinwin.models import Spin
from spinwin.services.export import spins_to_csv


def test_export_is_csv_attachment(admin_client, make_client):
    make_client().post('/register', json={'name': 'Ann', 'contact': 'ann@x.com'})
    make_client().post('/register', json={'name': 'Bob', 'contact': 'bob@x.com'})
    r = admin_client.get('/admin/export')
    assert r.status_code == 200
    assert r.headers['content-type'].startswith('text/csv')
    assert 'attachment' in r.headers['content-disposition']
    assert 'spins.csv' in r.headers['content-disposition']
    lines = r.text.splitlines()
    assert lines[0] == 'Name,Contact,Prize,Timestamp'
    assert lines[1].startswith('"Bob","bob@x.com","",')
    assert lines[2].startswith('"Ann","ann@x.com","",')


def test_quotes_are_doubled():
    ts = datetime(2026, 10, 19, 12, 0, 0)
    spin = Spin(id=1, name='Ann', contact='ann@x.com', prize='He said "hi"', timestamp=ts)
    assert spins_to_csv([spin]) == (
        'Name,Contact,Prize,Timestamp\n'
        '"Ann","ann@x.com","He said ""hi""","2026-10-19T12:00:00"\n'
    )


def test_comma_in_name_shifts_naive_columns():
    spin = Spin(id=1, name='Doe, Jane', contact='jd@x.com', prize='Voucher', timestamp=None)
    row = spins_to_csv([spin]).splitlines()[1]
    assert row == '"Doe, Jane","jd@x.com","Voucher",""'
    assert len(row.split(',')) == 5


def test_empty_export_has_header_only():
    assert spins_to_csv([]) == 'Name,Contact,Prize,Timestamp\n'
