from io import BytesIO

from openpyxl import load_workbook

from models import Record


def test_add_record_command(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['add-record', 'Ann', 'Lee', '30', '555-1'])
    assert result.exit_code == 0
    assert 'Created record' in result.output
    r = Record.query.one()
    assert (r.name, r.surname, r.age, r.phone_number) == ('Ann', 'Lee', 30, '555-1')


def test_add_record_command_rejects_bad_age(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['add-record', 'Ann', 'Lee', 'old', '555-1'])
    assert result.exit_code == 1
    assert Record.query.count() == 0


def test_export_records_command(app, sample_records, tmp_path):
    runner = app.test_cli_runner()
    xlsx_path = tmp_path / 'out.xlsx'
    result = runner.invoke(args=['export-records', '--format', 'excel', '-o', str(xlsx_path)])
    assert result.exit_code == 0
    ws = load_workbook(BytesIO(xlsx_path.read_bytes())).active
    assert ws.max_row == 3

    pdf_path = tmp_path / 'out.pdf'
    result = runner.invoke(args=['export-records', '--format', 'pdf', '-o', str(pdf_path)])
    assert result.exit_code == 0
    assert pdf_path.read_bytes().startswith(b'%PDF')


def test_backup_db_rejects_memory_database(app):
    result = app.test_cli_runner().invoke(args=['backup-db'])
    assert result.exit_code != 0
    assert 'SQLite file databases' in result.output
