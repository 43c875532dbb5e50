# app/cli.py
"""
Flask CLI commands: database setup, record entry and offline exports.
"""

import os
import sqlite3
from datetime import datetime

import click

from exporters import render_records_pdf, render_records_xlsx
from models import db
from store import RecordStore
from utils import validate_record_payload

EXPORT_FORMATS = {
    'pdf': (render_records_pdf, 'Records.pdf'),
    'excel': (render_records_xlsx, 'Records.xlsx'),
}


def register_commands(app):

    @app.cli.command('init-db')
    def init_db():
        """Create database tables."""
        db.create_all()
        click.echo('Initialized the database.')

    @app.cli.command('add-record')
    @click.argument('name')
    @click.argument('surname')
    @click.argument('age')
    @click.argument('phone_number')
    def add_record(name, surname, age, phone_number):
        """Add a record: flask add-record <name> <surname> <age> <phone_number>"""
        values, errors = validate_record_payload({
            'name': name,
            'surname': surname,
            'age': age,
            'phone_number': phone_number,
        })
        if errors:
            for field, message in sorted(errors.items()):
                click.echo(f'{field}: {message}', err=True)
            raise click.exceptions.Exit(1)

        r = RecordStore().insert(**values)
        app.logger.info(f'Record created by CLI: {r.id}')
        click.echo(f'Created record {r.id}')

    @app.cli.command('export-records')
    @click.option('--format', 'fmt', type=click.Choice(sorted(EXPORT_FORMATS), case_sensitive=False),
                  default='pdf', help='Export format')
    @click.option('--output', '-o', default=None, help='Output file path (default: Records.pdf / Records.xlsx)')
    def export_records(fmt, output):
        """Write all records to a PDF or Excel file."""
        render, default_name = EXPORT_FORMATS[fmt.lower()]
        records = RecordStore().list_all()
        content = render(records)

        output = output or default_name
        with open(output, 'wb') as fh:
            fh.write(content)

        app.logger.info(f'Export by CLI: format={fmt} count={len(records)} output={output}')
        click.echo(f'Exported {len(records)} records to {output}')

    @app.cli.command('backup-db')
    @click.option('--output', '-o', default=None, help='Output file path (default: data/backup_YYYYMMDD_HHMMSS.db)')
    def backup_db(output):
        """Create a safe backup of the SQLite database (works with WAL mode)."""
        db_uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
        if not db_uri.startswith('sqlite:///') or ':memory:' in db_uri:
            raise click.ClickException('Backup command only works with SQLite file databases')

        source_path = db_uri.replace('sqlite:///', '')
        if not os.path.exists(source_path):
            raise click.ClickException(f'Database file not found: {source_path}')

        if not output:
            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            output = os.path.join(os.path.dirname(source_path), f'backup_{timestamp}.db')

        output_dir = os.path.dirname(output)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        # SQLite backup API for safe hot backup
        source_conn = sqlite3.connect(source_path)
        dest_conn = sqlite3.connect(output)
        try:
            source_conn.backup(dest_conn)
        finally:
            source_conn.close()
            dest_conn.close()

        size_mb = os.path.getsize(output) / (1024 * 1024)
        app.logger.info(f'Database backup created: {output}')
        click.echo(f'Backup created successfully: {output} ({size_mb:.2f} MB)')
