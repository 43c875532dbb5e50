# app/blueprints/records/routes.py
"""
Records API routes - create, lookup and document exports
"""

from flask import current_app, jsonify, send_file, url_for
from io import BytesIO
from sqlalchemy.exc import SQLAlchemyError

from decorators import json_body_required
from exporters import render_records_pdf, render_records_xlsx
from store import RecordStore
from utils import validate_record_payload
from . import records_bp

PDF_MIMETYPE = 'application/pdf'
XLSX_MIMETYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


def get_store():
    return RecordStore()


@records_bp.route('', methods=['POST'])
@json_body_required
def create_record(payload):
    """Create a record from a JSON body; the id is assigned by the store."""
    values, errors = validate_record_payload(payload)
    if errors:
        current_app.logger.info(f'Record rejected: invalid fields {sorted(errors)}')
        return jsonify({'success': False, 'error': 'Validation failed', 'errors': errors}), 400

    try:
        r = get_store().insert(**values)
    except SQLAlchemyError:
        current_app.logger.exception('Failed to create record')
        raise

    current_app.logger.info(f'Record created: {r.id}')
    response = jsonify(r.to_dict())
    response.status_code = 201
    response.headers['Location'] = url_for('records.get_record', record_id=r.id)
    return response


@records_bp.route('/<int:record_id>', methods=['GET'])
def get_record(record_id):
    r = get_store().find_by_id(record_id)
    if r is None:
        return jsonify({'success': False, 'error': 'Record not found'}), 404
    return jsonify(r.to_dict())


@records_bp.route('/download/pdf', methods=['GET'])
def download_pdf():
    """Export all records as a paginated PDF"""
    records = get_store().list_all()
    pdf = render_records_pdf(records)

    current_app.logger.info(f'PDF export: count={len(records)} size={len(pdf)}')
    return send_file(BytesIO(pdf), as_attachment=True, download_name='Records.pdf', mimetype=PDF_MIMETYPE)


@records_bp.route('/download/excel', methods=['GET'])
def download_excel():
    """Export all records as an Excel workbook"""
    records = get_store().list_all()
    xlsx = render_records_xlsx(records)

    current_app.logger.info(f'Excel export: count={len(records)} size={len(xlsx)}')
    return send_file(BytesIO(xlsx), as_attachment=True, download_name='Records.xlsx', mimetype=XLSX_MIMETYPE)
