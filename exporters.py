"""
Document exporters for the records list.

PDF rendering uses ReportLab Platypus with a page template whose
``onPageEnd`` hook stamps the page number and generation time on every
finished page. Spreadsheet rendering uses openpyxl.
"""
from datetime import datetime
from io import BytesIO
from zipfile import ZipFile, ZipInfo, ZIP_DEFLATED
from xml.sax.saxutils import escape

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.writer.excel import ExcelWriter
from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.platypus import BaseDocTemplate, Frame, PageTemplate, Paragraph, Spacer, Table, TableStyle

from models import Record

PDF_TITLE = 'User Records List'
SHEET_TITLE = 'User Records'
TIMESTAMP_FORMAT = '%m/%d/%Y %I:%M:%S %p'

# Relative widths of ID, Name, Surname, Age, Phone Number
COLUMN_WEIGHTS = (1, 3, 3, 1, 3)

# Footer text position, measured from the top-right page corner
FOOTER_RIGHT_INSET = 40
FOOTER_PAGE_OFFSET = 20
FOOTER_DATE_OFFSET = 40

# Fixed document properties and zip entry times keep XLSX output byte-identical
WORKBOOK_TIMESTAMP = datetime(2000, 1, 1)
ZIP_ENTRY_TIME = (1980, 1, 1, 0, 0, 0)


def format_timestamp(moment):
    return moment.strftime(TIMESTAMP_FORMAT)


class PageFooter:
    """
    Per-page hook drawing ``Page no: N`` and ``Date: <timestamp>``.

    Registered as the page template's ``onPageEnd`` callback, so it fires once
    for every page after its content has been laid out.
    """

    def __init__(self, generated_at=None):
        self.generated_at = generated_at or datetime.now()

    @property
    def date_label(self):
        return f'Date: {format_timestamp(self.generated_at)}'

    def __call__(self, canvas, doc):
        page_label = f'Page no: {canvas.getPageNumber()}'
        width, height = doc.pagesize
        x = width - FOOTER_RIGHT_INSET

        canvas.saveState()
        canvas.setFont('Helvetica', 9)
        canvas.setFillColor(colors.black)
        canvas.drawRightString(x, height - FOOTER_PAGE_OFFSET, page_label)
        canvas.drawRightString(x, height - FOOTER_DATE_OFFSET, self.date_label)
        canvas.restoreState()


def record_table_rows(records):
    """Header row followed by one row of cell texts per record, in input order."""
    rows = [list(Record.EXPORT_HEADERS)]
    for r in records:
        rows.append([str(value) for value in r.export_row()])
    return rows


def _pdf_styles():
    styles = getSampleStyleSheet()
    return {
        'title': ParagraphStyle(
            'RecordsTitle',
            parent=styles['Title'],
            fontName='Helvetica-Bold',
            fontSize=18,
            leading=22,
            alignment=TA_CENTER,
            spaceAfter=5,
        ),
        'header': ParagraphStyle(
            'RecordsHeaderCell',
            parent=styles['Normal'],
            fontName='Helvetica-Bold',
            fontSize=10,
        ),
        'cell': ParagraphStyle(
            'RecordsCell',
            parent=styles['Normal'],
            fontName='Helvetica',
            fontSize=10,
        ),
    }


def build_records_table(records, width):
    """Five-column table spanning ``width`` points; the header repeats on each page."""
    styles = _pdf_styles()
    rows = record_table_rows(records)

    data = [[Paragraph(escape(text), styles['header']) for text in rows[0]]]
    for row in rows[1:]:
        data.append([Paragraph(escape(text), styles['cell']) for text in row])

    total = sum(COLUMN_WEIGHTS)
    col_widths = [width * weight / total for weight in COLUMN_WEIGHTS]

    table = Table(data, colWidths=col_widths, repeatRows=1)
    table.setStyle(TableStyle([
        ('GRID', (0, 0), (-1, -1), 0.5, colors.black),
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('TOPPADDING', (0, 0), (-1, -1), 4),
        ('BOTTOMPADDING', (0, 0), (-1, -1), 4),
    ]))
    return table


def render_records_pdf(records, generated_at=None, footer=None):
    """
    Render records as a PDF document.

    Args:
        records: Sequence of Record objects, rendered in the given order
        generated_at: Timestamp printed under each page number (default: now)
        footer: Page hook to register instead of a fresh PageFooter

    Returns:
        PDF content as bytes
    """
    if footer is None:
        footer = PageFooter(generated_at)

    buffer = BytesIO()
    doc = BaseDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=36,
        rightMargin=36,
        # room for the page number and date drawn by the footer hook
        topMargin=54,
        bottomMargin=36,
        title=PDF_TITLE,
    )
    frame = Frame(doc.leftMargin, doc.bottomMargin, doc.width, doc.height, id='records')
    doc.addPageTemplates([PageTemplate(id='records', frames=[frame], onPageEnd=footer)])

    story = [
        Paragraph(PDF_TITLE, _pdf_styles()['title']),
        Spacer(1, 10),
        build_records_table(records, doc.width),
    ]
    doc.build(story)

    pdf_bytes = buffer.getvalue()
    buffer.close()
    return pdf_bytes


def render_records_xlsx(records):
    """
    Render records as an XLSX workbook with a single ``User Records`` sheet.

    Returns:
        Workbook content as bytes
    """
    wb = Workbook()
    wb.properties.created = WORKBOOK_TIMESTAMP
    wb.properties.modified = WORKBOOK_TIMESTAMP
    ws = wb.active
    ws.title = SHEET_TITLE

    ws.append(list(Record.EXPORT_HEADERS))
    header_font = Font(bold=True)
    for cell in ws[1]:
        cell.font = header_font

    for r in records:
        ws.append(r.export_row())

    # ExcelWriter directly: Workbook.save would stamp the modified time with now()
    raw = BytesIO()
    with ZipFile(raw, 'w', ZIP_DEFLATED, allowZip64=True) as archive:
        ExcelWriter(wb, archive).write_data()

    return _pin_zip_entry_times(raw.getvalue())


def _pin_zip_entry_times(content):
    """Rewrite a zip archive with every entry dated ZIP_ENTRY_TIME."""
    out = BytesIO()
    with ZipFile(BytesIO(content)) as src, ZipFile(out, 'w', ZIP_DEFLATED) as dst:
        for item in src.infolist():
            entry = ZipInfo(item.filename, date_time=ZIP_ENTRY_TIME)
            entry.compress_type = ZIP_DEFLATED
            entry.external_attr = item.external_attr
            dst.writestr(entry, src.read(item.filename))
    return out.getvalue()
