import io
from typing import Sequence
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib import colors
from core.stats import compute_stats, diabetes_type_breakdown, percent_of_total
from core.types import PatientRecord

REGISTRY_COLUMNS = [
    ("Name", "name"), ("IC", "ic"), ("Age", "age"), ("Gender", "gender"),
    ("Diabetes Type", "diabetes_type"), ("HbA1c", "hba1c"), ("BMI", "bmi"), ("Status", "status"),
]


def _cell(v) -> str:
    return "—" if v is None or v == "" else str(v)


def build_pdf(records: Sequence[PatientRecord]) -> bytes:
    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=landscape(A4), title="MOGC Summary")
    styles = getSampleStyleSheet()
    story = []

    stats = compute_stats(records)
    types = diabetes_type_breakdown(records)
    story.append(Paragraph("<b>MOGC Dashboard Summary</b>", styles["Title"]))
    story.append(Paragraph(
        f"<b>Total patients:</b> {stats.total} &nbsp;&nbsp; "
        f"<b>Active:</b> {stats.active} &nbsp;&nbsp; "
        f"<b>HbA1c &lt; 6.5%:</b> {stats.hba1c_controlled} ({percent_of_total(stats.hba1c_controlled, stats.total)}%) &nbsp;&nbsp; "
        f"<b>Normal BMI:</b> {stats.bmi_normal} ({percent_of_total(stats.bmi_normal, stats.total)}%)",
        styles["Normal"],
    ))
    story.append(Paragraph(
        " &nbsp;&nbsp; ".join(f"<b>{t}:</b> {n}" for t, n in types.items()),
        styles["Normal"],
    ))
    story.append(Spacer(1, 8))

    if records:
        rows = [[_cell(getattr(r, attr)) for _, attr in REGISTRY_COLUMNS] for r in records]
        tbl = Table(
            [[label for label, _ in REGISTRY_COLUMNS]] + rows,
            hAlign='LEFT',
            repeatRows=1,
        )
        tbl.setStyle(TableStyle([
            ('BACKGROUND', (0,0), (-1,0), colors.HexColor('#eeeeee')),
            ('GRID', (0,0), (-1,-1), 0.25, colors.grey),
            ('FONTNAME', (0,0), (-1,0), 'Helvetica-Bold'),
            ('FONTSIZE', (0,0), (-1,-1), 8),
            ('ROWBACKGROUNDS', (0,1), (-1,-1), [colors.white, colors.HexColor('#fafafa')]),
        ]))
        story.append(tbl)

    story.append(Spacer(1, 10))
    story.append(Paragraph(
        "<b>Note:</b> Age and gender of newly added patients are inferred from the IC number.",
        styles['Italic']
    ))

    doc.build(story)
    return buf.getvalue()
