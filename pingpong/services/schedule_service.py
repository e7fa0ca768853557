from collections import defaultdict
import io

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import cm
from reportlab.pdfgen import canvas

from pingpong.services import match_service
from pingpong.store import TournamentStore

PLAYOFFS = "Playoffs"

def get_schedule(store: TournamentStore):
    """Matches split into one section per group, playoffs last.

    Each section is ``{"name": ..., "group_id": ..., "matches": [...]}``.
    """
    sections = []
    for group in store.groups():
        sections.append({
            "name": group.name,
            "group_id": group.id,
            "matches": match_service.get_by_group(store, group.id),
        })

    playoff_matches = match_service.get_playoff_matches(store)
    if playoff_matches:
        sections.append({"name": PLAYOFFS, "group_id": None, "matches": playoff_matches})

    return sections

def get_playoff_bracket(store: TournamentStore):
    """Playoff matches with their scores, keyed by round number."""
    rounds = defaultdict(list)
    for match in match_service.get_playoff_matches(store):
        rounds[match.round].append((match, store.score(match.id)))
    return dict(sorted(rounds.items()))

def render_pdf(store: TournamentStore, title: str = "Table Tennis Tournament") -> bytes:
    players = {p.id: p.name for p in store.players()}
    sections = get_schedule(store)

    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4)
    width, height = A4

    y = height - 2 * cm

    pdf.setFont("Helvetica-Bold", 16)
    pdf.drawCentredString(width / 2, y, title)
    y -= 30

    for section in sections:
        if y < 4 * cm:
            pdf.showPage()
            y = height - 2 * cm

        y -= 15
        pdf.setFont("Helvetica-Bold", 12)
        pdf.drawCentredString(width / 2, y, section["name"])
        y -= 20
        pdf.setFont("Helvetica", 10)

        if not section["matches"]:
            pdf.drawCentredString(width / 2, y, "No matches scheduled yet")
            y -= 15

        for match in section["matches"]:
            if y < 2 * cm:
                pdf.showPage()
                pdf.setFont("Helvetica", 10)
                y = height - 2 * cm

            score = store.score(match.id)
            pdf.drawString(2 * cm, y, players.get(match.player1_id, "Unknown Player"))
            if score:
                pdf.drawCentredString(width / 2 - 20, y, str(score.player1_score))
                pdf.drawCentredString(width / 2, y, "-")
                pdf.drawCentredString(width / 2 + 20, y, str(score.player2_score))
            else:
                pdf.drawCentredString(width / 2, y, "VS")
            pdf.drawRightString(
                width - 2 * cm, y, players.get(match.player2_id, "Unknown Player")
            )
            y -= 15

    pdf.save()
    buffer.seek(0)
    return buffer.getvalue()
