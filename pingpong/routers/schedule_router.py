from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from pingpong.schemas import ScheduleSection
from pingpong.services import schedule_service
from pingpong.store import TournamentStore, get_store

router = APIRouter(prefix="/schedule", tags=["schedule"])

@router.get("/", response_model=List[ScheduleSection])
def view_schedule(store: TournamentStore = Depends(get_store)):
    return schedule_service.get_schedule(store)

@router.get("/pdf")
def schedule_pdf(store: TournamentStore = Depends(get_store)):
    content = schedule_service.render_pdf(store)
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=schedule.pdf"},
    )
