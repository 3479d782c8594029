from datetime import datetime, timezone
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status

import logging

from app.api.deps import body_docs, validated_body
from app.db.session import get_store
from app.db.store import RecordStore
from app.models.enums import ReportStatus
from app.schemas.common import MessageResponse
from app.schemas.report import ReportCreate, ReportResponse, ReportUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Report not found")

@router.get("", response_model=List[ReportResponse])
def list_reports(store: RecordStore = Depends(get_store)):
    """
    List every report.
    """
    return store.reports.all()

@router.post("", response_model=ReportResponse, status_code=status.HTTP_201_CREATED, openapi_extra=body_docs(ReportCreate))
def create_report(
    report_data: ReportCreate = Depends(validated_body(ReportCreate, "Invalid report data")),
    store: RecordStore = Depends(get_store),
):
    """
    File a report. userId and carId are stored as given without checking
    that the user or car exists.
    """
    report = store.reports.create(report_data.model_dump())
    logger.info(f"Filed {report.type} report {report.id} for user {report.userId}")
    return report

@router.get("/{report_id}", response_model=ReportResponse)
def get_report(report_id: str, store: RecordStore = Depends(get_store)):
    report = store.reports.get(report_id)
    if report is None:
        raise _not_found()
    return report

@router.put("/{report_id}", response_model=ReportResponse, openapi_extra=body_docs(ReportUpdate))
def update_report(
    report_id: str,
    changes: ReportUpdate = Depends(validated_body(ReportUpdate, "Invalid report data")),
    store: RecordStore = Depends(get_store),
):
    """
    Apply a partial update to a report.

    Moving a report to ``resolved`` without sending resolvedAt stamps it with
    the current time, unless the report already carries one.
    """
    updates = changes.changes()
    if updates.get("status") == ReportStatus.RESOLVED.value and "resolvedAt" not in updates:
        current = store.reports.get(report_id)
        if current is not None and current.resolvedAt is None:
            updates["resolvedAt"] = datetime.now(timezone.utc)

    report = store.reports.update(report_id, updates)
    if report is None:
        raise _not_found()
    return report

@router.delete("/{report_id}", response_model=MessageResponse)
def delete_report(report_id: str, store: RecordStore = Depends(get_store)):
    if not store.reports.delete(report_id):
        raise _not_found()

    logger.info(f"Deleted report {report_id}")
    return MessageResponse(message="Report deleted successfully")
