"""View helper endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from opencloset.core.database import get_db
from opencloset.models.sms import SMS
from opencloset.schemas.helper import (
    AvatarResponse,
    HolidaysResponse,
    ParcelResponse,
    SMSCreate,
    SMSResponse,
    StatusResponse,
)
from opencloset.services.footer import render_footer
from opencloset.services.formatting import avatar_url
from opencloset.services.holiday_service import get_holidays
from opencloset.services.parcel import parcel
from opencloset.services.sms_service import SMSService
from opencloset.services.status import get_status

router = APIRouter()


@router.get(
    "/status/{id_or_name}",
    response_model=StatusResponse,
    summary="Look up status",
    responses={404: {"description": "Unknown status"}},
)
async def lookup_status(id_or_name: str) -> StatusResponse:
    """Translate a status id to its name, or a name to its id."""
    result = get_status(id_or_name)
    if result is None:
        raise HTTPException(status_code=404, detail=f"Unknown status: {id_or_name}")
    return StatusResponse(query=id_or_name, result=result)


@router.get(
    "/holidays/{year}",
    response_model=HolidaysResponse,
    summary="List holidays",
)
async def list_holidays(year: int) -> HolidaysResponse:
    """List the holidays of a year."""
    return HolidaysResponse(year=year, holidays=get_holidays(year))


@router.get(
    "/parcel",
    response_model=ParcelResponse,
    summary="Parcel tracking link",
    responses={404: {"description": "Unknown parcel service"}},
)
async def parcel_link(
    service: str = Query(min_length=1),
    waybill: str = Query(min_length=1),
) -> ParcelResponse:
    """Build the tracking link of a waybill."""
    url = parcel(service, waybill)
    if not url:
        raise HTTPException(status_code=404, detail=f"Unknown parcel service: {service}")
    return ParcelResponse(service=service, waybill=waybill, url=url)


@router.get(
    "/avatar",
    response_model=AvatarResponse,
    summary="Avatar URL",
)
async def avatar(
    email: str = Query(min_length=1),
    size: int | None = Query(default=None, ge=1, le=2048),
    default: str | None = None,
) -> AvatarResponse:
    """Build the avatar URL of an email address."""
    return AvatarResponse(url=avatar_url(email, size=size, default=default))


@router.post(
    "/sms",
    response_model=SMSResponse,
    status_code=201,
    summary="Queue SMS",
    responses={400: {"description": "Missing recipient or text"}},
)
async def send_sms(
    data: SMSCreate,
    db: Session = Depends(get_db),
) -> SMS:
    """Queue a text message."""
    sms = SMSService(db).send(data.to, data.text, sender=data.sender)
    if sms is None:
        raise HTTPException(status_code=400, detail="Recipient and text are required")
    return sms


@router.get(
    "/footer",
    response_class=HTMLResponse,
    summary="Page footer",
)
async def footer() -> str:
    """Render the page footer."""
    return render_footer()
