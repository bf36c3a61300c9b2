import logging
import secrets
from pathlib import Path

from fastapi import APIRouter, Depends, Response
from fastapi.responses import FileResponse
from sqlalchemy.orm import Session

from spinwin.api.deps import ADMIN_COOKIE, require_admin
from spinwin.core.config import settings
from spinwin.core.database import get_db
from spinwin.schemas.spin import AdminLoginIn, SpinOut, SuccessOut
from spinwin.services import store
from spinwin.services.export import spins_to_csv

logger = logging.getLogger(__name__)
router = APIRouter()

ADMIN_PAGE = Path(__file__).resolve().parents[2] / 'admin.html'


@router.get('', include_in_schema=False)
def admin_page():
    return FileResponse(ADMIN_PAGE, media_type='text/html')


@router.post('/login', response_model=SuccessOut)
def login(data: AdminLoginIn, response: Response):
    if data.password is not None and secrets.compare_digest(
        data.password.encode(), settings.ADMIN_PASSWORD.encode()
    ):
        response.set_cookie(ADMIN_COOKIE, 'true', httponly=True, samesite=None)
        return SuccessOut(success=True)
    logger.warning('Rejected admin login')
    return SuccessOut(success=False)


@router.get('/data', response_model=list[SpinOut], dependencies=[Depends(require_admin)])
def admin_data(db: Session = Depends(get_db)):
    return store.list_spins(db)


@router.get('/export', dependencies=[Depends(require_admin)])
def admin_export(db: Session = Depends(get_db)):
    csv_text = spins_to_csv(store.list_spins(db))
    return Response(
        content=csv_text,
        media_type='text/csv',
        headers={'Content-Disposition': 'attachment; filename="spins.csv"'},
    )
