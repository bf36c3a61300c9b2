import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request, Response
from sqlalchemy.orm import Session

from ...api.deps import USER_COOKIE, get_locale, get_mirror, get_user_id, require_user_id
from ...core.database import get_db
from ...i18n import translator
from ...schemas.spin import CheckUserOut, RegisterIn, SaveResultIn, SaveResultOut, SuccessOut
from ...services import store
from ...services.sheets import SheetsMirror

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get('/checkUser', response_model=CheckUserOut, response_model_exclude_unset=True)
def check_user(user_id: int | None = Depends(get_user_id), db: Session = Depends(get_db)):
    if user_id is None:
        return CheckUserOut(already_played=False)
    spin = store.find_spin(db, user_id)
    if spin is None:
        return CheckUserOut(already_played=False)
    return CheckUserOut(already_played=True, prize=spin.prize)


@router.post('/register', response_model=SuccessOut)
def register(data: RegisterIn, response: Response, db: Session = Depends(get_db)):
    spin_id = store.create_spin(db, data.name, data.contact)
    response.set_cookie(USER_COOKIE, str(spin_id), httponly=True, samesite=None)
    logger.info('Registered spin %s', spin_id)
    return SuccessOut(success=True)


@router.post('/saveResult', response_model=SaveResultOut)
def save_result(
    data: SaveResultIn,
    request: Request,
    background_tasks: BackgroundTasks,
    user_id: int = Depends(require_user_id),
    db: Session = Depends(get_db),
    mirror: SheetsMirror = Depends(get_mirror),
):
    spin = store.set_prize(db, user_id, data.prize)
    if spin is None:
        raise HTTPException(
            status_code=400,
            detail=translator.t('errors.unknown_user', locale=get_locale(request)),
        )
    if mirror.enabled:
        background_tasks.add_task(mirror.append_row, spin.name, spin.contact, spin.prize, spin.timestamp)
    return SaveResultOut(success=True, prize=spin.prize)
