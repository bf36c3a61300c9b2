from fastapi import HTTPException, Request, status

from spinwin.core.config import settings
from spinwin.i18n import translator
from spinwin.services.sheets import SheetsMirror

USER_COOKIE = 'userId'
ADMIN_COOKIE = 'admin'


def get_locale(request: Request) -> str:
    return getattr(request.state, 'locale', settings.DEFAULT_LOCALE)


def parse_user_id(value: str | None) -> int | None:
    """Turn a ``userId`` cookie value into a row id; None if unusable."""
    if not value:
        return None
    try:
        user_id = int(value)
    except ValueError:
        return None
    return user_id if user_id > 0 else None


def get_user_id(request: Request) -> int | None:
    return parse_user_id(request.cookies.get(USER_COOKIE))


def require_user_id(request: Request) -> int:
    user_id = get_user_id(request)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=translator.t('errors.no_user_cookie', locale=get_locale(request)),
        )
    return user_id


def require_admin(request: Request) -> None:
    if request.cookies.get(ADMIN_COOKIE) != 'true':
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=translator.t('errors.unauthorized', locale=get_locale(request)),
        )


def get_mirror(request: Request) -> SheetsMirror:
    mirror = getattr(request.app.state, 'mirror', None)
    if mirror is None:
        # lifespan has not run (e.g. a bare TestClient); behave as disabled
        mirror = SheetsMirror(None, '')
    return mirror
