import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from spinwin.api.routes import admin, participant
from spinwin.core.config import settings
from spinwin.core.database import engine
from spinwin.i18n import translator
from spinwin.services.sheets import SheetsMirror
from spinwin.services.store import ensure_schema

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(levelname)s - [%(name)s] - %(message)s',
)
logger = logging.getLogger(__name__)

PUBLIC_DIR = Path(__file__).parent / 'public'


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_schema(engine)
    app.state.mirror = SheetsMirror.from_settings(settings)
    logger.info('Server listening on port %s', settings.PORT)
    yield


app = FastAPI(title='Spin-to-Win Backend', lifespan=lifespan)

# Routers
app.include_router(participant.router, tags=['participant'])
app.include_router(admin.router, prefix='/admin', tags=['admin'])


@app.middleware('http')
async def add_locale_header(request: Request, call_next):
    locale = request.headers.get('X-Locale', settings.DEFAULT_LOCALE)
    request.state.locale = locale
    response = await call_next(request)
    response.headers['Content-Language'] = locale
    return response


def _server_error(request: Request) -> JSONResponse:
    locale = getattr(request.state, 'locale', settings.DEFAULT_LOCALE)
    msg = translator.t('errors.server', locale=locale)
    return JSONResponse(status_code=500, content={'error': msg})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={'error': exc.detail},
        headers=getattr(exc, 'headers', None),
    )


@app.exception_handler(SQLAlchemyError)
async def store_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error('%s error', request.url.path, exc_info=exc)
    return _server_error(request)


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.error('%s error', request.url.path, exc_info=exc)
    return _server_error(request)


@app.get('/health', tags=['meta'])
async def health():
    return {'status': 'ok'}


# Mounted last so the routes above win over same-named files
app.mount('/', StaticFiles(directory=PUBLIC_DIR, html=True), name='public')
