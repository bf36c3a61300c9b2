import json
import logging
from datetime import datetime

import gspread
from google.oauth2.service_account import Credentials

logger = logging.getLogger(__name__)

SCOPES = ['https://www.googleapis.com/auth/spreadsheets']


class SheetsMirror:
    """Best-effort copy of completed spins into a Google spreadsheet.

    The mirror is inert when it has no client or no spreadsheet id, and
    ``append_row`` never raises.
    """

    def __init__(self, client: gspread.Client | None, spreadsheet_id: str, range_name: str = 'Sheet1!A:D'):
        self.client = client
        self.spreadsheet_id = spreadsheet_id
        self.range_name = range_name

    @classmethod
    def from_settings(cls, settings) -> 'SheetsMirror':
        client = None
        if settings.GOOGLE_CREDENTIALS:
            try:
                info = json.loads(settings.GOOGLE_CREDENTIALS)
                creds = Credentials.from_service_account_info(info, scopes=SCOPES)
                client = gspread.authorize(creds)
                logger.info('Google Sheets client ready (via ENV)')
            except Exception:
                logger.exception('Google Sheets init error')
        else:
            logger.warning('No Google credentials found. Sheets integration disabled.')
        return cls(client, settings.SPREADSHEET_ID, settings.SHEETS_RANGE)

    @property
    def enabled(self) -> bool:
        return self.client is not None and bool(self.spreadsheet_id)

    def append_row(self, name, contact, prize, timestamp: datetime | None) -> bool:
        if not self.enabled:
            return False
        row = [name, contact, prize, timestamp.isoformat() if timestamp else None]
        try:
            spreadsheet = self.client.open_by_key(self.spreadsheet_id)
            spreadsheet.values_append(
                self.range_name,
                params={'valueInputOption': 'RAW'},
                body={'values': [row]},
            )
        except Exception:
            logger.exception('Sheets append error')
            return False
        return True
