import logging

from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.database import Base
from ..models.spin import Spin

logger = logging.getLogger(__name__)


def ensure_schema(engine: Engine) -> bool:
    """Create the ``spins`` table if it does not exist yet.

    Failures are logged and swallowed so the process still starts; every
    query afterwards will fail and surface as a 500.
    """
    try:
        Base.metadata.create_all(engine)
    except SQLAlchemyError:
        logger.exception('DB init error')
        return False
    logger.info('DB ready')
    return True


def find_spin(db: Session, spin_id: int) -> Spin | None:
    return db.get(Spin, spin_id)


def create_spin(db: Session, name: str | None, contact: str | None) -> int:
    spin = Spin(name=name, contact=contact)
    db.add(spin)
    db.commit()
    db.refresh(spin)
    return spin.id


def set_prize(db: Session, spin_id: int, prize: str | None) -> Spin | None:
    """Store the prize and stamp the row with the database clock.

    Returns None when no row has this id.
    """
    spin = db.get(Spin, spin_id)
    if spin is None:
        return None
    spin.prize = prize
    spin.timestamp = func.now()
    db.commit()
    db.refresh(spin)
    return spin


def list_spins(db: Session) -> list[Spin]:
    return db.query(Spin).order_by(Spin.id.desc()).all()
