import logging
import multiprocessing
from pathlib import Path

from alembic import command
from alembic.config import Config

ALEMBIC_INI = Path(__file__).resolve().parents[2] / "alembic.ini"

logger = logging.getLogger(__name__)


def apply_migrations():
    alembic_logger = logging.getLogger("alembic")
    alembic_logger.propagate = True
    alembic_cfg = Config(str(ALEMBIC_INI))
    command.upgrade(alembic_cfg, "head")


def run_migrations_in_subprocess():
    """Run ``alembic upgrade head`` in a child process and fail if it failed."""
    process = multiprocessing.Process(target=apply_migrations)
    process.start()
    process.join()
    if process.exitcode != 0:
        logger.error(f"alembic upgrade exited with code {process.exitcode}")
        raise RuntimeError(f"Database migration failed (exit code {process.exitcode})")
