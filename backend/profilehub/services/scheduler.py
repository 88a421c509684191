"""Background scheduler for session housekeeping."""
from __future__ import annotations

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from profilehub.services.sessions import SessionManager

logger = logging.getLogger(__name__)

PURGE_JOB_ID = "purge-expired-sessions"


async def _purge_expired_sessions(sessions: SessionManager) -> None:
    sessions.purge_expired()


def create_scheduler() -> AsyncIOScheduler:
    return AsyncIOScheduler()


def start_scheduler(scheduler: AsyncIOScheduler) -> None:
    if not scheduler.running:
        scheduler.start()
        logger.info("Scheduler started")


def stop_scheduler(scheduler: AsyncIOScheduler) -> None:
    if scheduler.running:
        scheduler.shutdown(wait=False)


def schedule_session_purge_job(scheduler: AsyncIOScheduler, sessions: SessionManager, interval_seconds: int) -> None:
    trigger = IntervalTrigger(seconds=interval_seconds)
    scheduler.add_job(
        _purge_expired_sessions, trigger=trigger, id=PURGE_JOB_ID, args=[sessions], replace_existing=True
    )
    logger.info("Scheduled session purge job every %s seconds", interval_seconds)
