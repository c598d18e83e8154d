"""Seed the database with development data.

Usage:
  python scripts/seed.py                  # test user + 30 days of body records
  python scripts/seed.py --days 7 --mock  # also replace the columns table

Reads DATABASE_URL like the API does.
"""
import argparse
import asyncio
import logging
import os
import sys
from datetime import timedelta

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "api"))

from auth.repository import UserRepository
from body_records.repository import BodyRecordRepository
from core.clock import Clock, SystemClock
from core.db import Database
from core.log import configure_logging
from core.settings import Settings

logger = logging.getLogger("seed")

TEST_SUBJECT_ID = "test-subject-id"

# (title, content, category, tags, published offset from now)
MOCK_COLUMNS = [
    (
        "Health Tips for Daily Life",
        "Small daily habits add up: drink water, sleep well and take short walks.",
        "health",
        ["health", "wellness"],
        timedelta(hours=-24),
    ),
    (
        "Diet Strategies for Weight Loss",
        "Focus on whole foods, watch portion sizes and keep a steady calorie deficit.",
        "nutrition",
        ["diet", "nutrition", "health"],
        timedelta(hours=-48),
    ),
    (
        "Exercise Routines for Beginners",
        "Start with three short sessions a week and build up gradually.",
        "fitness",
        ["exercise", "fitness"],
        timedelta(hours=-72),
    ),
    (
        "Future Health Trends",
        "Not published yet.",
        "trends",
        ["future", "health"],
        timedelta(hours=24),
    ),
]


async def seed_body_records(db: Database, clock: Clock, *, days: int) -> int:
    users = UserRepository(db, clock)
    body_records = BodyRecordRepository(db, clock)

    user = await users.create(TEST_SUBJECT_ID)
    logger.info("seed_user_ready subject_id=%s user_id=%s", TEST_SUBJECT_ID, user["id"])

    today = clock.now().date()
    saved = 0
    for i in range(days):
        record_date = today - timedelta(days=i)
        try:
            await body_records.save(
                user_id=user["id"],
                record_date=record_date,
                weight_kg=70.0 + i % 5,
                body_fat_percentage=15.0 + i % 3,
            )
        except Exception:
            logger.exception("seed_body_record_failed date=%s", record_date)
            continue
        saved += 1
    return saved


async def seed_mock_columns(db: Database, clock: Clock) -> int:
    now = clock.now()
    async with db.pool.acquire() as conn:
        async with conn.transaction():
            await conn.execute("TRUNCATE TABLE columns")
            for title, content, category, tags, offset in MOCK_COLUMNS:
                await conn.execute(
                    """
                    INSERT INTO columns (title, content, category, tags, published_at, created_at, updated_at)
                    VALUES ($1, $2, $3, $4, $5, $6, $6)
                    """,
                    title,
                    content,
                    category,
                    tags,
                    now + offset,
                    now,
                )
    return len(MOCK_COLUMNS)


async def run(settings: Settings, *, days: int, mock: bool) -> None:
    clock = SystemClock()
    db = Database(
        settings.database_url,
        min_size=1,
        max_size=2,
        command_timeout=settings.db_command_timeout,
    )
    await db.connect()
    try:
        saved = await seed_body_records(db, clock, days=days)
        logger.info("seed_body_records_done saved=%s days=%s", saved, days)
        if mock:
            count = await seed_mock_columns(db, clock)
            logger.info("seed_columns_done count=%s", count)
    finally:
        await db.close()


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("-d", "--days", type=int, default=30, help="Number of days of body records to create")
    parser.add_argument("-m", "--mock", action="store_true", help="Replace the columns table with mock columns")
    args = parser.parse_args()

    settings = Settings.from_env()
    configure_logging(settings.log_level)
    asyncio.run(run(settings, days=args.days, mock=args.mock))


if __name__ == "__main__":
    main()
