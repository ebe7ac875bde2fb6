"""Instrument seeder for the demo catalogue.

Seeds a small catalogue of Indian market instruments. Idempotent via the
unique symbol: existing rows (and their prices) are left untouched.
"""

from decimal import Decimal

import sqlalchemy as sa
import structlog
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

logger = structlog.get_logger(__name__)

DEFAULT_INSTRUMENTS = [
    {
        "symbol": "TCS",
        "name": "Tata Consultancy Services",
        "category": "stock",
        "price_per_unit": Decimal("3420.50"),
    },
    {
        "symbol": "RELIANCE",
        "name": "Reliance Industries",
        "category": "stock",
        "price_per_unit": Decimal("2340.25"),
    },
    {
        "symbol": "HDFCBANK",
        "name": "HDFC Bank",
        "category": "stock",
        "price_per_unit": Decimal("1565.80"),
    },
    {
        "symbol": "SBIBCF",
        "name": "SBI Bluechip Fund",
        "category": "mutual_fund",
        "price_per_unit": Decimal("285.45"),
    },
    {
        "symbol": "NIFTY50ETF",
        "name": "Nifty 50 ETF",
        "category": "etf",
        "price_per_unit": Decimal("158.90"),
    },
    {
        "symbol": "ICICIPITF",
        "name": "ICICI Prudential IT Fund",
        "category": "mutual_fund",
        "price_per_unit": Decimal("425.30"),
    },
    {
        "symbol": "GOI2035",
        "name": "Government of India Bond 2035",
        "category": "bond",
        "price_per_unit": Decimal("1050.00"),
    },
]

_INSERT_INSTRUMENT = sa.text("""
    INSERT INTO instruments (
        id, symbol, name, category, price_per_unit, currency, is_active,
        created_at, updated_at
    )
    VALUES (
        :id, :symbol, :name, :category, :price_per_unit, :currency, :is_active,
        CURRENT_TIMESTAMP, CURRENT_TIMESTAMP
    )
""").bindparams(
    sa.bindparam("id", type_=sa.Uuid()),
    sa.bindparam("price_per_unit", type_=sa.Numeric(19, 4)),
)


async def seed_instruments(session: AsyncSession, currency: str = "INR") -> None:
    """Seed the demo instrument catalogue. Idempotent via symbol check.

    Args:
        session: Async database session.
        currency: ISO 4217 currency for seeded prices.
    """
    seeded_count = 0
    skipped_count = 0

    for instrument in DEFAULT_INSTRUMENTS:
        symbol = instrument["symbol"]

        result = await session.execute(
            sa.text("SELECT 1 FROM instruments WHERE symbol = :symbol LIMIT 1"),
            {"symbol": symbol},
        )
        if result.fetchone() is not None:
            skipped_count += 1
            logger.debug("instrument_exists", symbol=symbol)
            continue

        await session.execute(
            _INSERT_INSTRUMENT,
            {"id": uuid7(), **instrument, "currency": currency, "is_active": True},
        )
        seeded_count += 1
        logger.info("instrument_seeded", symbol=symbol)

    logger.info(
        "instrument_seeding_complete",
        seeded=seeded_count,
        skipped=skipped_count,
        total=len(DEFAULT_INSTRUMENTS),
    )
