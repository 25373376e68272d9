# smunch/db/database.py
import logging

import asyncpg

from smunch import config

log = logging.getLogger(__name__)

pool: asyncpg.pool.Pool = None


async def init_db():
    global pool
    if pool is None:
        if not config.DATABASE_URL:
            raise RuntimeError("DATABASE_URL missing in .env")
        pool = await asyncpg.create_pool(config.DATABASE_URL, min_size=1, max_size=10)
        await create_tables()
        log.info("✅ DB initialised")


async def close_db():
    global pool
    if pool is not None:
        await pool.close()
        pool = None


async def create_tables():
    async with pool.acquire() as conn:

        # USERS ------------------------------------------------
        await conn.execute("""
        CREATE TABLE IF NOT EXISTS users (
            user_id SERIAL PRIMARY KEY,
            email VARCHAR(255) UNIQUE,
            name VARCHAR(80),
            role VARCHAR(16) DEFAULT 'user',
            is_verified BOOLEAN DEFAULT FALSE,
            created_at TIMESTAMPTZ DEFAULT NOW()
        );
        """)

        # MENU ITEMS -------------------------------------------
        await conn.execute("""
        CREATE TABLE IF NOT EXISTS menu_items (
            menu_item_id SERIAL PRIMARY KEY,
            name VARCHAR(120) NOT NULL,
            price_cents INTEGER NOT NULL
        );
        """)

        # ORDERS -----------------------------------------------
        await conn.execute("""
        CREATE TABLE IF NOT EXISTS orders (
            order_id SERIAL PRIMARY KEY,
            customer_id INTEGER REFERENCES users(user_id),
            status VARCHAR(24) DEFAULT 'pending',
            total_amount_cents INTEGER NOT NULL,
            delivery_fee_cents INTEGER NOT NULL DEFAULT 0,
            delivery_time TIMESTAMPTZ NOT NULL,
            building VARCHAR(40),
            room_type VARCHAR(40),
            room_number VARCHAR(20),
            created_at TIMESTAMPTZ DEFAULT NOW()
        );
        """)

        # ORDER ITEMS ------------------------------------------
        await conn.execute("""
        CREATE TABLE IF NOT EXISTS order_items (
            order_item_id SERIAL PRIMARY KEY,
            order_id INTEGER REFERENCES orders(order_id) ON DELETE CASCADE,
            menu_item_id INTEGER REFERENCES menu_items(menu_item_id),
            quantity INTEGER NOT NULL,
            price_cents INTEGER NOT NULL
        );
        """)

        log.info("✅ Tables ready")
