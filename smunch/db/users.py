# smunch/db/users.py

from smunch.errors import NotFoundError

from . import database

# Columns a caller may ask for; anything else never reaches SQL
USER_FIELDS = {"user_id", "email", "name", "role", "is_verified", "created_at"}


def parse_fields(fields: str):
    """Turn "email, name" into a validated column list."""
    columns = [f.strip() for f in (fields or "").split(",") if f.strip()]
    if not columns:
        raise ValueError("At least one user field is required")

    unknown = [c for c in columns if c not in USER_FIELDS]
    if unknown:
        raise ValueError(f"Unknown user field(s): {', '.join(unknown)}")
    return columns


async def get_user_by_id_or_throw(user_id: int, fields: str = "email") -> dict:
    columns = parse_fields(fields)
    async with database.pool.acquire() as conn:
        row = await conn.fetchrow(
            f"SELECT {', '.join(columns)} FROM users WHERE user_id=$1",
            user_id
        )
        if not row:
            raise NotFoundError(
                f"User with ID {user_id} does not exist", code="NOT_FOUND_USER"
            )
        return dict(row)
