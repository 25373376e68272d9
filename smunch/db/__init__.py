# smunch/db/__init__.py

# Expose the DB pool + lifecycle functions from database.py
from .database import init_db, close_db

# ORDERS
from .orders import (
    get_full_order_by_id_or_throw,
)

# USERS
from .users import (
    get_user_by_id_or_throw,
)
