"""
Register configuration.

Values come from the environment; a local ``.env`` file is loaded first
when present.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Supabase credentials
SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
SUPABASE_SERVICE_ROLE_KEY = os.environ.get("SUPABASE_SERVICE_ROLE_KEY", "")

# Table names
TRANSACTIONS_TABLE = os.environ.get("TRANSACTIONS_TABLE", "transactions")
PRODUCTS_TABLE = os.environ.get("PRODUCTS_TABLE", "products")

# Receipt labels
AD_HOC_LABEL = os.environ.get("AD_HOC_LABEL", "Ad-hoc")
CURRENCY_PREFIX = os.environ.get("CURRENCY_PREFIX", "Rp")

# History
HISTORY_DEFAULT_LIMIT = int(os.environ.get("HISTORY_DEFAULT_LIMIT", "50"))
RETENTION_DAYS = int(os.environ.get("RETENTION_DAYS", "30"))

# Register's local time zone; "today" starts at local midnight
TIMEZONE = os.environ.get("TIMEZONE", "Asia/Jakarta")
