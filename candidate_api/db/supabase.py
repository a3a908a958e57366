"""Process-wide Supabase client.

``get_supabase()`` builds the client from ``settings`` on first use and
returns the same instance afterwards.  Only the application lifespan calls
it; handlers reach storage through the gateway on ``app.state``.
"""

from functools import lru_cache

from supabase import Client, create_client

from candidate_api.core.config import settings


@lru_cache
def get_supabase() -> Client:
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
