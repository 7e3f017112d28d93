# services/module_catalog.py

from typing import List

from core.cache import cache_delete, cache_get, cache_key, cache_set
from core.config import settings
from core.errors import StorageError, storage_error
from core.logging_config import logger
from core.supabase_client import get_supabase_client
from models.module import Module

CATALOG_CACHE_KEY = cache_key("modules", "catalog")


# -----------------------------------------------------
# Global module catalog (cached)
# -----------------------------------------------------
def list_modules() -> List[Module]:
    """
    Every module known to the platform, in sort order.

    Raises:
        StorageError: Supabase is unreachable or not configured
    """
    cached = cache_get(CATALOG_CACHE_KEY)
    if cached is not None:
        return cached

    client = get_supabase_client()
    if client is None:
        raise StorageError("List modules", "Supabase client not configured")

    try:
        result = (
            client.table("modules")
            .select("id, slug, name, description, icon, category, sort_order, is_core")
            .order("sort_order")
            .execute()
        )
    except Exception as e:
        raise storage_error(e, "List modules") from e

    modules = [Module.model_validate(row) for row in (result.data or [])]
    logger.debug(f"Loaded {len(modules)} modules from catalog")

    cache_set(CATALOG_CACHE_KEY, modules, ttl_seconds=settings.MODULE_CATALOG_CACHE_TTL)
    return modules


def get_module(slug: str):
    return next((m for m in list_modules() if m.slug == slug), None)


def invalidate_module_catalog():
    cache_delete(CATALOG_CACHE_KEY)
