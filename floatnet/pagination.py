"""Lazy page iteration over Networking service list calls."""

from collections.abc import Mapping

from oslo_log import log as logging

from .exceptions import DecodeError

LOG = logging.getLogger(__name__)


def iter_pages(list_func, collection, **filters):
    """Yield the records of each page returned by a neutronclient list call.

    Pages are requested on demand, so a consumer that stops early never
    fetches the remaining pages.

    Args:
        list_func: Bound list method (e.g., client.list_floatingips)
        collection: Response key holding the records (e.g., "floatingips")
        **filters: Query filters passed to the list call

    Yields:
        List of record dicts for each page

    Raises:
        DecodeError: A page does not carry a list under ``collection``
    """
    for page_number, page in enumerate(list_func(retrieve_all=False, **filters), start=1):
        records = page.get(collection) if isinstance(page, Mapping) else None
        if not isinstance(records, list):
            raise DecodeError(
                resource=collection,
                details=f"page {page_number} has no '{collection}' list",
            )
        LOG.debug("Fetched %s page %d: %d record(s)", collection, page_number, len(records))
        yield records
