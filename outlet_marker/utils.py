import logging
import random, time
from typing import Callable

from environs import Env
from googleapiclient.errors import HttpError

env = Env()

logger = logging.getLogger(__name__)

TRANSIENT_STATUSES = {429, 500, 502, 503, 504}


def is_transient(error: Exception) -> bool:
    """Rate limits and server-side failures; bad ids and permissions are not."""
    return isinstance(error, HttpError) and error.resp.status in TRANSIENT_STATUSES


def retry_with_backoff(fn: Callable, retries=5, backoff_in_seconds=1):
    x = 0
    while True:
        try:
            return fn()
        except Exception as e:
            if x == retries or not is_transient(e):
                raise
            else:
                sleep = backoff_in_seconds * 2 ** x + random.uniform(0, 1)
                logger.warning(
                    "call failed (%s), retry %d/%d in %.1fs", e, x + 1, retries, sleep
                )
                time.sleep(sleep)
                x += 1
