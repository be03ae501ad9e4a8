# src/sanity/hierarchy.py - v1
"""Flatten a reader hierarchy into the cache keys of every nested reader."""

from __future__ import annotations

import logging
from collections import deque
from typing import Any

from cachesanity.readers.base import AlreadyClosedError, IndexReader

logger = logging.getLogger(__name__)


def get_all_descendant_reader_keys(seed: Any) -> list[Any]:
    """Breadth-first walk of the sub-readers below ``seed``.

    Any key that is itself an IndexReader is expanded into the cache keys of
    its child contexts. Keys that are not readers, leaf readers and closed
    readers contribute no children. A sub-reader whose cache key cannot be
    read because it was closed is left out; its siblings are still walked.

    Args:
        seed: Reader key to start from. Need not be a reader at all.

    Returns:
        Cache keys of all descendants in discovery order, without ``seed``.
        Each key appears once even if reachable along several paths.
    """
    seen: set[int] = {id(seed)}
    pending: deque[Any] = deque([seed])
    descendants: list[Any] = []

    while pending:
        obj = pending.popleft()
        if not isinstance(obj, IndexReader):
            continue
        try:
            children = obj.context.children
        except AlreadyClosedError:
            logger.debug("Skipping closed reader %s during hierarchy walk", obj)
            continue
        for ctx in children or ():
            try:
                key = ctx.reader.core_cache_key
            except AlreadyClosedError:
                logger.debug("Skipping closed sub-reader of %s during hierarchy walk", obj)
                continue
            if id(key) in seen:
                continue
            seen.add(id(key))
            descendants.append(key)
            pending.append(key)

    return descendants
