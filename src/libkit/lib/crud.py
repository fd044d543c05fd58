"""Identity CRUD library used to exercise the generated project's entry points."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

log = logging.getLogger(__name__)

CrudPayload = dict[str, Any]

CRUD_METHODS: tuple[str, ...] = ("create", "read", "update", "destroy")


class Lib:
    """Each operation logs the instance config and returns its input unchanged."""

    def __init__(self, config: Mapping[str, Any] | None = None) -> None:
        self.config: dict[str, Any] = dict(config or {})

    def create(self, data: CrudPayload) -> CrudPayload:
        log.info("Creating with config: %s", self.config)
        return data

    def read(self, query: CrudPayload) -> CrudPayload:
        log.info("Reading with config: %s", self.config)
        return query

    def update(self, data: CrudPayload) -> CrudPayload:
        log.info("Updating with config: %s", self.config)
        return data

    def destroy(self, query: CrudPayload) -> CrudPayload:
        log.info("Destroying with config: %s", self.config)
        return query

    def call(self, method: str, payload: CrudPayload) -> CrudPayload:
        """Dispatch to one of :data:`CRUD_METHODS` by name."""
        if method not in CRUD_METHODS:
            raise ValueError(f"Unknown method: {method!r}.")
        handler = getattr(self, method)
        return handler(payload)
