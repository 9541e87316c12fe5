"""Recursive resolution of a gateway configuration tree.

A root document may name a provider directory; every matching file in that
directory is resolved the same way and its routers are overlaid on the
parent's. Filesystem access runs in worker threads so that sibling files
are resolved concurrently.
"""

import asyncio
import os
import time
import tomllib
from pathlib import Path

from pydantic import ValidationError

from lobby.config.models.gateway import FailurePolicy, GatewayConfig
from lobby.gateway.errors import (
    DirectoryUnlistableError,
    DocumentMalformedError,
    DocumentUnreadableError,
    GatewayConfigError,
)
from lobby.gateway.models import RouteRule, RoutingDocument, RoutingTable
from lobby.gateway.rules import parse_path_prefix
from lobby.observability.logging import get_logger
from lobby.observability.metrics import (
    GATEWAY_DOCUMENT_ERRORS,
    GATEWAY_DOCUMENTS_READ,
    ROUTE_DISCOVERY_LATENCY,
    ROUTES_DISCOVERED,
)

logger = get_logger(__name__)


class ConfigResolver:
    """Resolves routers from a Traefik configuration file and its provider files.

    The resolver keeps no state between calls: every call reads the
    filesystem again.

    Precedence: a document's own routers form the base, and child documents
    from its provider directory are overlaid in lexical filename order, so
    the last file wins on duplicate router names.
    """

    def __init__(self, config: GatewayConfig | None = None) -> None:
        """Initialize the resolver.

        Args:
            config: Discovery settings (failure policies, file suffixes,
                cycle guard). Defaults to ``GatewayConfig()``.
        """
        self._config = config or GatewayConfig()

    async def resolve_routers(self, path: Path) -> dict[str, RouteRule]:
        """Resolve the merged router mapping for a configuration file.

        Args:
            path: Configuration document to start from

        Returns:
            Router name to rule mapping. Empty when the document could not
            be used under the ``skip`` policy.

        Raises:
            GatewayConfigError: Only under a ``raise`` failure policy
        """
        return await self._resolve(Path(path), frozenset())

    async def extract_routes(self, path: Path) -> RoutingTable:
        """Resolve a configuration tree and keep the path-prefix routes.

        Args:
            path: Configuration document to start from

        Returns:
            Service name to path prefix. Routers whose rule is not a single
            ``PathPrefix`` literal are left out.
        """
        start = time.perf_counter()
        routers = await self.resolve_routers(path)

        routes: RoutingTable = {}
        for name, router in routers.items():
            prefix = parse_path_prefix(router.rule)
            if prefix is None:
                continue
            routes[router.service or name] = prefix

        ROUTE_DISCOVERY_LATENCY.observe(time.perf_counter() - start)
        ROUTES_DISCOVERED.set(len(routes))
        logger.info(
            "routes_discovered",
            count=len(routes),
            prefixes=list(routes.values()),
        )
        return routes

    async def _resolve(
        self, path: Path, visited: frozenset[Path]
    ) -> dict[str, RouteRule]:
        logger.info("reading_gateway_config", path=str(path))

        try:
            document = await self._load_document(path)
        except (DocumentUnreadableError, DocumentMalformedError) as e:
            self._fail(e, self._config.document_failure_policy)
            return {}

        routers = dict(document.routers)
        directory = document.provider_directory
        if directory is None:
            return routers

        if self._config.guard_directory_cycles:
            canonical = await asyncio.to_thread(directory.resolve)
            if canonical in visited:
                logger.warning(
                    "provider_directory_cycle_skipped",
                    path=str(path),
                    directory=str(directory),
                )
                return routers
            visited = visited | {canonical}

        try:
            children = await self._list_provider_files(directory)
        except DirectoryUnlistableError as e:
            self._fail(e, self._config.directory_failure_policy)
            return routers

        # a failing branch cancels its siblings; the first error propagates
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(self._resolve(child, visited))
                    for child in children
                ]
        except ExceptionGroup as e:
            raise e.exceptions[0] from None

        for task in tasks:
            routers.update(task.result())

        return routers

    async def _load_document(self, path: Path) -> RoutingDocument:
        try:
            content = await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            raise DocumentUnreadableError(path, str(e)) from e

        try:
            document = RoutingDocument.from_toml(tomllib.loads(content.decode("utf-8")))
        except (UnicodeDecodeError, tomllib.TOMLDecodeError, ValidationError, ValueError) as e:
            raise DocumentMalformedError(path, str(e)) from e

        GATEWAY_DOCUMENTS_READ.inc()
        return document

    async def _list_provider_files(self, directory: Path) -> list[Path]:
        try:
            names = await asyncio.to_thread(os.listdir, directory)
        except OSError as e:
            raise DirectoryUnlistableError(directory, str(e)) from e

        suffixes = tuple(self._config.provider_file_suffixes)
        return [
            directory / name
            for name in sorted(names)
            if not suffixes or name.endswith(suffixes)
        ]

    def _fail(self, error: GatewayConfigError, policy: FailurePolicy) -> None:
        GATEWAY_DOCUMENT_ERRORS.labels(error_type=error.error_type).inc()
        if policy == "raise":
            raise error
        logger.warning(
            f"gateway_{error.error_type}",
            path=str(error.path),
            error=error.reason,
        )
