from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from rafflecode.config import Config
from rafflecode.core.modules.code.storage import CodeStore

if TYPE_CHECKING:
    from rafflecode.core.modules.code.service import CodeService


class Service:
    """Base class for services with direct access to the code store."""

    def __init__(self, store: CodeStore) -> None:
        self.store = store
        self._core: Core | None = None

    async def on_start(self) -> None:
        """Initialize service on application startup."""

    async def on_stop(self) -> None:
        """Cleanup service on application shutdown."""

    @property
    def core(self) -> Core:
        """Get the core application context."""
        if self._core is None:
            raise RuntimeError("Core not set for service")
        return self._core

    def set_core(self, core: Core) -> None:
        """Set the core application context."""
        self._core = core


class Services:
    """Service registry holding every service instance."""

    code: CodeService

    def __init__(self, store: CodeStore) -> None:
        from rafflecode.core.modules.code.service import CodeService  # noqa: PLC0415

        self.code = CodeService(store)
        self._services: list[Service] = [self.code]

    def set_core(self, core: Core) -> None:
        """Set core reference for all services."""
        for service in self._services:
            service.set_core(core)

    async def start_all(self) -> None:
        for service in self._services:
            await service.on_start()

    async def stop_all(self) -> None:
        for service in self._services:
            await service.on_stop()


class Core:
    """Container providing config, the code store, and all service instances."""

    config: Config
    store: CodeStore
    services: Services

    def __init__(self, config: Config) -> None:
        self.config = config
        self.store = CodeStore(Path(config.data_path) / config.codes_filename)
        self.services = Services(self.store)
        self.services.set_core(self)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Manage application lifecycle - startup and shutdown."""
        await self.on_start()
        try:
            yield
        finally:
            await self.on_stop()

    async def on_start(self) -> None:
        await self.services.start_all()

    async def on_stop(self) -> None:
        await self.services.stop_all()
