from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from rafflecode.config import Config
from rafflecode.core.core import Core
from rafflecode.core.modules.code.models import CodeList, CodeRecord, CodeStats, CodeType, GeneratedCode


class App:
    """Facade for all application operations, delegating to Core services."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    @property
    def codes_file(self) -> str:
        """Location of the codes file."""
        return str(self._core.store.path)

    async def generate_code(self, code_type: CodeType) -> GeneratedCode:
        """Generate a new code of the given type."""
        return self._core.services.code.generate(code_type)

    async def get_codes(self) -> CodeList:
        """Get all stored codes with their types."""
        return self._core.services.code.list_codes()

    async def get_code_details(self) -> list[CodeRecord]:
        """Get all stored records with ids and timestamps."""
        return self._core.services.code.get_details()

    async def get_stats(self) -> CodeStats:
        """Get counts per type and first/last generation time."""
        return self._core.services.code.get_stats()

    async def reset_codes(self) -> None:
        """Delete all stored codes."""
        self._core.services.code.reset()
