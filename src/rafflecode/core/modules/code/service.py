import structlog

from rafflecode.core.core import Service
from rafflecode.core.modules.code.generator import generate_code
from rafflecode.core.modules.code.models import (
    AppendResult,
    CodeList,
    CodeRecord,
    CodeStats,
    CodeSummary,
    CodeType,
    GeneratedCode,
)
from rafflecode.core.modules.code.storage import CodeStore
from rafflecode.errors import ConflictError, StorageError

logger = structlog.get_logger(__name__)

STORAGE_DISABLED_MESSAGE = "Storage disabled - codes are not persisted"


class CodeService(Service):
    """Generates codes and owns every write to the store together with the in-memory set of known codes."""

    def __init__(self, store: CodeStore) -> None:
        super().__init__(store)
        self._known_codes: set[str] = set()

    async def on_start(self) -> None:
        """Load known codes from the store."""
        self._known_codes = {record.code for record in self.store.load_all()}
        logger.info("Codes loaded", count=len(self._known_codes), path=str(self.store.path))

    @property
    def known_count(self) -> int:
        return len(self._known_codes)

    def is_known(self, code: str) -> bool:
        return code in self._known_codes

    def save_code(self, code: str, code_type: CodeType) -> AppendResult:
        """Append a code to the store and track it as known on success."""
        result = self.store.append(code, code_type)
        if result.success:
            self._known_codes.add(code)
        return result

    def generate(self, code_type: CodeType) -> GeneratedCode:
        """Generate a code, saving it first when persistence is enabled."""
        config = self.core.config
        if not config.persist_generated:
            code = generate_code(code_type, config.code_length)
            return GeneratedCode(
                code=code, type=code_type, total_generated=self.known_count, message=STORAGE_DISABLED_MESSAGE
            )

        for _ in range(config.max_generation_attempts):
            code = generate_code(code_type, config.code_length)
            if self.is_known(code):
                logger.debug("Known code generated, retrying", code=code)
                continue
            result = self.save_code(code, code_type)
            if result.success:
                return GeneratedCode(
                    code=code, type=code_type, total_generated=self.known_count, message=result.message
                )
            if not result.is_duplicate:
                raise StorageError(result.message)
            logger.debug("Duplicate code generated, retrying", code=code)

        raise ConflictError(f"Could not generate a unique code after {config.max_generation_attempts} attempts")

    def list_codes(self) -> CodeList:
        records = self.store.load_all()
        return CodeList(codes=[CodeSummary(code=r.code, type=r.type) for r in records], total=len(records))

    def get_details(self) -> list[CodeRecord]:
        return self.store.load_all()

    def get_stats(self) -> CodeStats:
        records = self.store.load_all()
        return CodeStats(
            total_codes=len(records),
            alphabetic=sum(1 for r in records if r.type == CodeType.ALPHABETIC),
            alphanumeric=sum(1 for r in records if r.type == CodeType.ALPHANUMERIC),
            first_generated=records[0].generated_at if records else None,
            last_generated=records[-1].generated_at if records else None,
        )

    def reset(self) -> None:
        """Delete the store and forget all known codes.

        Raises:
            StorageError: If the store file cannot be deleted
        """
        try:
            self.store.clear()
        except OSError as e:
            raise StorageError(f"Failed to reset codes: {e}") from e
        self._known_codes.clear()
        logger.info("All codes cleared", path=str(self.store.path))
