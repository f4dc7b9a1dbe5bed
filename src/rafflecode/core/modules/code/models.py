"""Raffle code records and API views."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from rafflecode.utils import now


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys on the wire and on disk."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CodeType(StrEnum):
    """Character set a code is drawn from."""

    ALPHABETIC = "alphabetic"
    ALPHANUMERIC = "alphanumeric"


class CodeRecord(CamelModel):
    """Code saved in the store.

    The id is the record count at write time plus one, so it restarts at 1 after a reset.
    """

    code: str
    type: CodeType
    generated_at: datetime = Field(default_factory=now)
    id: int


class AppendResult(BaseModel):
    """Outcome of saving a code. Duplicates and I/O failures are reported here instead of raised."""

    success: bool
    message: str
    is_duplicate: bool = False
    record: CodeRecord | None = None


class GeneratedCode(CamelModel):
    """Freshly generated code (API representation)."""

    code: str = Field(..., description="Generated code, uppercase")
    type: CodeType = Field(..., description="Character set used")
    total_generated: int = Field(..., description="Number of known codes held in memory, not the stored count")
    message: str = Field(..., description="Whether the code was persisted")


class CodeSummary(BaseModel):
    """Code and type only."""

    code: str
    type: CodeType


class CodeList(BaseModel):
    """All stored codes without timestamps."""

    codes: list[CodeSummary]
    total: int


class CodeStats(CamelModel):
    """Statistics over stored codes. First and last follow file order."""

    total_codes: int
    alphabetic: int
    alphanumeric: int
    first_generated: datetime | None = None
    last_generated: datetime | None = None


class MessageResponse(BaseModel):
    message: str
