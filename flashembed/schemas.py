from pydantic import BaseModel, ConfigDict, Field

# -------- Flash message --------


class Message(BaseModel):
    """One flash notice. Serialised with single-letter keys to keep cookies small."""

    category: str = Field(..., alias="c")
    text: str = Field(..., alias="t")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> bytes:
        return self.model_dump_json(by_alias=True).encode("utf-8")

    @classmethod
    def from_payload(cls, raw: bytes) -> "Message":
        return cls.model_validate_json(raw)
