from __future__ import annotations
from pydantic import BaseModel, Field, model_validator

PREVIEW_BYTES = 16

class CursorState(BaseModel):
    position: int = Field(..., ge=0)
    length: int = Field(..., ge=0)
    remaining: int = Field(..., ge=0)
    at_end: bool = False
    preview: str = ""  # hex of the next few bytes, never advances the cursor

    @model_validator(mode="after")
    def _check_bounds(self) -> "CursorState":
        if self.position > self.length:
            raise ValueError(f"position {self.position} past length {self.length}")
        if self.remaining != self.length - self.position:
            raise ValueError("remaining must equal length - position")
        return self

    @classmethod
    def of(cls, cur) -> "CursorState":
        return cls(
            position=cur.position,
            length=len(cur),
            remaining=cur.remaining(),
            at_end=cur.is_end,
            preview=cur.peek(PREVIEW_BYTES).hex(" "),
        )
