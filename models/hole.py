from pydantic import Field

from .base import BaseGolfModel


class Hole(BaseGolfModel):
    """A single hole: its number, par and stroke index (1 = hardest)."""
    number: int = Field(..., ge=1, le=18)
    par: int = Field(..., ge=3, le=6)
    stroke_index: int = Field(..., ge=1, le=18)
