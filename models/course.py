from pydantic import Field, field_validator
from typing import List, Optional

from .base import BaseGolfModel
from .hole import Hole


class Course(BaseGolfModel):
    """Golf course with its ordered holes and rating attributes."""
    id: Optional[str] = None
    name: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    par: Optional[int] = Field(None, ge=27, le=80)
    slope_rating: Optional[float] = Field(None, ge=55, le=155)
    course_rating: Optional[float] = Field(None, ge=55.0, le=85.0)
    holes: List[Hole] = Field(default_factory=list)

    @field_validator('holes')
    @classmethod
    def validate_holes(cls, v):
        if not v:
            return v
        if len(v) not in (9, 18):
            raise ValueError(f"A course has 9 or 18 holes, got {len(v)}")
        indexes = [h.stroke_index for h in v]
        if len(set(indexes)) != len(indexes):
            raise ValueError("Stroke indexes must be unique across the course")
        return v

    def get_hole(self, number: int) -> Optional[Hole]:
        """Get a hole by its number (1-18)."""
        if 1 <= number <= len(self.holes):
            return self.holes[number - 1]
        return None

    @property
    def calculated_par(self) -> Optional[int]:
        """Sum of hole pars, or None when the course has no holes."""
        if not self.holes:
            return None
        return sum(h.par for h in self.holes)

    def get_par(self) -> Optional[int]:
        """Explicit course par if set, otherwise the sum of hole pars."""
        if self.par is not None:
            return self.par
        return self.calculated_par

    @property
    def front_nine_par(self) -> Optional[int]:
        front = self.holes[:9]
        return sum(h.par for h in front) if front else None

    @property
    def back_nine_par(self) -> Optional[int]:
        back = self.holes[9:18]
        return sum(h.par for h in back) if back else None
