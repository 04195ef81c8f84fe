from pydantic import BaseModel, ConfigDict, ValidationError
from typing import Any, Optional


class BaseGolfModel(BaseModel):
    """Shared configuration for scorecard models.

    Text is stripped, so a blank player or course name fails its length check.
    """
    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    def update_field(self, field_name: str, value: Any) -> Optional[str]:
        """Apply a correction to one field. Returns the validation message on failure."""
        try:
            setattr(self, field_name, value)
            return None
        except ValidationError as e:
            return e.errors()[0]['msg']
