from pydantic import BaseModel, ConfigDict


class Aggregate(BaseModel):
    """Mutable domain entity with identity. Assignments are re-validated."""

    model_config = ConfigDict(validate_assignment=True)
