from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Immutable model: equality by value, no mutation after construction."""

    model_config = ConfigDict(frozen=True)
