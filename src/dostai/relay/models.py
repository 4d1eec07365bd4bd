from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator


class PromptRequest(BaseModel):
    """Body of POST /generate."""

    model_config = ConfigDict(frozen=True)

    prompt: StrictStr = Field(description="Prompt forwarded to the model as-is")

    @field_validator("prompt")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("prompt must not be blank")
        return value
