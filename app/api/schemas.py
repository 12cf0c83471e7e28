"""Pydantic schemas for translation routes."""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class TranslateRequest(BaseModel):
    """Request to render one message server-side."""

    key: str = Field(..., min_length=1, description="Dotted translation key")
    variables: Optional[Union[Dict[str, Any], str, int, float]] = Field(
        None,
        description="Placeholder values, or a single value for the first placeholder",
    )
    count: Optional[Union[int, float]] = Field(
        None, description="Count used for plural selection"
    )


class TranslateResponse(BaseModel):
    """Rendered message."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "locale": "en",
                "key": "cart.items",
                "text": "You have 3 items",
            }
        }
    )

    locale: str = Field(..., description="Locale the message was rendered in")
    key: str = Field(..., description="Requested translation key")
    text: str = Field(..., description="Rendered message (the key if untranslated)")
