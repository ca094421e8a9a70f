"""Configuration for failure reporting."""

from typing import Any, ClassVar

from pydantic import BaseModel, Field


class ExpectConfig(BaseModel):
    """How a failed expectation is rendered."""

    model_config: ClassVar[dict[str, Any]] = {'extra': 'forbid', 'frozen': True}

    color: bool = Field(True, description="Wrap failure messages in ANSI red")
    full_path: bool = Field(
        False, description="Report the full path of the failing file instead of its basename",
    )
