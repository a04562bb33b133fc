"""Parse result record returned by the pipeline"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ParseResult(BaseModel):
    """Rendered document: metadata with defaults, preview/body HTML and reading metrics.

    Frozen at the field level only: `metadata` is a plain dict built fresh for
    each parse, so mutating it affects that one result and nothing else.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    metadata:            dict[str, Any]
    preview:             str = ""
    content:             str = ""
    word_count:          int = Field(default=0, ge=0, alias="wordCount")
    estimated_read_time: int = Field(default=1, ge=1, alias="estimatedReadTime")
