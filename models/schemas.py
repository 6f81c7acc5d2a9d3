"""
Pydantic models for the key audit
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Key(BaseModel):
    """One localization entry and the definition file it came from"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    file_path: str = Field(..., alias="filePath")

    def to_report_entry(self) -> dict:
        return self.model_dump(by_alias=True)


class AuditReport(BaseModel):
    """Every collected key plus the subset whose name was never found"""

    all_keys: List[Key] = Field(default_factory=list)
    unused_keys: List[Key] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.all_keys)

    @property
    def unused(self) -> int:
        return len(self.unused_keys)
