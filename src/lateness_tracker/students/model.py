from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Student:
    id: str
    name: str
    class_id: str
    created_at: str
    photo_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Student":
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            class_id=str(data.get("classId", "")),
            created_at=str(data.get("createdAt", "")),
            photo_url=data.get("photoUrl"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "classId": self.class_id,
            "photoUrl": self.photo_url,
            "createdAt": self.created_at,
        }


@dataclass
class CsvImportResult:
    success: bool = True
    imported: int = 0
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"success": self.success, "imported": self.imported, "errors": list(self.errors)}
