# -*- coding: utf-8 -*-
"""
StringEdit Entry Model

Immutable value objects for a single localized string and the
partition (platform and optional language) it lives in.
"""

from dataclasses import dataclass, replace
from typing import Optional, Any, Dict

from stringedit_enums import Platform


@dataclass(frozen=True)
class PartitionTag:
    """
    Identifies a strings partition.

    Attributes:
        platform (Platform): iOS or Android.
        language (Optional[str]): Language code within the platform, or None
                                  for the platform's default strings file.
    """
    platform: Platform
    language: Optional[str] = None

    def __post_init__(self):
        # Accept plain strings coming from settings files
        if not isinstance(self.platform, Platform):
            object.__setattr__(self, 'platform', Platform(self.platform))
        if self.language == "":
            object.__setattr__(self, 'language', None)

    def __str__(self) -> str:
        if self.language:
            return f"{self.platform.value}/{self.language}"
        return self.platform.value

    def to_dict(self) -> Dict[str, Any]:
        return {"platform": self.platform.value, "language": self.language}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PartitionTag':
        return cls(platform=data["platform"], language=data.get("language"))


@dataclass(frozen=True)
class Entry:
    """
    One key/value localized string record.

    Two entries are equal iff key, value and partition all match.
    Key uniqueness is enforced by the editing session, not by this type.
    """
    key: str
    value: str
    partition: PartitionTag

    def with_text(self, key: Optional[str] = None, value: Optional[str] = None) -> 'Entry':
        """Return a copy with key and/or value replaced."""
        return replace(
            self,
            key=self.key if key is None else key,
            value=self.value if value is None else value,
        )
