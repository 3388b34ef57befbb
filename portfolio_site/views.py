"""Response bodies served by the web application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class HomeResponse:
    """Body of the home endpoint: the application's name."""

    app_name: str

    def to_dict(self) -> dict[str, Any]:
        return {"app_name": self.app_name}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HomeResponse:
        """Build from a decoded JSON object; unknown keys are ignored."""
        try:
            app_name = data["app_name"]
        except KeyError:
            raise ValueError("missing field 'app_name'") from None
        if not isinstance(app_name, str):
            raise ValueError("field 'app_name' must be a string")
        return cls(app_name)