import os
from typing import Optional

from pydantic import BaseModel, ConfigDict

from projspec.services.errors import SettingsError

DEFAULT_GEOGRAPHIC_DEFINITION = "+proj=latlong +ellps=WGS84"
DEFAULT_BINDING = "nanocore.Projections"


def _indent_from_env(raw: Optional[str]) -> str:
    if raw is None or raw.strip() in ("", "tab"):
        return "\t"
    try:
        width = int(raw)
    except ValueError:
        raise SettingsError(f"PROJSPEC_INDENT must be 'tab' or a number of spaces, got {raw!r}")
    if width < 1:
        raise SettingsError(f"PROJSPEC_INDENT must be positive, got {width}")
    return " " * width


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    geographic_definition: str = DEFAULT_GEOGRAPHIC_DEFINITION
    binding: str = DEFAULT_BINDING
    indent: str = "\t"
    proj_data_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            geographic_definition=os.getenv("PROJSPEC_GEOGRAPHIC_DEFINITION", DEFAULT_GEOGRAPHIC_DEFINITION),
            binding=os.getenv("PROJSPEC_BINDING", DEFAULT_BINDING),
            indent=_indent_from_env(os.getenv("PROJSPEC_INDENT")),
            proj_data_dir=os.getenv("PROJSPEC_PROJ_DATA") or None,
        )
