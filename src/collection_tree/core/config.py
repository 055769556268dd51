import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_COLLECTION_NAME = "Generated API Collection"
DEFAULT_BUILD_NUMBER = "dev"
DEFAULT_OUTPUT_DIR = "build"
DEFAULT_PROFILE = "standard"


def _env(environ: Mapping[str, str], key: str, default: str) -> str:
    # Empty values count as unset.
    return environ.get(key) or default


class CollectionConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_url: str = DEFAULT_BASE_URL
    collection_name: str = DEFAULT_COLLECTION_NAME
    build_number: str = DEFAULT_BUILD_NUMBER
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    profile: str = DEFAULT_PROFILE

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "CollectionConfig":
        env = os.environ if environ is None else environ
        return cls(
            base_url=_env(env, "API_BASE_URL", DEFAULT_BASE_URL),
            collection_name=_env(env, "COLLECTION_NAME", DEFAULT_COLLECTION_NAME),
            build_number=_env(env, "BUILD_NUMBER", DEFAULT_BUILD_NUMBER),
            output_dir=Path(_env(env, "OUTPUT_DIR", DEFAULT_OUTPUT_DIR)),
            profile=_env(env, "COLLECTION_PROFILE", DEFAULT_PROFILE),
        )


@dataclass(frozen=True)
class Margin:
    top: float = 20
    right: float = 120
    bottom: float = 20
    left: float = 120


@dataclass(frozen=True)
class ViewConfig:
    """Geometry and timing of the hierarchy diagram."""

    canvas_width: float = 960
    canvas_height: float = 600
    margin: Margin = field(default_factory=Margin)
    depth_step: float = 180
    duration: int = 750
    node_radius: float = 10
    label_offset: float = 13
    collapsed_fill: str = "lightsteelblue"
    expanded_fill: str = "#fff"

    @property
    def width(self) -> float:
        return self.canvas_width - self.margin.left - self.margin.right

    @property
    def height(self) -> float:
        return self.canvas_height - self.margin.top - self.margin.bottom
