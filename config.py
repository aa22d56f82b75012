"""
Canvas configuration.

Defaults describe a 400x300 white canvas with opaque black fills. A YAML
file with the same keys can override any of them:

    width: 640
    height: 480
    background: [255, 255, 255]
    default_color: [0, 0, 255]
    alpha: 0.8
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple
import yaml


def _check_color(name: str, color) -> None:
    if len(color) != 3 or not all(0 <= int(c) <= 255 for c in color):
        raise ValueError(f"{name} must be three values in [0, 255], got {color}")


@dataclass(frozen=True)
class CanvasConfig:
    """Size and paint settings for a Canvas. Colors are BGR, as OpenCV expects."""

    width: int = 400
    height: int = 300
    background: Tuple[int, int, int] = (255, 255, 255)
    default_color: Tuple[int, int, int] = (0, 0, 0)
    alpha: float = 1.0

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Canvas size must be positive, got {self.width}x{self.height}"
            )
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"alpha must be in [0.0, 1.0], got {self.alpha}")

        _check_color("background", self.background)
        _check_color("default_color", self.default_color)

        # YAML gives lists
        object.__setattr__(self, "background", tuple(int(c) for c in self.background))
        object.__setattr__(self, "default_color", tuple(int(c) for c in self.default_color))

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "CanvasConfig":
        """
        Load configuration from a YAML file. Missing keys keep their defaults.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not a mapping or a value is out of range
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path) as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file {yaml_path} must hold a mapping, got {type(data).__name__}")

        return cls(**{key: value for key, value in data.items() if key in cls.__dataclass_fields__})
