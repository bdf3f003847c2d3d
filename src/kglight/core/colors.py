"""
Edge color assignment per Integration-Type.
"""

from typing import Dict, Mapping, Optional

from ..config import DEFAULT_EDGE_COLORS, NEUTRAL_COLOR, validate_color


class ColorAssignment:
    """
    Integration-Type -> display color.

    Seeded from the default palette, falling back to a neutral color for
    unknown types. Overrides last until reset().
    """

    def __init__(
        self,
        overrides: Optional[Mapping[str, str]] = None,
        default: str = NEUTRAL_COLOR,
    ):
        self.default = validate_color(default)
        self._colors: Dict[str, str] = {}
        self._seed = dict(overrides or {})
        self.reset()

    def reset(self) -> None:
        """Restore the default palette plus any overrides given at construction."""
        self._colors = {k: validate_color(v) for k, v in DEFAULT_EDGE_COLORS.items()}
        for integration_type, color in self._seed.items():
            self._colors[integration_type] = validate_color(color)

    def get(self, integration_type: str) -> str:
        return self._colors.get(integration_type, self.default)

    def set(self, integration_type: str, color: str) -> None:
        self._colors[integration_type] = validate_color(color)

    def for_types(self, integration_types) -> Dict[str, str]:
        """Resolve a color for every type given, including unknown ones."""
        return {t: self.get(t) for t in integration_types}

    def to_dict(self) -> Dict[str, str]:
        return dict(self._colors)
