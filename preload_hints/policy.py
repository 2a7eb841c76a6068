"""preload_hints.policy: operating mode derived from configuration and page template."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, FrozenSet, Iterable

from preload_hints.config import OptimizeConfig, PreloadMode

# Templates whose preloading is managed by a dedicated integration
HANDLED_TEMPLATES: Final[FrozenSet[str]] = frozenset(
    {
        "thread_view",
        "xfmg_media_view",
        "xfrm_resource_view",
        "dbtech_ecommerce_product_view",
    }
)

BASE_PRIORITY_TEMPLATES: Final[tuple[str, ...]] = (
    "page_view",
    "EWRmedio_medias_list",
)


def priority_templates(extra: Iterable[str] = ()) -> FrozenSet[str]:
    """Base priority templates extended with configured ones."""
    return frozenset(BASE_PRIORITY_TEMPLATES).union(t for t in extra if t)


@dataclass(frozen=True, slots=True)
class Policy:
    """Request-scoped decision of which hints to produce."""

    preconnect_enabled: bool
    preload_mode: PreloadMode
    is_priority_template: bool

    @classmethod
    def from_config(cls, config: OptimizeConfig, template: str) -> Policy:
        eligible = template in priority_templates(config.priority_templates_extra)
        return cls(
            preconnect_enabled=config.preconnect_enabled,
            preload_mode=config.preload_mode,
            is_priority_template=eligible and template not in HANDLED_TEMPLATES,
        )

    @property
    def is_priority_preload(self) -> bool:
        return self.preload_mode == PreloadMode.PRIORITY and self.is_priority_template

    @property
    def is_manual_preload(self) -> bool:
        return self.preload_mode == PreloadMode.MANUAL or self.is_priority_preload

    @property
    def is_preload(self) -> bool:
        return self.is_manual_preload or self.is_priority_preload

    @property
    def is_auto_preload(self) -> bool:
        return self.preload_mode == PreloadMode.AUTO

    @property
    def scans_images(self) -> bool:
        """Image tags and inline styles are needed for host discovery or auto mode."""
        return self.preconnect_enabled or self.is_auto_preload

    def to_dict(self) -> dict[str, object]:
        return {
            "preconnect_enabled": self.preconnect_enabled,
            "preload_mode": PreloadMode(self.preload_mode).value,
            "is_priority_template": self.is_priority_template,
            "is_priority_preload": self.is_priority_preload,
            "is_manual_preload": self.is_manual_preload,
        }


__all__ = ["BASE_PRIORITY_TEMPLATES", "HANDLED_TEMPLATES", "Policy", "priority_templates"]
