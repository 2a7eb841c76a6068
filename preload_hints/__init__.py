"""
preload_hints package initializer.
Defines package version and exposes the single-call entry point.
"""
__version__ = "0.1.0"

from preload_hints.config import OptimizeConfig, PreloadMode, load_config
from preload_hints.engine import Engine, HintPlan, process_assets

__all__ = [
    "Engine",
    "HintPlan",
    "OptimizeConfig",
    "PreloadMode",
    "load_config",
    "process_assets",
]
