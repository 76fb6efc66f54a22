# graphanim/__init__.py
"""graphanim: single import, full API."""
from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    # namespaces
    "adapters": "graphanim.adapters",
    "io": "graphanim.io",
    "core": "graphanim.core",
    "algorithms": "graphanim.algorithms",
    "utils": "graphanim.utils",
    # direct convenience
    "config": "graphanim.io.config",
    "html": "graphanim.io.html",
    "networkx": "graphanim.adapters.networkx",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "Graph": ("graphanim.core.graph", "Graph"),
    "AnimState": ("graphanim.core.graph", "AnimState"),
    "RenderParams": ("graphanim.core.params", "RenderParams"),
    "Point": ("graphanim.core.geometry", "Point"),
    "Color": ("graphanim.core.geometry", "Color"),
    "Tag": ("graphanim.core.elements", "Tag"),

    # Errors
    "GraphError": ("graphanim.core.errors", "GraphError"),
    "NodeNotFound": ("graphanim.core.errors", "NodeNotFound"),
    "NodeAlreadyExists": ("graphanim.core.errors", "NodeAlreadyExists"),
    "LinkNotFound": ("graphanim.core.errors", "LinkNotFound"),
    "LinkAlreadyExists": ("graphanim.core.errors", "LinkAlreadyExists"),
    "InvalidLoopLink": ("graphanim.core.errors", "InvalidLoopLink"),
    "AnimationStateMisuse": ("graphanim.core.errors", "AnimationStateMisuse"),
    "InvalidNodeName": ("graphanim.core.errors", "InvalidNodeName"),
    "ClockOverflow": ("graphanim.core.errors", "ClockOverflow"),
    "ConfigError": ("graphanim.core.errors", "ConfigError"),
    "MAX_TOTAL_DURATION": ("graphanim.core.renderer", "MAX_TOTAL_DURATION"),

    # Text format
    "loads": ("graphanim.io.config", "loads"),
    "dumps": ("graphanim.io.config", "dumps"),

    # HTML
    "render_page": ("graphanim.io.html", "render_page"),
    "write_pages": ("graphanim.io.html", "write_pages"),

    # NetworkX adapter
    "to_nx": ("graphanim.adapters.networkx", "to_nx"),
    "from_nx": ("graphanim.adapters.networkx", "from_nx"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("graphanim")
except PackageNotFoundError:
    __version__ = "0.0.0"
