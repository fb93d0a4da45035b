# core/region - region data
"""
Region data module

Note:
    This module uses the lazy import pattern.
"""

__all__ = ["ALL_REGIONS", "REGION_NAMES", "DEFAULT_REGION", "get_region_name"]


def __getattr__(name: str):
    """Lazy import - load data only on first use"""
    if name in __all__:
        from . import data

        return getattr(data, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
