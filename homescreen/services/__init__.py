from .config_service import ConfigService, ConfigSaveError
from .catalog_service import Catalog, CatalogService
from .clock_service import ClockService
from .icon_service import IconService

__all__ = [
    "ConfigService",
    "ConfigSaveError",
    "Catalog",
    "CatalogService",
    "ClockService",
    "IconService",
]
