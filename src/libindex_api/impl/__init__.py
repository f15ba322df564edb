from .catalog_api import CatalogApiImpl  # noqa: F401
from .publish_api import PublishApiImpl  # noqa: F401
