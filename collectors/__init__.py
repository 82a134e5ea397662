from collectors.base import Collector
from collectors.manifest import (
    ManifestCollector,
    extract_technologies,
    fetch_technologies,
    import_external_project,
)

__all__ = [
    "Collector",
    "ManifestCollector",
    "extract_technologies",
    "fetch_technologies",
    "import_external_project",
]
