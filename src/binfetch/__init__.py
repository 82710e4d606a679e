"""binfetch package.

Builds are expected in the object store under:

    <project>/<branch>/<epoch>__<tag>/<archive>

where epoch is a UTC unix timestamp and tag is any label (underscores are
shown as spaces).
"""

from .models import Buildset, Listing, Project
from .service import BuildFetcher, FetchResult

__all__ = ["BuildFetcher", "Buildset", "FetchResult", "Listing", "Project"]
