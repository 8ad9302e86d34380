"""Static route discovery for Next.js App Router projects.

The ``app/`` directory structure defines URL paths.  Only pages that can
be requested without parameters are discovered.

Conventions:

    app/
      page.tsx               # /
      about/page.tsx         # /about
      (shop)/cart/page.tsx   # /cart       (route group, dropped)
      blog/[slug]/page.tsx   # skipped     (dynamic)
      @modal/page.tsx        # skipped     (parallel slot)
      (..)/page.tsx          # skipped     (intercepting route)
      _lib/page.tsx          # skipped     (private folder)
"""

from pagewarm.routes.classify import classify_path, classify_segment, route_for_directory
from pagewarm.routes.discovery import (
    APP_DIRS,
    PAGE_EXTENSIONS,
    discover_routes,
    find_app_directory,
    is_page_file,
)
from pagewarm.routes.types import Keep, Resolution, SegmentKind, Skip

__all__ = [
    "APP_DIRS",
    "PAGE_EXTENSIONS",
    "Keep",
    "Resolution",
    "SegmentKind",
    "Skip",
    "classify_path",
    "classify_segment",
    "discover_routes",
    "find_app_directory",
    "is_page_file",
    "route_for_directory",
]
