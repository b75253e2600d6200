"""Local file input for checks.

Responsibilities:
- Read files as strict UTF-8 and map failures to resource errors.
- Expand directories into checkable files by extension.
- Classify CLI resources as files, URLs, or sitemap manifests.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
import re

from ..errors import ResourceError

_URL_PATTERN = re.compile(r"^https?://", re.IGNORECASE)
_SITEMAP_PATTERN = re.compile(r"sitemap\.xml(?:\?.*)?$", re.IGNORECASE)


def is_url(resource: str) -> bool:
    """Return whether a resource string is an HTTP(S) URL."""

    return bool(_URL_PATTERN.match(resource))


def is_sitemap_url(resource: str) -> bool:
    """Return whether a resource string is an HTTP(S) sitemap manifest URL."""

    return is_url(resource) and bool(_SITEMAP_PATTERN.search(resource))


def read_text_file(path: Path) -> str:
    """Read a file as UTF-8 text.

    Raises:
        ResourceError: If the path is missing, not a file, or not valid UTF-8.
    """

    resource = str(path)
    if not path.exists():
        raise ResourceError(resource=resource, detail="does not exist")
    if not path.is_file():
        raise ResourceError(resource=resource, detail="is not a file")
    try:
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ResourceError(resource=resource, detail="is not valid utf-8") from exc
    except OSError as exc:
        raise ResourceError(resource=resource, detail=f"cannot be read ({exc.strerror})") from exc


def expand_resources(resources: Iterable[str], extensions: Iterable[str]) -> list[str]:
    """Expand directory entries into sorted files with a matching extension.

    URLs and non-directory paths are kept as given, in input order.
    """

    allowed = {extension.lower() for extension in extensions}
    expanded: list[str] = []
    for resource in resources:
        if is_url(resource):
            expanded.append(resource)
            continue
        path = Path(resource)
        if not path.is_dir():
            expanded.append(resource)
            continue
        for candidate in sorted(path.rglob("*")):
            if candidate.is_file() and candidate.suffix.lower() in allowed:
                expanded.append(str(candidate))
    return expanded
