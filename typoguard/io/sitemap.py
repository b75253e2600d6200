"""Sitemap manifest parsing."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from ..errors import ResourceError


def parse_sitemap(xml_text: str, manifest: str = "sitemap") -> list[str]:
    """Return `url/loc` entries of a `urlset` document in document order.

    Namespaced and plain documents are both accepted. `url` elements without
    a non-empty `loc` are skipped.

    Raises:
        ResourceError: With kind `format` when the XML is malformed or the
            root element is not `urlset`.
    """

    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        raise ResourceError(resource=manifest, detail="error parsing xml", kind="format") from exc

    if _local_name(root.tag) != "urlset":
        raise ResourceError(resource=manifest, detail="has no urlset element", kind="format")

    urls: list[str] = []
    for url_element in root:
        if _local_name(url_element.tag) != "url":
            continue
        for loc_element in url_element:
            if _local_name(loc_element.tag) != "loc" or not isinstance(loc_element.text, str):
                continue
            value = loc_element.text.strip()
            if value:
                urls.append(value)
    return urls


def _local_name(tag: object) -> str:
    """Strip an `{namespace}` prefix from an element tag."""

    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]
