from typing import Iterable
from urllib.parse import quote
from xml.sax.saxutils import escape

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def build_sitemap(
    site_url: str, post_ids: Iterable[str], pages: Iterable[str] = ("",)
) -> str:
    """
    Build a sitemaps.org document for the site's pages and every post
    detail path (/posts/<id>).
    """
    base = site_url.rstrip("/")
    routes = [_route(page) for page in pages]
    routes.extend(f"/posts/{quote(post_id)}" for post_id in post_ids)

    entries = "".join(
        f"  <url>\n    <loc>{escape(base + route)}</loc>\n  </url>\n" for route in routes
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<urlset xmlns="{SITEMAP_NAMESPACE}">\n'
        f"{entries}"
        "</urlset>\n"
    )


def _route(page: str) -> str:
    page = page.strip("/")
    if page in ("", "index"):
        return ""
    return f"/{page}"
