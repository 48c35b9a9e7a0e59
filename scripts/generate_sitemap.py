import argparse
import logging
from pathlib import Path

from folio.repos.content_repo import FileContentRepo
from folio.services.posts_service import PostsService
from folio.services.sitemap import build_sitemap
from folio.settings import settings

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Write sitemap.xml for the blog")
    parser.add_argument("output", nargs="?", default="public/sitemap.xml")
    parser.add_argument("--site-url", default=settings.SITE_URL)
    parser.add_argument("--content-dir", default=settings.CONTENT_DIR)
    args = parser.parse_args(argv)

    service = PostsService(
        FileContentRepo(args.content_dir, extension=settings.CONTENT_EXTENSION)
    )
    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(build_sitemap(args.site_url, service.list_ids()), encoding="utf-8")
    logger.info(f"Sitemap written to {output}")
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    raise SystemExit(main())
