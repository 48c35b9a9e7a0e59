import logging
from pathlib import Path
from typing import List

from folio.errors import NotFound

logger = logging.getLogger(__name__)


class FileContentRepo:
    """Markdown content files stored flat in a single directory."""

    def __init__(self, content_dir: str | Path, extension: str = ".md"):
        self.content_dir = Path(content_dir)
        self.extension = extension

    def list_content_ids(self) -> List[str]:
        paths = sorted(
            path
            for path in self.content_dir.iterdir()
            if path.is_file() and path.name.endswith(self.extension)
        )
        return [path.name.removesuffix(self.extension) for path in paths]

    def read_raw(self, post_id: str) -> str:
        path = self._path_for(post_id)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug(f"Content file missing: {path}")
            raise NotFound(post_id) from None

    def exists(self, post_id: str) -> bool:
        try:
            return self._path_for(post_id).is_file()
        except NotFound:
            return False

    def _path_for(self, post_id: str) -> Path:
        if not post_id or "/" in post_id or "\\" in post_id or post_id in (".", ".."):
            raise NotFound(post_id)
        return self.content_dir / f"{post_id}{self.extension}"
