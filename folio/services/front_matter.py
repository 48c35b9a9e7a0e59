import datetime
import logging
import re
from typing import Tuple

import frontmatter
import pydantic
import yaml

from folio.errors import MalformedContent
from folio.schemas.blog import PostRecord

logger = logging.getLogger(__name__)

FM_BOUNDARY = re.compile(r"^-{3,}[ \t]*$", re.MULTILINE)


def parse_front_matter(raw: str, post_id: str | None = None) -> Tuple[dict, str]:
    """Split a document into its front matter mapping and markdown body."""
    if FM_BOUNDARY.match(raw.lstrip()) and len(FM_BOUNDARY.findall(raw)) < 2:
        raise MalformedContent(post_id, "front matter block is never closed")

    try:
        parsed = frontmatter.loads(raw)
    except yaml.YAMLError as e:
        raise MalformedContent(post_id, f"invalid front matter: {e}") from e

    return dict(parsed.metadata), parsed.content


def build_post_record(post_id: str, metadata: dict) -> PostRecord:
    """Populate a typed PostRecord, rejecting missing or mistyped fields."""
    fields = {key: value for key, value in metadata.items() if key != "id"}
    if "date" in fields:
        fields["date"] = _coerce_date(fields["date"])
    try:
        return PostRecord(id=post_id, **fields)
    except pydantic.ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'record'}: {err['msg']}"
            for err in e.errors()
        )
        logger.warning(f"Rejected front matter for {post_id}: {problems}")
        raise MalformedContent(post_id, problems) from e


def _coerce_date(value):
    # YAML may hand back a full timestamp for "2023-01-01 10:00"
    if isinstance(value, datetime.datetime):
        return value.date()
    return value
