import logging
from typing import Dict, Iterable, List, Optional

from folio.errors import MalformedContent
from folio.schemas.blog import ListingItem, PostDetail, PostRecord, SeriesGroup
from folio.services.front_matter import build_post_record, parse_front_matter
from folio.services.renderer import extract_headings, render_html

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo):
        self.repo = repo

    def list_ids(self) -> List[str]:
        return self.repo.list_content_ids()

    def list_all(self) -> List[ListingItem]:
        """All posts, series collapsed into groups, newest first."""
        records = [self._load_record(post_id) for post_id in self.repo.list_content_ids()]

        logger.debug(f"Loaded {len(records)} posts from the content store")

        standalone = [r for r in records if not r.seriesName]
        series_members = [r for r in records if r.seriesName]

        items: List[ListingItem] = [
            *group_series(series_members),
            *standalone,
        ]
        # sorted() is stable, and reverse=True keeps equal dates in input order
        return sorted(items, key=lambda item: item.date, reverse=True)

    def get_single(self, post_id: str) -> PostDetail:
        raw = self.repo.read_raw(post_id)
        metadata, body = parse_front_matter(raw, post_id)
        record = build_post_record(post_id, metadata)
        return PostDetail(
            **record.model_dump(exclude={"contentHtml", "headings"}),
            contentHtml=render_html(body),
            headings=extract_headings(body),
        )

    def get_series(self, series_name: str) -> Optional[SeriesGroup]:
        return next(
            (
                item
                for item in self.list_all()
                if isinstance(item, SeriesGroup) and item.seriesName == series_name
            ),
            None,
        )

    def featured_list(
        self, items: Optional[Iterable[ListingItem]] = None
    ) -> List[PostRecord]:
        return featured_list(self.list_all() if items is None else items)

    def _load_record(self, post_id: str) -> PostRecord:
        raw = self.repo.read_raw(post_id)
        metadata, _body = parse_front_matter(raw, post_id)
        return build_post_record(post_id, metadata)


def group_series(members: Iterable[PostRecord]) -> List[SeriesGroup]:
    """
    Collapse series members into one group per seriesName, keeping the order in
    which each series was first seen.
    """
    by_name: Dict[str, List[PostRecord]] = {}
    for post in members:
        by_name.setdefault(post.seriesName, []).append(post)

    return [_build_group(name, posts) for name, posts in by_name.items()]


def _build_group(series_name: str, posts: List[PostRecord]) -> SeriesGroup:
    subtitle = _series_subtitle(series_name, posts)

    seen: Dict[int, str] = {}
    for post in posts:
        if post.sequence in seen:
            raise MalformedContent(
                post.id,
                f"sequence {post.sequence} already used by {seen[post.sequence]!r} "
                f"in series {series_name!r}",
            )
        seen[post.sequence] = post.id

    return SeriesGroup(
        seriesName=series_name,
        seriesSubtitle=subtitle,
        date=max(post.date for post in posts),
        posts=sorted(posts, key=lambda post: post.sequence),
    )


def _series_subtitle(series_name: str, posts: List[PostRecord]) -> Optional[str]:
    # First declared subtitle wins; members may omit it but must not disagree.
    subtitle = None
    for post in posts:
        if not post.seriesSubtitle:
            continue
        if subtitle is None:
            subtitle = post.seriesSubtitle
        elif post.seriesSubtitle != subtitle:
            raise MalformedContent(
                post.id,
                f"seriesSubtitle {post.seriesSubtitle!r} conflicts with "
                f"{subtitle!r} for series {series_name!r}",
            )
    return subtitle


def featured_list(items: Iterable[ListingItem]) -> List[PostRecord]:
    """Featured posts across standalone entries and series, lowest rank first."""
    items = list(items)
    standalone = [item for item in items if not isinstance(item, SeriesGroup)]
    series_posts = [
        post for item in items if isinstance(item, SeriesGroup) for post in item.posts
    ]

    featured = [p for p in [*standalone, *series_posts] if p.featured is not None]
    return sorted(featured, key=lambda post: post.featured)
