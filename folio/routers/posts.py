import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from folio import dependencies as deps
from folio.errors import NotFound
from folio.schemas.blog import ListingItem, PostDetail, PostRecord, SeriesGroup
from folio.services.posts_service import PostsService
from folio.services.sitemap import build_sitemap
from folio.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_model=List[ListingItem])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """All posts, series grouped, newest first."""
    try:
        return service.list_all()
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/featured", response_model=List[PostRecord])
def list_featured_posts(service: PostsService = Depends(deps.get_posts_service)):
    try:
        return service.featured_list()
    except Exception as e:
        logger.error(f"Unexpected error listing featured posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/post-ids", response_model=List[str])
def list_post_ids(service: PostsService = Depends(deps.get_posts_service)):
    """Ids for static path generation."""
    try:
        return service.list_ids()
    except Exception as e:
        logger.error(f"Unexpected error listing post ids: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{post_id}", response_model=PostDetail)
def get_post(
    post_id: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post with rendered HTML and headings."""
    try:
        return service.get_single(post_id)
    except NotFound:
        raise HTTPException(status_code=404, detail="Post not found")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {post_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/series/{series_name}", response_model=Optional[SeriesGroup])
def get_series(
    series_name: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """A series group, or null when no post belongs to it."""
    try:
        return service.get_series(series_name)
    except Exception as e:
        logger.error(f"Unexpected error retrieving series {series_name}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve series")


@router.get("/sitemap.xml")
def sitemap(
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    try:
        xml = build_sitemap(current_settings.SITE_URL, service.list_ids())
    except Exception as e:
        logger.error(f"Unexpected error building sitemap: {e}")
        raise HTTPException(status_code=500, detail="Failed to build sitemap")
    return Response(content=xml, media_type="application/xml")
