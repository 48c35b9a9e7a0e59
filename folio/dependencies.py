from fastapi import Depends

from folio.repos.content_repo import FileContentRepo
from folio.services.posts_service import PostsService
from folio.services.subscription_service import SubscriptionService
from folio.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_content_repo(current_settings: Settings = Depends(get_settings)):
    return FileContentRepo(
        current_settings.content_path, extension=current_settings.CONTENT_EXTENSION
    )


def get_posts_service(repo=Depends(get_content_repo)):
    return PostsService(repo=repo)


def get_subscription_service(current_settings: Settings = Depends(get_settings)):
    return SubscriptionService(
        audience_id=current_settings.MAILCHIMP_AUDIENCE_ID,
        api_key=current_settings.MAILCHIMP_API_KEY,
        error_message=current_settings.SUBSCRIBE_ERROR_MESSAGE,
        timeout=current_settings.MAILCHIMP_TIMEOUT_SECONDS,
    )
