import textwrap

import httpx
import pytest

from folio.errors import NotFound


def dedent(raw: str) -> str:
    return textwrap.dedent(raw).lstrip()


class FakeContentRepo:
    """
    Minimal in-memory content store.
    Ids are listed in insertion order; set track_calls=True to record reads.
    """

    def __init__(self, content_by_id: dict[str, str], track_calls: bool = False):
        self.content_by_id = {k: dedent(v) for k, v in content_by_id.items()}
        self.track_calls = track_calls
        self.calls = []

    def list_content_ids(self):
        return list(self.content_by_id)

    def read_raw(self, post_id: str) -> str:
        if self.track_calls:
            self.calls.append(post_id)
        if post_id not in self.content_by_id:
            raise NotFound(post_id)
        return self.content_by_id[post_id]

    def exists(self, post_id: str) -> bool:
        return post_id in self.content_by_id


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(
        self,
        list_all_return=None,
        get_single_return=None,
        get_series_return=None,
        featured_return=None,
        ids_return=None,
    ):
        self._list_all_return = list_all_return or []
        self._get_single_return = get_single_return
        self._get_series_return = get_series_return
        self._featured_return = featured_return or []
        self._ids_return = ids_return or []

    def list_all(self):
        return self._list_all_return

    def featured_list(self, items=None):
        return self._featured_return

    def list_ids(self):
        return self._ids_return

    def get_single(self, post_id: str):
        if self._get_single_return is None:
            raise NotFound(post_id)
        return self._get_single_return

    def get_series(self, series_name: str):
        return self._get_series_return


class FakeSubscriptionService:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.emails = []

    def subscribe(self, email):
        self.emails.append(email)
        if self.error is not None:
            raise self.error


def mock_client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.fixture
def content_dir(tmp_path):
    """Write {id: markdown} into a temporary content directory."""

    def _write(posts: dict[str, str], extension: str = ".md"):
        for post_id, raw in posts.items():
            (tmp_path / f"{post_id}{extension}").write_text(dedent(raw), encoding="utf-8")
        return tmp_path

    return _write
