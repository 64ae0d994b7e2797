"""Step illustration cache tests."""

import base64

import pytest

from ilearncom.ai import IllustrationCache, ServiceError, to_data_uri
from ilearncom.classroom import ClassroomSession
from ilearncom.schemas import ImageCacheState, ImageStatus

from conftest import FakeImageGenerator

KEY = "w1-s1-p1"


@pytest.fixture
def cache(image_generator) -> IllustrationCache:
    return IllustrationCache(ImageCacheState(), image_generator)


class TestEnsureImage:

    def test_generates_and_stores_data_uri(self, cache, image_generator, png):
        assert cache.ensure_image(KEY, "Power down safely", "Unplug the cable")
        assert cache.image_for(KEY) == to_data_uri(png)
        prompt, aspect = image_generator.calls[0]
        assert "Scene: Power down safely." in prompt
        assert "Detail: Unplug the cable." in prompt
        assert "isometric" in prompt
        assert aspect == "16:9"

    def test_ready_image_not_requested_again(self, cache, image_generator):
        cache.ensure_image(KEY, "t", "d")
        assert not cache.ensure_image(KEY, "t", "d")
        assert len(image_generator.calls) == 1

    def test_repeat_while_loading_issues_one_request(self, png):
        generator = FakeImageGenerator(image=png)
        cache = IllustrationCache(ImageCacheState(), generator)
        nested = []
        generator.during_call = lambda: nested.append(cache.ensure_image(KEY, "t", "d"))

        cache.ensure_image(KEY, "t", "d")

        assert nested == [False]
        assert len(generator.calls) == 1

    def test_split_lifecycle_while_loading(self, cache):
        first = cache.begin(KEY, "t", "d")
        assert cache.is_loading(KEY)
        assert cache.begin(KEY, "t", "d") is None
        assert first is not None

    def test_failure_reverts_to_absent_and_allows_retry(self, png):
        generator = FakeImageGenerator(error=ServiceError("quota"))
        cache = IllustrationCache(ImageCacheState(), generator)

        cache.ensure_image(KEY, "t", "d")
        assert cache.get(KEY) is None
        assert not cache.is_loading(KEY)

        generator.error = None
        generator.image = png
        assert cache.ensure_image(KEY, "t", "d")
        assert len(generator.calls) == 2
        assert cache.image_for(KEY) is not None

    def test_response_without_image_reverts_to_absent(self):
        cache = IllustrationCache(ImageCacheState(), FakeImageGenerator(image=None))
        cache.ensure_image(KEY, "t", "d")
        assert cache.get(KEY) is None

    def test_keys_are_independent(self, cache, image_generator):
        a = cache.begin("w1-s2-p1", "t", "d")
        b = cache.begin("w2-s2-p1", "t", "d")
        cache.fail(a)
        assert cache.get("w1-s2-p1") is None
        assert cache.is_loading("w2-s2-p1")
        cache.complete(b, image_generator.image)
        assert cache.get("w2-s2-p1").status == ImageStatus.READY

    def test_late_completion_after_reset_is_dropped(self, cache, png):
        request = cache.begin(KEY, "t", "d")
        cache.reset()
        cache.complete(request, png)
        assert cache.get(KEY) is None

    def test_late_completion_does_not_clobber_new_request(self, cache, png):
        old = cache.begin(KEY, "t", "d")
        cache.reset()
        new = cache.begin(KEY, "t", "d")
        cache.fail(old)
        assert cache.is_loading(KEY)
        cache.complete(new, png)
        assert cache.image_for(KEY) is not None


class TestDataUri:

    def test_data_uri(self, png):
        uri = to_data_uri(png)
        prefix = "data:image/png;base64,"
        assert uri.startswith(prefix)
        assert base64.b64decode(uri[len(prefix):]) == png.data


class TestSessionImages:

    def test_same_step_title_in_two_weeks_kept_apart(self, session, image_generator):
        step_week1 = session.store.get_week(1).sections[1].activity_steps()[0]
        step_week2 = session.store.get_week(2).sections[1].activity_steps()[0]
        assert step_week1.title == step_week2.title

        session.ensure_step_image(1, 1, step_week1)
        assert session.step_image(1, 1, step_week1) is not None
        assert session.step_image(2, 1, step_week2) is None

        assert session.ensure_step_image(2, 1, step_week2)
        assert len(image_generator.calls) == 2
        assert not session.step_image_loading(2, 1, step_week2)

    def test_session_passes_configured_aspect_ratio(self, store, text_generator, image_generator):
        session = ClassroomSession(store, text_generator, image_generator, image_aspect_ratio="4:3")
        step = store.get_week(1).sections[1].activity_steps()[0]
        session.ensure_step_image(1, 1, step)
        assert image_generator.calls[0][1] == "4:3"
