import asyncio

import pytest

from screens.featured.controller import FEATURED_LIMIT, FeaturedController, FeaturedSelection
from tests.conftest import branch_json, course_json


def run(coro):
    return asyncio.run(coro)


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def seeded(fake_api):
    fake_api.courses = {i: course_json(i, f"Course {i}") for i in ("c1", "c2", "c3", "c4")}
    fake_api.branches = {i: branch_json(i, f"Branch {i}") for i in ("b1", "b2", "b3", "b4")}
    fake_api.featured_course_ids = ["c1", "c2"]
    fake_api.featured_branch_ids = ["b1", "b2", "b3"]
    return fake_api


@pytest.fixture
def controller(seeded, app_state, clock):
    ctl = FeaturedController(app_state.courses, app_state.branches, clock=clock)
    assert run(ctl.load())
    return ctl


class TestSelection:
    def test_cap_refuses_fourth(self):
        sel = FeaturedSelection("courses")
        for i in ("a", "b", "c"):
            assert sel.add(i) is None

        assert sel.add("d") == "Maximum of 3 featured courses allowed"
        assert sel.ids == ["a", "b", "c"]

    def test_duplicates_ignored(self):
        sel = FeaturedSelection("branches")
        sel.add("a")
        sel.add("a")
        assert sel.ids == ["a"]

    def test_seed_keeps_server_list(self):
        sel = FeaturedSelection("courses")
        sel.seed(["a", "b", "c", "d"])
        assert sel.ids == ["a", "b", "c", "d"]
        assert not sel.complete


class TestLoad:
    def test_seeds_from_featured_subsets(self, controller):
        assert controller.course_selection.ids == ["c1", "c2"]
        assert controller.branch_selection.ids == ["b1", "b2", "b3"]
        assert controller.loaded

    def test_load_failure_reported(self, seeded, app_state, clock):
        seeded.fail("GET", "/api/featured", network=True)
        ctl = FeaturedController(app_state.courses, app_state.branches, clock=clock)

        assert run(ctl.load()) is False
        assert ctl.load_error == "Failed to fetch featured courses"
        assert not ctl.loaded


class TestMessages:
    def test_cap_message_expires_after_three_seconds(self, controller, clock):
        assert controller.add_branch("b4") is False
        assert controller.message.text == "Maximum of 3 featured branches allowed"
        assert controller.message.ok is False

        clock.now += 2.9
        assert controller.message is not None
        clock.now += 0.2
        assert controller.message is None

    def test_success_message_lasts_five_seconds(self, controller, clock):
        controller.add_course("c3")
        assert run(controller.submit_courses())

        clock.now += 4.5
        assert controller.message.text == "Featured courses updated successfully!"
        clock.now += 1.0
        assert controller.message is None


class TestSubmit:
    def test_incomplete_selection_never_dispatches(self, controller, seeded):
        before = len(seeded.requests)

        assert run(controller.submit_courses()) is False

        assert controller.message.text == f"Please select exactly {FEATURED_LIMIT} courses"
        assert len(seeded.requests) == before
        assert seeded.calls("POST", "/api/set-featured") == []

    def test_submit_refetches_and_reseeds(self, controller, seeded, app_state):
        controller.remove_branch("b2")
        controller.add_branch("b4")

        assert run(controller.submit_branches())

        assert seeded.featured_branch_ids == ["b1", "b3", "b4"]
        assert len(seeded.calls("GET", "/api/branch/featured")) == 2
        assert controller.branch_selection.ids == ["b1", "b3", "b4"]
        assert [b.id for b in app_state.branches.featured_branches] == ["b1", "b3", "b4"]

    def test_server_result_is_authoritative(self, controller, seeded):
        # the server quietly drops an id it does not know
        controller.add_course("c3")
        del seeded.courses["c3"]

        assert run(controller.submit_courses())

        assert controller.course_selection.ids == ["c1", "c2"]

    def test_failed_submit_keeps_selection(self, controller, seeded):
        seeded.fail("POST", "/api/set-featured", status=500, body={"error": "Nope"})
        controller.add_course("c4")

        assert run(controller.submit_courses()) is False

        assert controller.message.text == "Nope"
        assert controller.course_selection.ids == ["c1", "c2", "c4"]

    def test_can_submit_only_with_exactly_three(self, controller):
        assert controller.can_submit_courses is False
        assert controller.can_submit_branches is True

        controller.add_course("c3")
        assert controller.can_submit_courses is True

        controller.remove_branch("b1")
        assert controller.can_submit_branches is False
