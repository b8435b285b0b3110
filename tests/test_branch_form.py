import asyncio

from core.navigation import ADMIN_ROOT
from screens.branches.controller import BranchFormController
from screens.forms.attachments import EmptySlot, PendingUpload, RemoteImage
from tests.conftest import branch_json


def run(coro):
    return asyncio.run(coro)


def fill(ctl, **values):
    defaults = dict(
        branch_name="North Campus", office_type="Regional", address="12 North Rd",
        mobile="555-0199", email="north@inst.edu",
    )
    defaults.update(values)
    for name, value in defaults.items():
        ctl.set_field(name, value)


class TestCreate:
    def test_north_campus_created_and_navigates(self, fake_api, app_state, navigate):
        ctl = BranchFormController(app_state.branches, navigate, app_state.media_root)
        fill(ctl)
        ctl.choose_image("north.png", b"img", "image/png")

        outcome = run(ctl.submit())

        assert outcome.ok
        assert outcome.message == "Branch created successfully!"
        assert [b.branch_name for b in app_state.branches.branches] == ["North Campus"]
        assert navigate.calls == [(ADMIN_ROOT, False)]
        # the form is cleared after a create
        assert ctl.draft.branch_name == ""
        assert isinstance(ctl.draft.image, EmptySlot)

    def test_image_required_on_create(self, fake_api, app_state, navigate):
        ctl = BranchFormController(app_state.branches, navigate, app_state.media_root)
        fill(ctl)

        outcome = run(ctl.submit())

        assert not outcome.ok
        assert outcome.message == "Branch image is required"
        assert not outcome.dispatched
        assert fake_api.requests == []

    def test_missing_field_is_reported_first(self, fake_api, app_state, navigate):
        ctl = BranchFormController(app_state.branches, navigate, app_state.media_root)
        fill(ctl, branch_name="  ")
        ctl.choose_image("north.png", b"img", "image/png")

        outcome = run(ctl.submit())

        assert outcome.message == "Branch name is required"
        assert fake_api.requests == []

    def test_invalid_email(self, fake_api, app_state, navigate):
        ctl = BranchFormController(app_state.branches, navigate, app_state.media_root)
        fill(ctl, email="not-an-email")
        ctl.choose_image("north.png", b"img", "image/png")

        assert run(ctl.submit()).message == "Email address is invalid"

    def test_server_failure_keeps_draft(self, fake_api, app_state, navigate):
        fake_api.fail("POST", "/api/branch", status=422, body={"error": "Branch already exists"})
        ctl = BranchFormController(app_state.branches, navigate, app_state.media_root)
        fill(ctl)
        ctl.choose_image("north.png", b"img", "image/png")

        outcome = run(ctl.submit())

        assert not outcome.ok and outcome.dispatched
        assert outcome.message == "Branch already exists"
        assert ctl.draft.branch_name == "North Campus"
        assert navigate.calls == []
        assert ctl.submitting is False

    def test_second_submit_while_in_flight_is_refused(self, fake_api, app_state, navigate):
        ctl = BranchFormController(app_state.branches, navigate, app_state.media_root)
        fill(ctl)
        ctl.choose_image("north.png", b"img", "image/png")

        async def double():
            return await asyncio.gather(ctl.submit(), ctl.submit())

        first, second = run(double())

        assert first.ok
        assert not second.ok and not second.dispatched
        assert len(fake_api.calls("POST", "/api/branch")) == 1

    def test_picked_image_previews_immediately(self, app_state, navigate):
        ctl = BranchFormController(app_state.branches, navigate, app_state.media_root)

        upload = ctl.choose_image("north.png", b"img", "image/png")

        assert isinstance(ctl.draft.image, PendingUpload)
        assert ctl.preview == upload.preview
        assert ctl.preview.startswith("data:image/png;base64,")


class TestEdit:
    def test_mount_fetches_and_seeds_draft(self, fake_api, app_state, navigate):
        fake_api.branches = {"b1": branch_json("b1", "Main")}
        ctl = BranchFormController(app_state.branches, navigate, app_state.media_root, "b1")

        run(ctl.mount())

        assert ctl.draft.branch_name == "Main"
        assert isinstance(ctl.draft.image, RemoteImage)
        assert ctl.draft.image.preview == "http://api.test/uploads/b1.png"
        assert ctl.loaded

    def test_mount_refetches_when_current_is_another_branch(self, fake_api, app_state, navigate):
        fake_api.branches = {"b1": branch_json("b1", "Main"), "b2": branch_json("b2", "East")}
        run(app_state.branches.get_by_id("b2"))
        ctl = BranchFormController(app_state.branches, navigate, app_state.media_root, "b1")

        run(ctl.mount())

        assert ctl.draft.branch_name == "Main"
        assert len(fake_api.calls("GET", "/api/branch/b1")) == 1

    def test_mount_reuses_matching_current(self, fake_api, app_state, navigate):
        fake_api.branches = {"b1": branch_json("b1", "Main")}
        run(app_state.branches.get_by_id("b1"))
        ctl = BranchFormController(app_state.branches, navigate, app_state.media_root, "b1")

        run(ctl.mount())

        assert len(fake_api.calls("GET", "/api/branch/b1")) == 1

    def test_user_edits_survive_later_store_updates(self, fake_api, app_state, navigate):
        fake_api.branches = {"b1": branch_json("b1", "Main")}
        ctl = BranchFormController(app_state.branches, navigate, app_state.media_root, "b1")
        run(ctl.mount())
        ctl.set_field("branch_name", "Renamed")

        run(app_state.branches.get_by_id("b1"))

        assert ctl.sync_from_store() is False
        assert ctl.draft.branch_name == "Renamed"

    def test_update_without_new_image(self, fake_api, app_state, navigate):
        fake_api.branches = {"b1": branch_json("b1", "Main")}
        ctl = BranchFormController(app_state.branches, navigate, app_state.media_root, "b1")
        run(ctl.mount())
        ctl.set_field("mobile", "555-0000")

        outcome = run(ctl.submit())

        assert outcome.ok
        assert outcome.message == "Branch updated successfully!"
        assert fake_api.branches["b1"]["mobile"] == "555-0000"
        assert fake_api.branches["b1"]["branchImage"] == "uploads\\b1.png"
        assert app_state.branches.current_branch is None
        assert navigate.calls == [(ADMIN_ROOT, False)]

    def test_load_error_is_exposed(self, fake_api, app_state, navigate):
        ctl = BranchFormController(app_state.branches, navigate, app_state.media_root, "missing")

        run(ctl.mount())

        assert not ctl.loaded
        assert ctl.load_error == "Not found"

    def test_unmount_clears_current(self, fake_api, app_state, navigate):
        fake_api.branches = {"b1": branch_json("b1", "Main")}
        ctl = BranchFormController(app_state.branches, navigate, app_state.media_root, "b1")
        run(ctl.mount())

        ctl.unmount()

        assert app_state.branches.current_branch is None
