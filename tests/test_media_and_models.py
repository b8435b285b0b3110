from datetime import date

from core.media import data_url, media_url, normalize_media_path
from screens.forms.attachments import EMPTY, RemoteImage, from_file, from_stored_path, pending_upload, stored_path
from store.models import Branch, CourseMode, parse_date


def test_normalize_backslashes():
    assert normalize_media_path("uploads\\img\\a.png") == "uploads/img/a.png"
    assert normalize_media_path("") is None
    assert normalize_media_path(None) is None


def test_media_url_joins_relative_paths():
    assert media_url("http://api.test/", "/uploads/a.png") == "http://api.test/uploads/a.png"
    assert media_url("http://api.test", "uploads\\a.png") == "http://api.test/uploads/a.png"


def test_media_url_passes_absolute_urls():
    assert media_url("http://api.test", "https://cdn.example/a.png") == "https://cdn.example/a.png"
    assert media_url("http://api.test", None) is None


def test_data_url():
    assert data_url(b"hi", "text/plain") == "data:text/plain;base64,aGk="


def test_branch_accepts_plain_id():
    b = Branch.from_api({"id": 7, "branchName": "Main"})
    assert b.id == "7"
    assert b.branch_image is None


def test_parse_date_variants():
    assert parse_date("2025-01-15T00:00:00.000Z") == date(2025, 1, 15)
    assert parse_date("garbage") is None
    assert parse_date(None) is None
    assert parse_date("2025-01-15T23:30:00-05:00") == date(2025, 1, 15)
    assert parse_date("2025-01-15") == date(2025, 1, 15)


def test_course_mode_parse():
    assert CourseMode.parse(" Online ") == CourseMode.ONLINE
    assert CourseMode.parse("postal") is None


class TestAttachments:
    def test_stored_path_becomes_remote_image(self):
        slot = from_stored_path("uploads\\a.png", "http://api.test")
        assert slot == RemoteImage("uploads/a.png", "http://api.test/uploads/a.png")
        assert stored_path(slot) == "uploads/a.png"
        assert pending_upload(slot) is None

    def test_missing_path_is_empty(self):
        assert from_stored_path(None, "http://api.test") is EMPTY
        assert EMPTY.preview is None

    def test_picked_file_is_the_only_upload(self):
        slot = from_file("a.png", b"abc", "image/png")
        upload = pending_upload(slot)
        assert upload.filename == "a.png"
        assert upload.as_part("images") == ("images", ("a.png", b"abc", "image/png"))
        assert stored_path(slot) is None

    def test_unknown_content_type_defaults(self):
        assert from_file("a.bin", b"x").content_type == "application/octet-stream"
