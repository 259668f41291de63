import pytest

from glacier_api.exceptions import ValidationError
from glacier_api.utils.url_utils import derive_public_id, get_extension


class TestDerivePublicId:
    def test_strips_extension_and_prefixes_folder(self):
        url = "https://storage.googleapis.com/test-bucket/blogs/abc123.jpg"
        assert derive_public_id(url, "blogs") == "blogs/abc123"

    def test_ignores_query_string(self):
        url = "https://cdn.example/media/v1/blogs/abc123.mp4?token=xyz"
        assert derive_public_id(url, "blogs") == "blogs/abc123"

    def test_url_without_extension(self):
        assert derive_public_id("https://cdn.example/blogs/abc123", "blogs") == "blogs/abc123"

    def test_only_last_dot_is_extension(self):
        assert derive_public_id("https://cdn.example/blogs/my.photo.png", "blogs") == "blogs/my.photo"

    def test_folder_slashes_are_normalized(self):
        assert derive_public_id("https://cdn.example/x/abc.png", "/blogs/") == "blogs/abc"

    def test_empty_folder(self):
        assert derive_public_id("https://cdn.example/abc.png", "") == "abc"

    @pytest.mark.parametrize("url", ["", "https://cdn.example/"])
    def test_rejects_urls_without_a_name(self, url):
        with pytest.raises(ValidationError):
            derive_public_id(url, "blogs")


def test_get_extension():
    assert get_extension("Photo.JPG") == "jpg"
    assert get_extension("clip.mp4") == "mp4"
    assert get_extension("noext") == ""
    assert get_extension(None) == ""
