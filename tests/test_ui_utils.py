"""
Tests for UI helper functions.
"""
import asyncio
from unittest.mock import Mock

import pytest

from api.content_client import ImageUpload
from ui.ui_utils import display_value, format_active, run_async, to_image_upload, truncate_preview


class TestTruncatePreview:
    """Preview truncation with an ellipsis only when text is cut."""

    def test_short_text_unchanged(self):
        assert truncate_preview("short", 100) == "short"

    def test_exact_limit_unchanged(self):
        assert truncate_preview("a" * 120, 120) == "a" * 120

    def test_long_text_cut(self):
        assert truncate_preview("a" * 121, 120) == "a" * 120 + "..."

    def test_default_limit(self):
        assert truncate_preview("b" * 150) == "b" * 100 + "..."

    def test_none(self):
        assert truncate_preview(None) == ""


class TestDisplayHelpers:

    @pytest.mark.parametrize("value,expected", [(True, "Active"), (False, "Inactive")])
    def test_format_active(self, value, expected):
        assert format_active(value) == expected

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_display_value_placeholder(self, value):
        assert display_value(value) == "—"

    def test_display_value_text(self):
        assert display_value(42) == "42"


class TestToImageUpload:

    def test_none(self):
        assert to_image_upload(None) is None

    def test_uploaded_file(self):
        uploaded = Mock()
        uploaded.name = "banner.webp"
        uploaded.type = "image/webp"
        uploaded.getvalue.return_value = b"RIFF"

        assert to_image_upload(uploaded) == ImageUpload("banner.webp", b"RIFF", "image/webp")

    def test_missing_content_type(self):
        uploaded = Mock()
        uploaded.name = "x.bin"
        uploaded.type = None
        uploaded.getvalue.return_value = b""

        assert to_image_upload(uploaded).content_type == "application/octet-stream"


class TestRunAsync:

    def test_without_running_loop(self):
        async def answer():
            return 42

        assert run_async(answer()) == 42

    @pytest.mark.asyncio
    async def test_inside_running_loop(self):
        async def answer():
            await asyncio.sleep(0)
            return "ok"

        assert run_async(answer()) == "ok"
