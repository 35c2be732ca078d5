"""
Integration Tests for the MCP Server

Exercise the tools and the widget resource through an in-memory FastMCP client.
"""

import httpx
import pytest
from fastmcp import Client

from pixabay_mcp.config import PixabaySettings, Settings, WidgetSettings
from pixabay_mcp.resources.gallery_widget import WIDGET_DESCRIPTION, WIDGET_MIME_TYPE
from pixabay_mcp.server import create_app
from pixabay_mcp.tools import search_images, search_media
from pixabay_mcp.tools.context import OUTPUT_TEMPLATE_URI, current_request_meta


@pytest.fixture
def server_settings(tmp_path):
    (tmp_path / "component.js").write_text("renderGallery();")
    return Settings(
        pixabay=PixabaySettings(PIXABAY_API_KEY="test-key"),
        widget=WidgetSettings(WIDGET_DIST_DIR=tmp_path),
    )


@pytest.fixture
def found_images(stub_upstream, image_hit):
    return stub_upstream(
        json={"totalHits": 40, "hits": [image_hit(1), image_hit(2)]},
        headers={"x-ratelimit-limit": "100", "x-ratelimit-remaining": "97"},
    )


class TestToolListing:
    """Tests for the tool declarations seen by a client."""

    @pytest.mark.asyncio
    async def test_tools_carry_widget_meta(self, server_settings, found_images):
        app = create_app(server_settings, transport=httpx.MockTransport(found_images))

        async with Client(app) as client:
            tools = {tool.name: tool for tool in await client.list_tools()}

        assert set(tools) == {"search_pixabay_images", "search_pixabay_media"}
        images = tools["search_pixabay_images"]
        assert images.description == (
            "Finds royalty-free images from Pixabay that match the user's search query."
        )
        assert images.meta["openai/outputTemplate"] == OUTPUT_TEMPLATE_URI
        assert images.meta["openai/toolInvocation/invoking"] == "Searching Pixabay…"
        assert images.meta["openai/toolInvocation/invoked"] == "Images ready."
        media = tools["search_pixabay_media"]
        assert media.description == search_media.TOOL_DESCRIPTION
        assert media.meta["openai/toolInvocation/invoked"] == "Media ready."

    @pytest.mark.asyncio
    async def test_input_schema_is_strict(self, server_settings, found_images):
        app = create_app(server_settings, transport=httpx.MockTransport(found_images))

        async with Client(app) as client:
            tools = {tool.name: tool for tool in await client.list_tools()}

        schema = tools[search_images.TOOL_NAME].inputSchema
        assert schema["required"] == ["query"]
        assert schema["additionalProperties"] is False
        assert set(schema["properties"]) == {"query", "orientation", "safesearch", "per_page"}


class TestToolCalls:
    """Tests for calling the tools over the protocol."""

    @pytest.mark.asyncio
    async def test_image_search_result(self, server_settings, found_images):
        app = create_app(server_settings, transport=httpx.MockTransport(found_images))

        async with Client(app) as client:
            result = await client.call_tool(
                "search_pixabay_images",
                {"query": "sunset", "per_page": 5},
                meta={"openai/locale": "pt-BR"},
            )

        assert not result.is_error
        assert result.content[0].text == 'Found 2 Pixabay images for "sunset".'
        assert result.structured_content["resultCount"] == 2
        assert result.structured_content["totalHits"] == 40
        assert result.meta["openai/locale"] == "pt-BR"
        assert result.meta["rateLimit"] == {"limit": 100, "remaining": 97}
        sent = found_images.requests[0]
        assert sent.url.params["lang"] == "pt"
        assert sent.url.params["per_page"] == "5"

    @pytest.mark.asyncio
    async def test_webplus_locale_hint(self, server_settings, found_images):
        app = create_app(server_settings, transport=httpx.MockTransport(found_images))

        async with Client(app) as client:
            result = await client.call_tool(
                "search_pixabay_images",
                {"query": "sunset"},
                meta={"webplus/i18n": "de-DE"},
            )

        assert result.meta["openai/locale"] == "de-DE"
        assert found_images.requests[0].url.params["lang"] == "de"

    @pytest.mark.asyncio
    async def test_missing_locale_uses_default(self, server_settings, found_images):
        app = create_app(server_settings, transport=httpx.MockTransport(found_images))

        async with Client(app) as client:
            result = await client.call_tool("search_pixabay_images", {"query": "sunset"})

        assert result.meta["openai/locale"] == "en"

    @pytest.mark.asyncio
    async def test_string_values_are_not_coerced(self, server_settings, found_images):
        """Test that "5" and "false" are rejected rather than converted."""
        app = create_app(server_settings, transport=httpx.MockTransport(found_images))

        async with Client(app) as client:
            result = await client.call_tool(
                "search_pixabay_images",
                {"query": "cats", "per_page": "5", "safesearch": "false"},
                raise_on_error=False,
            )

        assert result.is_error
        message = result.content[0].text
        assert "per_page must be an integer." in message
        assert "safesearch must be a boolean." in message
        assert found_images.requests == []

    @pytest.mark.asyncio
    async def test_every_violation_is_reported(self, server_settings, found_images):
        app = create_app(server_settings, transport=httpx.MockTransport(found_images))

        async with Client(app) as client:
            result = await client.call_tool(
                "search_pixabay_images",
                {"query": "", "per_page": 50, "color": "red"},
                raise_on_error=False,
            )

        assert result.is_error
        message = result.content[0].text
        assert "Please provide a search query (1-100 characters)." in message
        assert "per_page must be between 3 and 20." in message
        assert "Unrecognized field: color." in message
        assert found_images.requests == []

    @pytest.mark.asyncio
    async def test_upstream_error_is_a_tool_error(self, server_settings, stub_upstream):
        upstream = stub_upstream(status_code=401, text="[ERROR 400] Invalid API key")
        app = create_app(server_settings, transport=httpx.MockTransport(upstream))

        async with Client(app) as client:
            result = await client.call_tool(
                "search_pixabay_images", {"query": "cats"}, raise_on_error=False
            )

        assert result.is_error
        assert result.content[0].text == "Pixabay authentication failed. Verify the API key."

    @pytest.mark.asyncio
    async def test_media_search(self, server_settings, image_hit, video_hit):
        def handler(request):
            if request.url.path.endswith("/videos/"):
                return httpx.Response(200, json={"totalHits": 1, "hits": [video_hit(1)]})
            return httpx.Response(200, json={"totalHits": 1, "hits": [image_hit(1)]})

        app = create_app(server_settings, transport=httpx.MockTransport(handler))

        async with Client(app) as client:
            result = await client.call_tool("search_pixabay_media", {"query": "waves"})

        assert result.content[0].text == 'Found 1 image and 1 video on Pixabay for "waves".'
        assert result.structured_content["videoCount"] == 1

    @pytest.mark.asyncio
    async def test_settings_are_read_once(self, monkeypatch, found_images):
        """Test that environment changes after startup do not affect calls."""
        monkeypatch.setenv("PIXABAY_API_KEY", "startup-key")
        app = create_app(transport=httpx.MockTransport(found_images))
        monkeypatch.setenv("PIXABAY_API_KEY", "changed-key")

        async with Client(app) as client:
            await client.call_tool("search_pixabay_images", {"query": "cats"})
            monkeypatch.delenv("PIXABAY_API_KEY")
            await client.call_tool("search_pixabay_images", {"query": "dogs"})

        keys = [request.url.params["key"] for request in found_images.requests]
        assert keys == ["startup-key", "startup-key"]

    def test_no_request_meta_outside_a_call(self):
        assert current_request_meta() == {}


class TestWidgetResource:
    """Tests for the gallery widget as served to a client."""

    @pytest.mark.asyncio
    async def test_resource_listing(self, server_settings, found_images):
        app = create_app(server_settings, transport=httpx.MockTransport(found_images))

        async with Client(app) as client:
            resources = await client.list_resources()

        assert len(resources) == 1
        widget = resources[0]
        assert str(widget.uri) == OUTPUT_TEMPLATE_URI
        assert widget.name == "pixabay-image-gallery"
        assert widget.mimeType == WIDGET_MIME_TYPE == "text/html+skybridge"
        assert widget.meta["openai/widgetDescription"] == WIDGET_DESCRIPTION
        assert widget.meta["openai/widgetPrefersBorder"] is True

    @pytest.mark.asyncio
    async def test_read_resource(self, server_settings, found_images):
        app = create_app(server_settings, transport=httpx.MockTransport(found_images))

        async with Client(app) as client:
            contents = await client.read_resource(OUTPUT_TEMPLATE_URI)

        assert "renderGallery();" in contents[0].text
        assert contents[0].text.startswith("<!doctype html>")
