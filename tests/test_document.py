"""Tests for DocumentRenderer and the top-level render API."""

import pytest

from pergamino import render, render_json
from pergamino.config import RenderConfig, get_render_config
from pergamino.document import DocumentRenderer
from pergamino.errors import RenderError, TypeNotFound
from pergamino.registry import RendererRegistry
from pergamino.renderers import TextRenderer, tag_renderer

LEAFS_DOC = {
    "type": "doc",
    "content": [
        {
            "type": "paragraph",
            "content": [{"text": "This is a comment on the Leafs thread", "type": "text"}],
        }
    ],
}


def _register_reference_set(renderer: DocumentRenderer) -> DocumentRenderer:
    return (
        renderer.register("doc", tag_renderer("div"))
        .register("paragraph", tag_renderer("p"))
        .register("text", TextRenderer())
    )


class TestDocumentRenderer:
    """Rendering through an explicitly built registry."""

    def test_renders_document(self) -> None:
        renderer = _register_reference_set(DocumentRenderer(LEAFS_DOC))
        assert renderer.render() == "<div><p>This is a comment on the Leafs thread</p></div>"

    def test_paragraph_with_attrs(self) -> None:
        doc = {
            "type": "paragraph",
            "attrs": {"class": "test"},
            "content": [{"type": "text", "text": "hi"}],
        }
        renderer = DocumentRenderer(doc)
        renderer.register("paragraph", tag_renderer("p"))
        renderer.register("text", TextRenderer())

        assert renderer.render() == '<p class="test">hi</p>'

    def test_image_with_null_attr(self) -> None:
        doc = {"type": "image", "attrs": {"alt": "x", "src": "y", "title": None}}
        renderer = DocumentRenderer(doc).register("image", tag_renderer("img", self_closing=True))

        assert renderer.render() == '<img alt="x" src="y" title="" />'

    def test_image_attrs_substituted_literally(self) -> None:
        doc = {
            "type": "image",
            "attrs": {
                "alt": "PAPI SIGNS EXTENSION 😏",
                "src": "https://pbs.twimg.com/media/F4PrVzTXwAAADiF?format=jpg&name=large",
                "title": None,
            },
        }
        renderer = DocumentRenderer(doc).register("image", tag_renderer("img", self_closing=True))

        assert renderer.render() == (
            '<img alt="PAPI SIGNS EXTENSION 😏" '
            'src="https://pbs.twimg.com/media/F4PrVzTXwAAADiF?format=jpg&name=large" '
            'title="" />'
        )

    def test_empty_document(self) -> None:
        doc = {"type": "doc", "content": []}
        renderer = DocumentRenderer(doc).register("doc", tag_renderer("div"))

        assert renderer.render() == "<div></div>"

    def test_text_root(self) -> None:
        renderer = DocumentRenderer({"type": "text", "text": "bare"})
        renderer.register("text", TextRenderer())
        assert renderer.render() == "bare"

    def test_unregistered_nested_type_dropped(self) -> None:
        doc = {
            "type": "doc",
            "content": [
                {"type": "paragraph", "content": [{"type": "text", "text": "kept"}]},
                {"type": "table", "content": [{"type": "text", "text": "lost"}]},
                {"type": "paragraph", "content": [{"type": "text", "text": "also kept"}]},
            ],
        }
        renderer = _register_reference_set(DocumentRenderer(doc))

        assert renderer.render() == "<div><p>kept</p><p>also kept</p></div>"

    def test_shared_registry(self) -> None:
        registry = RendererRegistry({"paragraph": tag_renderer("p"), "text": TextRenderer()})
        first = DocumentRenderer({"type": "paragraph", "content": [{"type": "text", "text": "1"}]}, registry)
        second = DocumentRenderer({"type": "paragraph", "content": [{"type": "text", "text": "2"}]}, registry)

        assert first.render() == "<p>1</p>"
        assert second.render() == "<p>2</p>"
        assert first.registry is second.registry

    def test_render_is_repeatable(self) -> None:
        renderer = _register_reference_set(DocumentRenderer(LEAFS_DOC))
        assert renderer.render() == renderer.render()

    def test_does_not_mutate_input(self) -> None:
        import copy

        snapshot = copy.deepcopy(LEAFS_DOC)
        _register_reference_set(DocumentRenderer(LEAFS_DOC)).render()
        assert LEAFS_DOC == snapshot

    def test_content_property(self) -> None:
        assert DocumentRenderer(LEAFS_DOC).content is LEAFS_DOC


class TestRootDispatchErrors:
    """Only the root's type is dispatched strictly."""

    def test_no_renderers_registered(self) -> None:
        renderer = DocumentRenderer({"type": "doc", "content": []})

        with pytest.raises(TypeNotFound) as exc_info:
            renderer.render()

        assert exc_info.value.type_name == "doc"

    def test_missing_type(self) -> None:
        renderer = _register_reference_set(DocumentRenderer({"content": []}))

        with pytest.raises(TypeNotFound) as exc_info:
            renderer.render()

        assert exc_info.value.type_name is None

    @pytest.mark.parametrize("root", [None, "doc", ["doc"], {"type": 1}])
    def test_malformed_root(self, root: object) -> None:
        renderer = _register_reference_set(DocumentRenderer(root))

        with pytest.raises(TypeNotFound) as exc_info:
            renderer.render()

        assert exc_info.value.type_name is None

    def test_custom_renderer_error_propagates_unchanged(self) -> None:
        error = RenderError("bad embed")

        class FailingRenderer:
            def render(self, node: object, registry: RendererRegistry) -> str:
                raise error

        renderer = _register_reference_set(
            DocumentRenderer({"type": "doc", "content": [{"type": "embed"}]})
        )
        renderer.register("embed", FailingRenderer())

        with pytest.raises(RenderError) as exc_info:
            renderer.render()

        assert exc_info.value is error


class TestRenderConfigScope:
    def test_config_applies_during_render_only(self) -> None:
        doc = {"type": "paragraph", "attrs": {"title": 'a "b"'}, "content": []}
        renderer = DocumentRenderer(
            doc,
            RendererRegistry({"paragraph": tag_renderer("p")}),
            config=RenderConfig(escape_attributes=True),
        )

        assert renderer.render() == '<p title="a &quot;b&quot;"></p>'
        assert get_render_config().escape_attributes is False

    def test_config_restored_after_error(self) -> None:
        renderer = DocumentRenderer(
            {"type": "doc", "content": [{"type": "boom"}]},
            config=RenderConfig(escape_attributes=True),
        )

        class Boom:
            def render(self, node: object, registry: RendererRegistry) -> str:
                raise RenderError("boom")

        renderer.register("doc", tag_renderer("div")).register("boom", Boom())

        with pytest.raises(RenderError):
            renderer.render()
        assert get_render_config().escape_attributes is False


class TestTopLevelApi:
    def test_render_uses_builtins_by_default(self) -> None:
        assert render(LEAFS_DOC) == "<div><p>This is a comment on the Leafs thread</p></div>"

    def test_render_with_registry(self) -> None:
        registry = RendererRegistry({"doc": tag_renderer("article")})
        assert render({"type": "doc", "content": []}, registry) == "<article></article>"

    def test_render_with_empty_registry_fails(self) -> None:
        with pytest.raises(TypeNotFound):
            render({"type": "doc"}, RendererRegistry())

    def test_render_starter_kit_document(self) -> None:
        doc = {
            "type": "doc",
            "content": [
                {
                    "type": "bulletList",
                    "content": [
                        {
                            "type": "listItem",
                            "content": [
                                {"type": "paragraph", "content": [{"type": "text", "text": "one"}]}
                            ],
                        }
                    ],
                },
                {"type": "horizontalRule"},
                {
                    "type": "paragraph",
                    "content": [
                        {"type": "text", "text": "line"},
                        {"type": "hardBreak"},
                        {"type": "text", "text": "break"},
                    ],
                },
            ],
        }
        assert render(doc) == (
            "<div><ul><li><p>one</p></li></ul><hr /><p>line<br />break</p></div>"
        )

    def test_render_json(self) -> None:
        source = '{"type":"paragraph","attrs":{"class":"test"},"content":[{"type":"text","text":"hi"}]}'
        assert render_json(source) == '<p class="test">hi</p>'

    def test_render_json_with_config(self) -> None:
        source = '{"type":"paragraph","content":[{"type":"text","text":"hi"}]}'
        config = RenderConfig(text_transformer=str.upper)
        assert render_json(source, config=config) == "<p>HI</p>"
