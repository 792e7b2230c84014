"""Add your own node type — register a renderer next to the built-ins."""

from pergamino import DocumentRenderer, create_default_registry, tag_renderer


class MentionRenderer:
    """Render a mention node as a linked @label."""

    def render(self, node, registry) -> str:
        attrs = node.get("attrs") or {}
        return f'<a class="mention" href="/u/{attrs.get("id", "")}">@{attrs.get("label", "")}</a>'


registry = create_default_registry()
registry.register("mention", MentionRenderer())
registry.register("heading", tag_renderer("h2"))

doc = {
    "type": "doc",
    "content": [
        {"type": "heading", "content": [{"type": "text", "text": "Thread"}]},
        {
            "type": "paragraph",
            "content": [
                {"type": "text", "text": "Thanks "},
                {"type": "mention", "attrs": {"id": "42", "label": "marner"}},
                {"type": "poll"},  # unregistered: left out of the output
            ],
        },
    ],
}

html = DocumentRenderer(doc, registry).render()
print(html)
