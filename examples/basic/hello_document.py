"""Render a Tiptap document in 3 lines — zero config, zero deps."""

from pergamino import render_json

source = '{"type":"doc","content":[{"type":"paragraph","content":[{"type":"text","text":"Hello"}]}]}'
html = render_json(source)
print(html)
