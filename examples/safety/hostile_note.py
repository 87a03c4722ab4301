"""Render notes containing hostile markup and show what survives.

Raw HTML typed into a note is escaped to text; links are only clickable
for allowed schemes; the sanitizer catches anything else.
"""

from notedown import Notedown, RenderConfig, estimate_read_time, render, sanitize

NOTES = [
    "<script>alert('typed into the note')</script>",
    "[click me](javascript:alert(1))",
    "[docs](https://example.com) and **bold**",
    "```html\n<img src=x onerror=alert(1)>\n```",
]

for note in NOTES:
    print(f"{note!r}\n  -> {render(note)}\n")

# Markup from elsewhere goes through the same sanitizer
print(sanitize('<p onclick="steal()">hi<iframe src="//evil.example"></iframe></p>'))

# Same-tab links, https only
strict_links = Notedown(
    config=RenderConfig.from_dict({"link_target": None, "allowed_link_schemes": ["https"]})
)
print(strict_links("[a](http://example.com) [b](https://example.com)"))

print(estimate_read_time(" ".join(NOTES)))
