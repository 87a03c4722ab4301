"""Render a note preview in 3 lines."""

from notedown import render

html = render("# Hello **World**")
print(html)
