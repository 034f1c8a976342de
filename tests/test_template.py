from __future__ import annotations

import pytest

from create_godotrs.template import TemplateRenderingError, render_string
from create_godotrs.templates import PROJECT_DESCRIPTOR_TEMPLATE


def test_render_project_descriptor_verbatim():
    rendered = render_string(PROJECT_DESCRIPTOR_TEMPLATE, {"name": "my-game 2"})
    assert rendered == '[application]\nconfig/name="my-game 2-godot"\n'


def test_placeholder_whitespace_is_ignored():
    assert render_string("{{name}} / {{   name }}", {"name": "demo"}) == "demo / demo"


def test_values_with_backslashes_are_not_interpreted():
    assert render_string("{{ name }}", {"name": r"a\1b"}) == r"a\1b"


def test_missing_value_raises():
    with pytest.raises(TemplateRenderingError, match="missing value for 'missing'"):
        render_string("{{ missing }}", {"name": "demo"})
