"""Tests for style resolution and style files."""

# Standard Library
import json

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_sbgnpaint_to_sys_path()

# local repo modules
from sbgnpaint import render_config


#============================================
def test_resolve_style_defaults_are_a_copy():
	style = render_config.resolve_style()
	style["line_width"] = 99.0
	assert render_config.DEFAULT_STYLE["line_width"] == 1.5


#============================================
def test_resolve_style_override():
	style = render_config.resolve_style({"border_color": "#000000"})
	assert style["border_color"] == "#000000"
	assert style["fill_color"] == render_config.DEFAULT_STYLE["fill_color"]


#============================================
def test_resolve_style_rejects_unknown_key():
	with pytest.raises(ValueError, match="bogus"):
		render_config.resolve_style({"bogus": 1})


#============================================
def test_load_style_file(tmp_path):
	path = tmp_path / "style.json"
	path.write_text(json.dumps({"font_size": 14.0}), encoding="utf-8")
	assert render_config.load_style_file(str(path)) == {"font_size": 14.0}


#============================================
def test_load_style_file_requires_object(tmp_path):
	path = tmp_path / "style.json"
	path.write_text("[1, 2]", encoding="utf-8")
	with pytest.raises(ValueError):
		render_config.load_style_file(str(path))
