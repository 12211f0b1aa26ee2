"""Tests for the sbgnpaint command line."""

# Standard Library
import json
import os

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_sbgnpaint_to_sys_path()

# local repo modules
from sbgnpaint import cli


FRAGMENT_PATH = conftest.tests_path("fixtures", "glycolysis_fragment.sbgn")


#============================================
def test_default_svg_path():
	assert cli.default_svg_path("out/map.png") == os.path.join("out", "map.svg")
	assert cli.default_svg_path("map") == "map.svg"


#============================================
def test_parser_defaults():
	args = cli.build_parser().parse_args(["draw_sbgnml", "--input", "x.sbgn"])
	assert args.output == "sbgnml.png"
	assert args.svg is None
	assert args.padding == 10.0
	assert args.clone_markers is True
	assert args.style is None
	assert args.dump_ops is None


#============================================
def test_input_is_required():
	with pytest.raises(SystemExit):
		cli.build_parser().parse_args(["draw_sbgnml"])


#============================================
def test_draw_writes_png_and_sibling_svg(tmp_path, capsys):
	output = str(tmp_path / "map.png")
	status = cli.main(["draw_sbgnml", "--input", FRAGMENT_PATH, "--output", output])
	assert status == 0
	assert os.path.isfile(output)
	assert os.path.isfile(str(tmp_path / "map.svg"))
	lines = capsys.readouterr().out.splitlines()
	assert len(lines) == 2
	assert all(line.startswith("Wrote ") for line in lines)
	assert lines[0].endswith(output)


#============================================
def test_empty_svg_option_skips_svg(tmp_path, capsys):
	output = str(tmp_path / "map.pdf")
	status = cli.main(["draw_sbgnml", "--input", FRAGMENT_PATH, "--output", output, "--svg", ""])
	assert status == 0
	assert not os.path.exists(str(tmp_path / "map.svg"))
	assert len(capsys.readouterr().out.splitlines()) == 1


#============================================
def test_svg_output_is_not_written_twice(tmp_path, capsys):
	output = str(tmp_path / "map.svg")
	status = cli.main(["draw_sbgnml", "--input", FRAGMENT_PATH, "--output", output])
	assert status == 0
	assert len(capsys.readouterr().out.splitlines()) == 1


#============================================
def test_dump_ops(tmp_path):
	output = str(tmp_path / "map.png")
	dump = str(tmp_path / "ops.json")
	status = cli.main([
		"draw_sbgnml", "--input", FRAGMENT_PATH, "--output", output,
		"--svg", "", "--dump-ops", dump, "--no-clone-markers",
	])
	assert status == 0
	with open(dump, "r", encoding="utf-8") as handle:
		data = json.load(handle)
	kinds = {entry["kind"] for entry in data}
	assert "clip" not in kinds
	assert {"path", "line", "text"} <= kinds


#============================================
def test_clone_markers_on_by_default(tmp_path):
	dump = str(tmp_path / "ops.json")
	status = cli.main([
		"draw_sbgnml", "--input", FRAGMENT_PATH, "--output", str(tmp_path / "map.png"),
		"--svg", "", "--dump-ops", dump,
	])
	assert status == 0
	with open(dump, "r", encoding="utf-8") as handle:
		data = json.load(handle)
	assert any(entry["kind"] == "clip" for entry in data)


#============================================
def test_missing_input_fails(tmp_path, capsys):
	status = cli.main([
		"draw_sbgnml", "--input", str(tmp_path / "absent.sbgn"), "--output", str(tmp_path / "x.png"),
	])
	assert status == 1
	assert capsys.readouterr().err.startswith("ERROR:")
	assert not os.path.exists(str(tmp_path / "x.png"))


#============================================
def test_invalid_document_fails(tmp_path, capsys):
	status = cli.main([
		"draw_sbgnml", "--input", conftest.tests_path("fixtures", "invalid_arc.sbgn"),
		"--output", str(tmp_path / "x.png"),
	])
	assert status == 1
	assert "Arc missing end" in capsys.readouterr().err


#============================================
def test_non_finite_bbox_fails(tmp_path, capsys):
	source = tmp_path / "inf.sbgn"
	source.write_text(
		'<?xml version="1.0"?><sbgn xmlns="http://sbgn.org/libsbgn/0.2">'
		'<map language="process description">'
		'<glyph class="macromolecule" id="m"><bbox x="0" y="0" w="inf" h="10"/></glyph>'
		'</map></sbgn>',
		encoding="utf-8",
	)
	output = str(tmp_path / "x.png")
	status = cli.main(["draw_sbgnml", "--input", str(source), "--output", output])
	assert status == 1
	err = capsys.readouterr().err
	assert err.startswith("ERROR:")
	assert "bbox" in err
	assert not os.path.exists(output)


#============================================
def test_bad_style_file_fails(tmp_path, capsys):
	style = tmp_path / "style.json"
	style.write_text(json.dumps({"no_such_option": 1}), encoding="utf-8")
	status = cli.main([
		"draw_sbgnml", "--input", FRAGMENT_PATH, "--output", str(tmp_path / "x.png"),
		"--style", str(style),
	])
	assert status == 1
	assert "no_such_option" in capsys.readouterr().err


#============================================
def test_style_file_applies(tmp_path):
	style = tmp_path / "style.json"
	style.write_text(json.dumps({"border_color": "#112233"}), encoding="utf-8")
	dump = str(tmp_path / "ops.json")
	status = cli.main([
		"draw_sbgnml", "--input", FRAGMENT_PATH, "--output", str(tmp_path / "x.png"),
		"--svg", "", "--style", str(style), "--dump-ops", dump,
	])
	assert status == 0
	with open(dump, "r", encoding="utf-8") as handle:
		data = json.load(handle)
	paths = [entry for entry in data if entry["kind"] == "path"]
	assert paths
	assert all(entry["stroke"] == "#112233" for entry in paths)
