# Standard Library
import os
import sys

# Third Party
import pytest


def pytest_addoption(parser):
	parser.addoption(
		"--save",
		action="store_true",
		default=False,
		help="Save rendered outputs to the current working directory",
	)


def repo_root():
	root = _find_repo_root(os.getcwd())
	if not root:
		root = _find_repo_root(os.path.dirname(os.path.abspath(__file__)))
	if not root:
		raise RuntimeError("repo root could not be resolved from current working directory")
	return root


#============================================
def tests_root():
	return os.path.join(repo_root(), "tests")


#============================================
def tests_path(*parts):
	return os.path.join(tests_root(), *parts)


#============================================
def _find_repo_root(start_dir):
	current = os.path.abspath(start_dir)
	while True:
		if _looks_like_repo_root(current):
			return current
		parent = os.path.dirname(current)
		if parent == current:
			return ""
		current = parent


#============================================
def _looks_like_repo_root(path):
	if not path:
		return False
	if not os.path.isdir(path):
		return False
	if not os.path.isfile(os.path.join(path, "pyproject.toml")):
		return False
	if not os.path.isdir(os.path.join(path, "packages", "sbgnpaint", "sbgnpaint")):
		return False
	return True


def add_sbgnpaint_to_sys_path():
	root = repo_root()
	package_dir = os.path.join(root, "packages", "sbgnpaint")
	if package_dir not in sys.path:
		sys.path.insert(0, package_dir)
	return root


add_sbgnpaint_to_sys_path()

# local repo modules
from sbgnpaint import text_layout


#============================================
class FixedAdvanceMeasurer:
	"""Font-independent measurer: every character advances 0.5 em."""

	def measure(self, text, font_size, font_name):
		return text_layout.TextMetrics(
			width=0.5 * font_size * len(text),
			ascent=0.8 * font_size,
			descent=0.2 * font_size,
		)


#============================================
@pytest.fixture
def measurer():
	return FixedAdvanceMeasurer()


#============================================
@pytest.fixture
def output_dir(request, tmp_path):
	if request.config.getoption("save"):
		return os.getcwd()
	return tmp_path
