import os
import sys
from datetime import datetime

# Add evaluation to path
EVAL_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'evaluation'))
if EVAL_DIR not in sys.path:
	sys.path.insert(0, EVAL_DIR)

import evaluation


SAMPLE_OUTPUT = """
============================= test session starts ==============================
collected 4 items

tests/test_core.py::test_abracadabra_tree_and_codes PASSED               [ 25%]
tests/test_core.py::test_decode_truncated_bitstring FAILED               [ 50%]
tests/test_service.py::test_performance_1mb SKIPPED (no time)            [ 75%]
tests/test_cli.py::test_report_for_one_line ERROR                        [100%]

=========================== short test summary info ============================
FAILED tests/test_core.py::test_decode_truncated_bitstring - AssertionError
"""


def test_parse_pytest_verbose_output():
	tests = evaluation.parse_pytest_verbose_output(SAMPLE_OUTPUT)
	outcomes = [(t["name"], t["outcome"]) for t in tests]
	assert outcomes[:4] == [
		("test_abracadabra_tree_and_codes", "passed"),
		("test_decode_truncated_bitstring", "failed"),
		("test_performance_1mb", "skipped"),
		("test_report_for_one_line", "error"),
	]
	assert tests[0]["nodeid"] == "tests/test_core.py::test_abracadabra_tree_and_codes"


def test_summarize_counts_outcomes():
	tests = evaluation.parse_pytest_verbose_output(SAMPLE_OUTPUT)[:4]
	summary = evaluation.summarize(tests)
	assert summary == {"passed": 1, "failed": 1, "error": 1, "skipped": 1, "total": 4}


def test_generate_output_path(tmp_path, monkeypatch):
	monkeypatch.setattr(evaluation, "PROJECT_ROOT", tmp_path)
	path = evaluation.generate_output_path(datetime(2026, 10, 19, 8, 30, 5))
	assert path == tmp_path / "evaluation" / "2026-10-19" / "08-30-05" / "report.json"
	assert path.parent.is_dir()


def test_environment_info_keys():
	info = evaluation.get_environment_info()
	assert {"python_version", "platform", "git_commit", "git_branch"} <= set(info)
