"""Command-line runner tests."""

import json
import textwrap

import pytest

from gateway_conformance.cli import EXIT_FAILED, EXIT_OK, EXIT_USAGE, load_target, main
from gateway_conformance.gateways import DummyGateway

BROKEN_MODULE = textwrap.dedent(
    '''
    from gateway_conformance.gateways import DummyGateway


    class NoisyFlagGateway(DummyGateway):
        def supports_refund(self):
            return "yes"
    '''
)


@pytest.fixture
def broken_module(tmp_path, monkeypatch):
    (tmp_path / "cli_broken_gateway.py").write_text(BROKEN_MODULE)
    monkeypatch.syspath_prepend(str(tmp_path))
    return "cli_broken_gateway:NoisyFlagGateway"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("GATEWAY_CONFORMANCE_FILTER", raising=False)
    monkeypatch.delenv("GATEWAY_CONFORMANCE_REPORT", raising=False)


def test_load_target():
    assert load_target("gateway_conformance.gateways:DummyGateway") is DummyGateway


@pytest.mark.parametrize(
    "target",
    [
        "gateway_conformance.gateways",
        "gateway_conformance.gateways:",
        "gateway_conformance.gateways:NoSuchGateway",
        "gateway_conformance:__version__",
    ],
)
def test_load_target_rejects_bad_targets(target):
    with pytest.raises(ValueError):
        load_target(target)


def test_reference_gateway_exits_ok(capsys):
    assert main(["gateway_conformance.gateways:DummyGateway"]) == EXIT_OK
    out = capsys.readouterr().out
    assert "CONFORMANCE: DummyGateway" in out
    assert "16 passed, 0 failed, 0 errors, 0 skipped" in out


def test_failures_are_printed_and_exit_nonzero(capsys, broken_module):
    assert main([broken_module]) == EXIT_FAILED
    out = capsys.readouterr().out
    assert "supports_refund() must return a bool, got 'yes'" in out


def test_json_report(tmp_path, broken_module):
    report_path = tmp_path / "reports" / "conformance.json"
    main([broken_module, "--json", str(report_path)])
    data = json.loads(report_path.read_text())
    assert data["gateway"] == "NoisyFlagGateway"
    assert data["success"] is False
    assert data["scenarios"]["refund"]["status"] == "fail"


def test_filter_option(capsys):
    assert main(["gateway_conformance.gateways:DummyGateway", "--filter", "refund", "--filter", "void"]) == EXIT_OK
    assert "2 passed, 0 failed, 0 errors, 14 skipped" in capsys.readouterr().out


def test_environment_configuration(tmp_path, monkeypatch, capsys):
    report_path = tmp_path / "env-report.json"
    monkeypatch.setenv("GATEWAY_CONFORMANCE_FILTER", "name, short_name")
    monkeypatch.setenv("GATEWAY_CONFORMANCE_REPORT", str(report_path))
    assert main(["gateway_conformance.gateways:DummyGateway"]) == EXIT_OK
    assert json.loads(report_path.read_text())["passed"] == 2


def test_list_scenarios(capsys):
    assert main(["--list"]) == EXIT_OK
    lines = capsys.readouterr().out.split()
    assert lines[0] == "name"
    assert lines[-1] == "update_card"


def test_missing_target_is_usage_error(capsys):
    assert main([]) == EXIT_USAGE
    assert "gateway target is required" in capsys.readouterr().err


def test_unimportable_target_is_usage_error(capsys):
    assert main(["no_such_module_anywhere:Gateway"]) == EXIT_USAGE
    assert "cannot load" in capsys.readouterr().err
