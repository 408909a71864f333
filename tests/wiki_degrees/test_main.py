"""
Tests for the wiki-degrees command line interface.
"""

import pytest
from typer.testing import CliRunner

from wiki_degrees import main as cli
from wiki_degrees.solver import SeparationResult

runner = CliRunner()

TARGET = "Kevin Bacon"


@pytest.fixture(autouse=True)
def plain_logging(monkeypatch):
    monkeypatch.setenv("WIKI_DEGREES_RICH_LOGS", "false")
    monkeypatch.setenv("WIKI_DEGREES_LOG_LEVEL", "WARNING")


@pytest.fixture
def use_graph(monkeypatch, make_solver):
    """Point the CLI at an in-memory graph instead of live Wikipedia."""
    def _use(graph, **kwargs):
        solver, lookup = make_solver(graph, **kwargs)
        monkeypatch.setattr(cli, "build_solver", lambda config: solver)
        return lookup
    return _use


def test_degree_from_argument(use_graph):
    use_graph({"Footloose": ["Lori Singer"], "Lori Singer": [TARGET]})

    result = runner.invoke(cli.app, ["Footloose"])

    assert result.exit_code == 0
    assert "Finding the degree of separation from Footloose to Kevin Bacon..." in result.output
    assert "Degree of separation: 2" in result.output


def test_degree_from_prompt_with_url(use_graph):
    lookup = use_graph({"Footloose (1984 film)": [TARGET]})

    result = runner.invoke(cli.app, [], input="https://en.wikipedia.org/wiki/Footloose_(1984_film)\n")

    assert result.exit_code == 0
    assert "Enter the Wikipedia page URL or title to start from" in result.output
    assert "Degree of separation: 1" in result.output
    assert lookup.calls == ["Footloose (1984 film)"]


def test_start_is_target(use_graph):
    lookup = use_graph({})

    result = runner.invoke(cli.app, ["Kevin_Bacon"])

    assert result.exit_code == 0
    assert "Degree of separation: 0" in result.output
    assert lookup.calls == []


def test_unreachable_is_a_normal_exit(use_graph):
    use_graph({"Island": []})

    result = runner.invoke(cli.app, ["Island"])

    assert result.exit_code == 0
    assert "Kevin Bacon's page is not reachable from the given page." in result.output


def test_empty_start_is_rejected(use_graph):
    lookup = use_graph({})

    result = runner.invoke(cli.app, ["   "])

    assert result.exit_code == 1
    assert "Invalid start page" in result.output
    assert "Finding the degree" not in result.output
    assert lookup.calls == []


def test_format_result():
    found = SeparationResult(start_page="A", target_page=TARGET, degree=3)
    missing = SeparationResult(start_page="A", target_page=TARGET, degree=None)

    assert cli.format_result(found) == "Degree of separation: 3"
    assert "not reachable" in cli.format_result(missing)


def test_build_solver_uses_config():
    from wiki_degrees.config import SolverConfig
    from wiki_degrees.wikipedia import LiveWikiService

    config = SolverConfig(target_page="Philosophy", neighbor_cap=7, max_concurrency=3)

    solver = cli.build_solver(config)

    assert solver.target_page == "Philosophy"
    assert solver.max_concurrency == 3
    assert solver.resolver.neighbor_cap == 7
    assert isinstance(solver.resolver.lookup, LiveWikiService)
