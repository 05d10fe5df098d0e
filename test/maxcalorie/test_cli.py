import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import main as cli
from MaxCalorie.solvers import get_solver, list_solvers, solve


def _write_db(tmp_path: Path) -> Path:
    path = tmp_path / "food.csv"
    path.write_text(
        "Description^Weight^Calories\n"
        "A^2^3\n"
        "B^3^4\n"
        "C^4^5\n"
        "D^5^6\n"
        "water^1^0\n",
        encoding="utf-8",
    )
    return path


def test_parser_defaults():
    parser = cli.build_parser()
    args = parser.parse_args(["--database", "db.csv", "--capacity", "5"])
    assert args.solver == "dynamic"
    assert args.weight_unit == 1.0
    assert args.calories is None
    assert args.limit is None


def test_parser_rejects_unknown_solver():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["-d", "db.csv", "-c", "5", "--solver", "greedy"])


@pytest.mark.parametrize("solver", ["exhaustive", "dynamic"])
def test_main_prints_optimal_selection(solver, tmp_path, capsys):
    db = _write_db(tmp_path)
    code = cli.main([
        "-d", str(db), "-c", "5", "-s", solver,
        "--calories", "1-", "--log-dir", str(tmp_path / "logs"),
    ])
    assert code == 0
    out = capsys.readouterr().out
    assert "> Grand total calories: 7" in out
    assert "water" not in out
    assert (tmp_path / "logs" / "maxcalorie_logs.log").is_file()


def test_main_reports_bad_database(tmp_path):
    bad = tmp_path / "bad.csv"
    bad.write_text("header\nA^2\n", encoding="utf-8")
    assert cli.main(["-d", str(bad), "-c", "5", "--log-dir", str(tmp_path)]) == 1


def test_main_reports_oversized_enumeration(tmp_path):
    db = tmp_path / "big.csv"
    rows = "".join(f"food{i}^1^1\n" for i in range(70))
    db.write_text("header\n" + rows, encoding="utf-8")
    code = cli.main(["-d", str(db), "-c", "5", "-s", "exhaustive", "--log-dir", str(tmp_path)])
    assert code == 1


def test_registry_lookup(abcd_catalog):
    assert list_solvers() == ["dynamic", "exhaustive"]
    with pytest.raises(KeyError):
        get_solver("greedy")
    assert solve("exhaustive", abcd_catalog, 5).total_calories == pytest.approx(7.0)
    assert [f.description for f in solve("dynamic", abcd_catalog, 5)] == ["B", "A"]


def test_main_reports_unbounded_capacity(tmp_path):
    db = _write_db(tmp_path)
    assert cli.main(["-d", str(db), "-c", "inf", "-s", "dynamic", "--log-dir", str(tmp_path)]) == 1


def test_registered_solver_runs_through_solve(monkeypatch, abcd_catalog):
    from Core.search_algorithm import SearchAlgorithm
    from MaxCalorie.solvers import register_solver, registry

    class FirstFitSolver(SearchAlgorithm):
        """Takes items in catalog order while they still fit."""
        name = "first_fit"

        def step(self):
            chosen, used = [], 0.0
            for idx, food in enumerate(self.problem.foods):
                if used + food.weight <= self.problem.capacity:
                    chosen.append(idx)
                    used += food.weight
            self._update_best_solution(self.problem.solution_from_indices(chosen))
            self.iteration += 1

        def is_finished(self) -> bool:
            return self.iteration >= 1

    monkeypatch.setattr(registry, "_solver_registry", dict(registry._solver_registry))
    register_solver(FirstFitSolver)

    assert "first_fit" in list_solvers()
    selection = solve("first_fit", abcd_catalog, 5)
    assert [f.description for f in selection] == ["A", "B"]


def test_register_solver_requires_name():
    from Core.search_algorithm import SearchAlgorithm
    from MaxCalorie.solvers import register_solver

    class Unnamed(SearchAlgorithm):
        def step(self):
            pass

        def is_finished(self) -> bool:
            return True

    with pytest.raises(ValueError):
        register_solver(Unnamed)
