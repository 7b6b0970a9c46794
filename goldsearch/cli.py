"""Typer CLI for goldsearch. Shared functions used by both CLI and web API."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from goldsearch import __version__
from goldsearch.config import get_root, load_settings, settings_path
from goldsearch.core.errors import SearchError
from goldsearch.core.problem import Problem
from goldsearch.core.registry import FunctionRegistry, default_registry
from goldsearch.formatting import bounds_string, function_menu, precision_string, solution_string

logger = logging.getLogger(__name__)

app = typer.Typer(help="goldsearch: golden-section minimum search")


def _resolve_root(root: Path | None) -> Path:
    return root or get_root()


# ── Shared functions (importable by API routes) ──


def list_functions_fn(registry: FunctionRegistry | None = None) -> list[dict]:
    """Return [{index, name}] for every registered function."""
    if registry is None:
        registry = default_registry()
    return [{"index": index, "name": name} for index, name in registry.items()]


def solve_fn(
    function: int,
    left: float,
    right: float,
    precision: int,
    registry: FunctionRegistry | None = None,
) -> dict:
    """Run one search on a fresh Problem. Raises SearchError on failure."""
    if registry is None:
        registry = default_registry()
    fn = registry.get(function)
    problem = Problem()
    problem.set_bounds(left, right)
    problem.set_precision(precision)
    minimum = problem.find_minimum(fn)
    return {
        "function": function,
        "name": fn.name,
        "left": problem.left,
        "right": problem.right,
        "precision": problem.precision,
        "epsilon": problem.epsilon,
        "minimum": minimum,
        "value": fn.evaluate(minimum),
        "iterations": problem.iterations,
        "summary": solution_string(problem),
    }


def session_defaults_fn(root: Path | None = None) -> dict:
    """Session defaults from the settings file (or built-in defaults)."""
    return load_settings(settings_path(_resolve_root(root)))


def show_config_fn(root: Path | None = None) -> dict:
    """Return resolved configuration."""
    from goldsearch.config import log_level
    from goldsearch.core.solver import ITERATION_LIMIT

    resolved = _resolve_root(root)
    path = settings_path(resolved)
    return {
        "root": str(resolved),
        "settings_path": str(path),
        "settings_exist": path.is_file(),
        "defaults": load_settings(path),
        "iteration_limit": ITERATION_LIMIT,
        "log_level": log_level(),
    }


# ── Interactive menu ──

CMD_QUIT, CMD_FUNC, CMD_RANGE, CMD_PRECISION, CMD_SOLVE, CMD_COUNT = range(6)


def _read_line(prompt: str) -> str:
    return typer.prompt(prompt, default="", show_default=False, prompt_suffix="")


def _parse(text: str, kind: type):
    try:
        return kind(text.strip())
    except ValueError:
        raise typer.BadParameter("Input error")


def _read_choice(lowest: int, highest: int) -> int:
    """Prompt until an integer in [lowest, highest] is entered."""
    while True:
        try:
            choice = _parse(_read_line("Command:> "), int)
        except typer.BadParameter:
            continue
        if lowest <= choice <= highest:
            return choice


class MenuSession:
    """One interactive session: a registry, a Problem and the selected function."""

    def __init__(
        self,
        registry: FunctionRegistry | None = None,
        problem: Problem | None = None,
        current: int = 0,
    ):
        self.registry = registry if registry is not None else default_registry()
        self.problem = problem if problem is not None else Problem()
        self.registry.get(current)
        self.current = current

    @classmethod
    def from_settings(cls, settings: dict) -> "MenuSession":
        problem = Problem(
            left=float(settings["left"]),
            right=float(settings["right"]),
            precision=int(settings["precision"]),
        )
        return cls(problem=problem, current=int(settings["function"]))

    def read_selection(self) -> int:
        typer.echo(f"{CMD_QUIT}] Quit")
        typer.echo(f"{CMD_FUNC}] Select function (selected: {self.registry.get(self.current).name})")
        typer.echo(f"{CMD_RANGE}] Select interval (selected: {bounds_string(self.problem)})")
        typer.echo(f"{CMD_PRECISION}] Select precision (selected: {precision_string(self.problem)})")
        typer.echo(f"{CMD_SOLVE}] Find minimum")
        return _read_choice(CMD_QUIT, CMD_COUNT - 1)

    def select_function(self) -> None:
        typer.echo("0] Back")
        for row in function_menu(self.registry):
            typer.echo(row)
        choice = _read_choice(0, self.registry.size())
        if choice > 0:
            self.current = choice - 1
            typer.echo(f"Selected {self.registry.get(self.current).name}")
        else:
            typer.echo("Cancelled")

    def select_range(self) -> None:
        typer.echo("An empty line keeps the current value (in parentheses)")
        a, b = self.problem.left, self.problem.right
        s = _read_line(f"Left end of the interval ({a}): ")
        if s:
            a = _parse(s, float)
        s = _read_line(f"Right end of the interval ({b}): ")
        if s:
            b = _parse(s, float)
        self.problem.set_bounds(a, b)
        typer.echo(f"Interval set to {bounds_string(self.problem)}")

    def select_precision(self) -> None:
        prec = _parse(_read_line("Enter precision (digits after the decimal point): "), int)
        self.problem.set_precision(prec)
        typer.echo(f"Precision set to {precision_string(self.problem)}")

    def solve(self) -> None:
        fn = self.registry.get(self.current)
        try:
            self.problem.find_minimum(fn)
        except SearchError as e:
            logger.info("Search for %s failed: %s", fn.name, e)
            typer.echo(f"* {e}", err=True)
            return
        typer.echo(solution_string(self.problem))

    def run(self) -> None:
        """Main menu loop; returns when the user picks Quit."""
        actions = {
            CMD_FUNC: self.select_function,
            CMD_RANGE: self.select_range,
            CMD_PRECISION: self.select_precision,
            CMD_SOLVE: self.solve,
        }
        while True:
            cmd = self.read_selection()
            if cmd == CMD_QUIT:
                return
            try:
                actions[cmd]()
            except typer.BadParameter as e:
                typer.echo(f"* {e.message}", err=True)
            _read_line("Press <Enter>...")


# ── CLI commands ──


@app.command()
def version():
    """Show goldsearch version."""
    typer.echo(f"goldsearch v{__version__}")


@app.command("functions")
def list_functions():
    """List the available functions with their indices."""
    typer.echo(f"{'Index':>5}  {'Name'}")
    typer.echo("-" * 30)
    for f in list_functions_fn():
        typer.echo(f"{f['index']:>5}  {f['name']}")


@app.command()
def solve(
    function: Optional[int] = typer.Option(None, "--function", "-f", help="Function index"),
    left: Optional[float] = typer.Option(None, help="Left end of the interval"),
    right: Optional[float] = typer.Option(None, help="Right end of the interval"),
    precision: Optional[int] = typer.Option(None, "--precision", "-p", help="Digits after the decimal point"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    root: Optional[Path] = typer.Option(None, help="Project root override"),
):
    """Find the minimum of a function on an interval."""
    try:
        defaults = session_defaults_fn(root)
        args = (
            int(defaults["function"] if function is None else function),
            float(defaults["left"] if left is None else left),
            float(defaults["right"] if right is None else right),
            int(defaults["precision"] if precision is None else precision),
        )
    except (KeyError, TypeError, ValueError) as e:
        typer.echo(f"Error: bad settings: {e}", err=True)
        raise typer.Exit(1)

    try:
        result = solve_fn(*args)
    except SearchError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if as_json:
        typer.echo(json.dumps(result))
        return
    typer.echo(f"Function:  {result['name']}")
    typer.echo(f"Interval:  [{result['left']};{result['right']}]")
    typer.echo(f"Epsilon:   {result['epsilon']}")
    typer.echo(result["summary"])


@app.command()
def menu(
    root: Optional[Path] = typer.Option(None, help="Project root override"),
):
    """Interactive menu session."""
    try:
        session = MenuSession.from_settings(session_defaults_fn(root))
    except (SearchError, KeyError, TypeError, ValueError) as e:
        typer.echo(f"Error: bad settings: {e}", err=True)
        raise typer.Exit(1)
    session.run()


@app.command("config")
def show_config(
    root: Optional[Path] = typer.Option(None, help="Project root override"),
):
    """Show resolved goldsearch configuration."""
    cfg = show_config_fn(root)
    d = cfg["defaults"]
    typer.echo(f"Root:            {cfg['root']}")
    typer.echo(f"Settings file:   {cfg['settings_path']} ({'exists' if cfg['settings_exist'] else 'not found'})")
    typer.echo(f"Function:        {d['function']}")
    typer.echo(f"Interval:        [{d['left']};{d['right']}]")
    typer.echo(f"Precision:       {d['precision']}")
    typer.echo(f"Iteration limit: {cfg['iteration_limit']}")
    typer.echo(f"Log level:       {cfg['log_level']}")


@app.command()
def run(
    host: str = typer.Option("127.0.0.1", help="Bind address"),
    port: int = typer.Option(9000, help="Port"),
):
    """Start the HTTP server."""
    import uvicorn
    from goldsearch.main import create_app

    typer.echo(f"Starting goldsearch on {host}:{port}")
    uvicorn.run(create_app(), host=host, port=port)


def main():
    app()
