#!filepath: linfit/cli.py
from typing import Optional

import typer
from rich import print

from linfit import __version__, init_logging
from linfit.config import AppConfig
from linfit.datasets import three_cluster_dataset
from linfit.models.registry import build_estimator
from linfit.workflows.solver_comparison import run_solver_comparison

app = typer.Typer(help="linfit: linear models by gradient descent and normal equation")

TEST_POINTS = [
    [0.08, 0.10],
    [0.92, 0.08],
    [0.05, 0.95],
    [0.50, 0.50],
]


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def compare(
    learning_rate: float = typer.Option(0.1, "--learning-rate"),
    iterations: int = typer.Option(2000, "--iterations"),
):
    """
    Gradient descent vs closed form on the 3-cluster dataset
    """
    X, Y = three_cluster_dataset()
    result = run_solver_comparison(
        X, Y, TEST_POINTS, learning_rate=learning_rate, max_iterations=iterations
    )

    print(f"[blue]gradient descent mse={result.gd_mse:.6f}  closed form mse={result.cf_mse:.6f}[/blue]")
    print(result.predictions.to_string(index=False))


@app.command()
def train(config: Optional[str] = typer.Option(None, "--config", "-c")):
    """
    Train the configured estimator on the 3-cluster dataset and print its weights
    """
    cfg = AppConfig.load(config)
    init_logging(cfg.log)

    X, Y = three_cluster_dataset()
    if cfg.estimator.kind == "trajectory":
        # scalar target: is the point in class 1
        Y = Y[:, 1]

    estimator = build_estimator(cfg.estimator)
    print(f"[green]Training {estimator!r}[/green]")
    estimator.train(X, Y)
    print(estimator.get_weights())


if __name__ == "__main__":
    app()

# python -m linfit.cli compare
