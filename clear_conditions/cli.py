"""Main CLI entry point for clearing node conditions."""

from pathlib import Path

import typer
from rich.console import Console

from clear_conditions.client import DEFAULT_KUBECONFIG, ClusterClient
from clear_conditions.exceptions import FatalError
from clear_conditions.gate import confirm
from clear_conditions.logging_config import get_logger, setup_logging
from clear_conditions.models.run import RunPlan
from clear_conditions.reconciler import ConditionReconciler
from clear_conditions.reporter import RunReporter
from clear_conditions.selector import needs_usage, select_nodes

app = typer.Typer(
    name="clear-conditions",
    help="Reset or overwrite the status conditions reported by Kubernetes nodes",
    add_completion=False,
)

console = Console()
logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        from clear_conditions import __version__

        typer.echo(f"clear-conditions version {__version__}")
        raise typer.Exit()


@app.command()
def clear(
    ctx: typer.Context,
    node: str | None = typer.Argument(None, help="Name of the node to clear"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Run without confirmation"),
    all_nodes: bool = typer.Option(False, "--all", "-a", help="Run on all nodes in context"),
    overwrite: bool = typer.Option(
        False, "--overwrite", help="Overwrite conditions with default status"
    ),
    context: str | None = typer.Option(
        None, "--context", "-c", help="Select context/cluster (default: current-context)"
    ),
    kubeconfig: Path = typer.Option(
        DEFAULT_KUBECONFIG,
        "--kubeconfig",
        envvar="KUBECONFIG",
        help="Override kube config file name",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    log_file: str | None = typer.Option(None, "--log-file", help="Path to log file"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """
    Clear unrecognized conditions from a node, or reset its main conditions.

    By default only the Ready, MemoryPressure, DiskPressure and PIDPressure
    conditions are kept and everything else is removed. With --overwrite those
    four are replaced by healthy defaults.

    Examples:
        # Drop stale custom conditions from one node
        clear-conditions worker-1

        # Reset every node in the staging context without prompting
        clear-conditions --all --overwrite --context staging --yes
    """
    setup_logging(verbose=verbose, log_file=Path(log_file) if log_file else None)

    if needs_usage(node, all_nodes):
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)

    try:
        cluster = ClusterClient.from_kubeconfig(kubeconfig, context=context)

        names = select_nodes(cluster, node_name=node, all_nodes=all_nodes)
        if not names:
            console.print(f"[yellow]No nodes found in context '{cluster.context}'[/yellow]")
            raise typer.Exit(code=0)

        plan = RunPlan(
            nodes=tuple(names),
            overwrite=overwrite,
            consent=yes,
            context=cluster.context,
            kubeconfig=str(kubeconfig),
        )

        if not confirm(plan, console):
            console.print("Canceled.")
            raise typer.Exit(code=0)

        logger.info(
            f"Clearing conditions on {len(plan.nodes)} node(s), "
            f"policy={'overwrite' if plan.overwrite else 'prune'}"
        )
        reporter = RunReporter(console, interactive=plan.interactive)
        ConditionReconciler(cluster, reporter, overwrite=plan.overwrite).run(plan.nodes)
        reporter.finish()

    except FatalError as e:
        logger.error(f"Aborting: {e.message}")
        console.print(f"[red]Error:[/red] {e.message}")
        if e.details:
            console.print(f"\n{e.details}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
