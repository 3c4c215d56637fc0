"""Operator confirmation before any node is modified."""

from collections.abc import Callable

from rich.console import Console

from clear_conditions.logging_config import get_logger
from clear_conditions.models.run import RunPlan

logger = get_logger(__name__)

PROMPT = "Do you want to continue? [y/N] "
NODES_PER_ROW = 3
NODE_COLUMN_WIDTH = 50


def is_consent(response: str | None) -> bool:
    """Only a lone ``y`` or ``Y`` counts as consent."""
    if response is None:
        return False
    return response.strip().lower() == "y"


def node_rows(nodes) -> list[str]:
    """Lay names out three per row in fixed-width columns, never truncated."""
    rows = []
    for i in range(0, len(nodes), NODES_PER_ROW):
        chunk = nodes[i : i + NODES_PER_ROW]
        rows.append("".join(f"{name:<{NODE_COLUMN_WIDTH}}" for name in chunk).rstrip())
    return rows


def render_summary(plan: RunPlan, console: Console) -> None:
    """Print what is about to happen."""
    if plan.overwrite:
        console.print(
            "[bold yellow]Main conditions will be OVERWRITTEN with default values.[/bold yellow]\n"
        )
    console.print("Clear conditions for:\n")
    console.print(f"Context: {plan.context}", markup=False, highlight=False, soft_wrap=True)
    console.print(f"Kubeconfig: {plan.kubeconfig}", markup=False, highlight=False, soft_wrap=True)
    console.print("Node(s):")

    for row in node_rows(plan.nodes):
        console.print(row, style="cyan", markup=False, highlight=False, soft_wrap=True)
    console.print()


def confirm(
    plan: RunPlan,
    console: Console,
    read_input: Callable[[str], str] | None = None,
) -> bool:
    """
    Decide whether the run may proceed.

    Consent given on the command line skips both the summary and the prompt.
    Otherwise a single line is read; end of input counts as a refusal.

    Args:
        plan: Resolved run plan
        console: Console the summary is printed on
        read_input: Prompt reader, ``console.input`` without markup when None

    Returns:
        True if the run should proceed.
    """
    if plan.consent:
        logger.debug("Confirmation bypassed by --yes")
        return True

    render_summary(plan, console)

    reader = read_input or (lambda prompt: console.input(prompt, markup=False))
    try:
        response = reader(PROMPT)
    except EOFError:
        response = ""

    accepted = is_consent(response)
    logger.debug(f"Confirmation response {response!r} accepted={accepted}")
    return accepted
