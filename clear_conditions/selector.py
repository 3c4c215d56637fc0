"""Resolve the operator's target into a list of node names."""

from clear_conditions.logging_config import get_logger

logger = get_logger(__name__)


def needs_usage(node_name: str | None, all_nodes: bool) -> bool:
    """True when no target was given and the usage text should be shown."""
    return not node_name and not all_nodes


def select_nodes(client, node_name: str | None = None, all_nodes: bool = False) -> list[str]:
    """
    Resolve the nodes a run should touch.

    With ``all_nodes`` the cluster is listed and its order is kept. Otherwise
    the single name is returned as-is; whether it exists is only discovered
    when the node is fetched.

    Args:
        client: Object providing ``list_node_names()``
        node_name: Explicit node name
        all_nodes: Target every node in the active context

    Returns:
        Ordered node names, empty when there is nothing to do.
    """
    if all_nodes:
        names = client.list_node_names()
        logger.debug(f"Selected {len(names)} nodes from cluster listing")
        return names
    if node_name:
        return [node_name]
    return []
