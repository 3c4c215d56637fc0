"""Kubernetes API access for node status updates."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from clear_conditions.exceptions import (
    ConfigurationError,
    KubernetesError,
    NodeFetchError,
    NodeUpdateError,
)
from clear_conditions.logging_config import get_logger
from clear_conditions.models.node import Node

logger = get_logger(__name__)

DEFAULT_KUBECONFIG = Path.home() / ".kube" / "config"


class ClusterClient:
    """Thin wrapper over ``CoreV1Api`` for the three calls a run needs."""

    def __init__(self, core_api, context: str | None = None, kubeconfig: Path | None = None):
        self.core_api = core_api
        self.context = context
        self.kubeconfig = kubeconfig

    @classmethod
    def from_kubeconfig(cls, kubeconfig: Path, context: str | None = None) -> "ClusterClient":
        """
        Build a client from a kubeconfig file.

        Args:
            kubeconfig: Path to the kubeconfig file
            context: Context to use; the file's current-context when None

        Returns:
            ClusterClient bound to the resolved context.

        Raises:
            ConfigurationError: If the file cannot be loaded, the context does
                not exist, or the API client cannot be constructed.
        """
        from kubernetes import client, config
        from kubernetes.config import ConfigException

        logger.debug(f"Loading kubeconfig from {kubeconfig}")

        if not Path(kubeconfig).is_file():
            raise ConfigurationError(
                f"Kubeconfig not found: {kubeconfig}",
                "Pass --kubeconfig or set KUBECONFIG to a valid file",
            )

        try:
            with open(kubeconfig) as f:
                kube_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid kubeconfig {kubeconfig}", str(e))
        except OSError as e:
            raise ConfigurationError(f"Failed to read kubeconfig {kubeconfig}", str(e))

        if not isinstance(kube_config, dict):
            raise ConfigurationError(
                f"Invalid kubeconfig {kubeconfig}", "Expected a mapping at the top level"
            )

        # --context wins over current-context, which may be missing or stale
        if context is None:
            context = kube_config.get("current-context") or None
        if context is None:
            raise ConfigurationError(
                f"No current context set in {kubeconfig}",
                "Select one with --context",
            )

        contexts = kube_config.get("contexts") or []
        known = [c["name"] for c in contexts if isinstance(c, dict) and c.get("name")]
        if context not in known:
            raise ConfigurationError(
                f"Context '{context}' not found in {kubeconfig}",
                f"Available contexts: {', '.join(known) or 'none'}",
            )

        try:
            api_client = config.new_client_from_config(
                config_file=str(kubeconfig), context=context, persist_config=False
            )
        except ConfigException as e:
            raise ConfigurationError(f"Cannot configure client for context '{context}'", str(e))
        except Exception as e:
            logger.error(f"Unexpected error building API client: {e}", exc_info=True)
            raise ConfigurationError(
                f"Cannot configure client for context '{context}'", str(e)
            )

        logger.info(f"Using context '{context}'")
        return cls(client.CoreV1Api(api_client), context=context, kubeconfig=kubeconfig)

    def list_node_names(self) -> list[str]:
        """
        List every node name in the active context.

        Returns:
            Node names in the order the API server returned them.

        Raises:
            KubernetesError: If the list call fails.
        """
        from kubernetes.client.rest import ApiException

        try:
            response = self.core_api.list_node()
        except ApiException as e:
            raise KubernetesError("Failed to list nodes", f"{e.status} {e.reason}")
        except Exception as e:
            raise KubernetesError("Failed to list nodes", str(e))

        names = [item.metadata.name for item in response.items]
        logger.debug(f"Listed {len(names)} nodes")
        return names

    def get_node(self, name: str) -> Node:
        """
        Read the current state of a node.

        Raises:
            NodeFetchError: If the node cannot be read or parsed.
        """
        from kubernetes.client.rest import ApiException

        try:
            raw = self.core_api.read_node(name)
        except ApiException as e:
            raise NodeFetchError(name, f"Failed to get node '{name}'", f"{e.status} {e.reason}")
        except Exception as e:
            raise NodeFetchError(name, f"Failed to get node '{name}'", str(e))

        try:
            return Node.from_kubernetes(raw)
        except ValidationError as e:
            raise NodeFetchError(name, f"Node '{name}' has malformed conditions", str(e))

    def update_node_status(self, node: Node) -> None:
        """
        Replace the status subresource of a node.

        Raises:
            NodeUpdateError: If the API server rejects the update.
        """
        from kubernetes.client.rest import ApiException

        try:
            self.core_api.replace_node_status(node.name, node.to_kubernetes())
        except ApiException as e:
            raise NodeUpdateError(
                node.name, f"Failed to update node '{node.name}'", f"{e.status} {e.reason}"
            )
        except Exception as e:
            raise NodeUpdateError(node.name, f"Failed to update node '{node.name}'", str(e))
