"""Exceptions raised while deploying contracts."""


class DeploymentError(RuntimeError):
    """A deployment step failed: unreachable node, missing signer or a failed transaction."""
