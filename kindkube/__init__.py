"""Kubeconfig merging and removal, load balancer config and log extraction for local Kubernetes clusters."""

__version__ = "0.1.0"