"""Print example Kubernetes manifests from cluster and curated schemas."""
