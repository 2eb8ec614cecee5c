"""Curated example manifests shipped with the plugin."""

from __future__ import annotations

from types import MappingProxyType

LOCAL_SCHEMA_SOURCE = "local"

# Resource tokens (before any group suffix) that have a curated example.
SUPPORTED_RESOURCE_ALIASES = MappingProxyType(
    {
        "deployment": "Deployment",
        "deployments": "Deployment",
        "deploy": "Deployment",
    }
)

LOCAL_SCHEMA_TEXT = """\
swagger: "2.0"
info:
  title: kubectl-generate curated examples
  version: v0.1.0
paths: {}
definitions:
  io.k8s.config.examples/api.apps.v1.Deployment:
    description: Example Deployment running three nginx replicas.
    type: object
    example: |
      apiVersion: apps/v1
      kind: Deployment
      metadata:
        name: nginx-deployment
        labels:
          app: nginx
      spec:
        replicas: 3
        selector:
          matchLabels:
            app: nginx
        template:
          metadata:
            labels:
              app: nginx
          spec:
            containers:
            - name: nginx
              image: nginx:1.25.3
              ports:
              - containerPort: 80
  io.k8s.config.examples/api.apps.v1beta2.Deployment:
    description: Example Deployment for the apps/v1beta2 API.
    type: object
    example: |
      apiVersion: apps/v1beta2
      kind: Deployment
      metadata:
        name: nginx-deployment
        labels:
          app: nginx
      spec:
        replicas: 3
        selector:
          matchLabels:
            app: nginx
        template:
          metadata:
            labels:
              app: nginx
          spec:
            containers:
            - name: nginx
              image: nginx:1.25.3
              ports:
              - containerPort: 80
  io.k8s.config.examples/api.apps.v1beta1.Deployment:
    description: Example Deployment for the apps/v1beta1 API.
    type: object
    example: |
      apiVersion: apps/v1beta1
      kind: Deployment
      metadata:
        name: nginx-deployment
      spec:
        replicas: 3
        template:
          metadata:
            labels:
              app: nginx
          spec:
            containers:
            - name: nginx
              image: nginx:1.25.3
              ports:
              - containerPort: 80
  io.k8s.config.examples/api.extensions.v1beta1.Deployment:
    description: Example Deployment for the extensions/v1beta1 API.
    type: object
    example: |
      apiVersion: extensions/v1beta1
      kind: Deployment
      metadata:
        name: nginx-deployment
      spec:
        replicas: 3
        template:
          metadata:
            labels:
              app: nginx
          spec:
            containers:
            - name: nginx
              image: nginx:1.25.3
              ports:
              - containerPort: 80
"""
