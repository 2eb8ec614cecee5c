"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from kubectl_generate.cluster_connection import open_cluster_connection
from kubectl_generate.configuration import ConfigurationError, build_connection_settings
from kubectl_generate.run_execution import (
    GenerateRequest,
    GenerationRunError,
    execute_generation_run,
)


class CliError(Exception):
    """Custom CLI error."""


@click.command(name="generate", context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="kubectl-generate")
@click.argument("resource_names", metavar="RESOURCE", nargs=-1)
@click.option(
    "--schema",
    "schema_source",
    required=False,
    help="Local file path or URL to load as example schema",
)
@click.option(
    "--api-version",
    "api_version",
    required=False,
    help="Group/version to generate, e.g. apps/v1. Keeps the resolved kind.",
)
@click.option(
    "--kubeconfig",
    required=False,
    help="Path to the kubeconfig file to use for CLI requests.",
)
@click.option("--context", required=False, help="The name of the kubeconfig context to use")
@click.option(
    "-s",
    "--server",
    required=False,
    help="The address and port of the Kubernetes API server",
)
@click.option(
    "--token",
    required=False,
    help="Bearer token for authentication to the API server",
)
@click.option(
    "--certificate-authority",
    "certificate_authority",
    required=False,
    help="Path to a cert file for the certificate authority",
)
@click.option(
    "--insecure-skip-tls-verify",
    "insecure_skip_tls_verify",
    is_flag=True,
    default=False,
    help="Do not check the server's certificate for validity.",
)
@click.option(
    "--request-timeout",
    "request_timeout",
    default="0",
    show_default=True,
    help="How long to wait for a single server request (e.g. 1s, 2m). 0 waits forever.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log progress to stderr.")
def cli(  # pylint: disable=too-many-arguments
    resource_names: tuple[str, ...],
    schema_source: str | None,
    api_version: str | None,
    kubeconfig: str | None,
    context: str | None,
    server: str | None,
    token: str | None,
    certificate_authority: str | None,
    insecure_skip_tls_verify: bool,
    request_timeout: str,
    verbose: bool,
) -> None:
    """Print an example manifest for a Kubernetes RESOURCE."""
    if verbose:
        _configure_logging()
    try:
        connection = build_connection_settings(
            kubeconfig=kubeconfig,
            context=context,
            server=server,
            token=token,
            certificate_authority=certificate_authority,
            insecure_skip_tls_verify=insecure_skip_tls_verify,
            request_timeout=request_timeout,
        )
        outcome = execute_generation_run(
            GenerateRequest(
                resource_names=resource_names,
                connection=connection,
                schema_source=schema_source,
                api_version=api_version,
            ),
            connection_factory=open_cluster_connection,
        )
    except ConfigurationError as exc:
        raise CliError(f"error (ConfigurationError): {exc}") from exc
    except GenerationRunError as exc:
        raise CliError(f"error ({exc.kind}): {exc}") from exc
    click.echo(outcome.example)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="kubectl generate", standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
