"""CLI entry point: artifact-model.

Subcommands:
    artifact-model describe /path/to/unit          # Print the built descriptor
    artifact-model describe /path/to/unit --json   # Same, as JSON
    artifact-model validate /path/to/unit          # Exit 1 on any build error
"""

from __future__ import annotations

import json
import sys

import click

from artifact_model.core.logging import setup_logging
from artifact_model.exceptions import ArtifactModelError
from artifact_model.factory import ArtifactDescriptorFactory
from artifact_model.models.classloader import ArtifactDescriptor


def _descriptor_to_dict(desc: ArtifactDescriptor) -> dict:
    model = desc.class_loader_model
    return {
        "name": desc.name,
        "root": str(desc.root),
        "min_runtime_version": str(desc.min_runtime_version),
        "config_resources": list(desc.config_resources),
        "absolute_resource_paths": list(desc.absolute_resource_paths),
        "class_loader_model": {
            "urls": list(model.urls),
            "dependencies": [
                {
                    "coordinate": str(dep.coordinate),
                    "scope": dep.scope.value,
                    "location": dep.location,
                }
                for dep in model.dependencies
            ],
            "exported_packages": sorted(model.exported_packages),
            "exported_resources": sorted(model.exported_resources),
        },
    }


def _build_or_exit(unit_root: str) -> ArtifactDescriptor:
    try:
        return ArtifactDescriptorFactory().build(unit_root)
    except ArtifactModelError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """Artifact model: classpath and export surface of deployable units."""
    setup_logging("DEBUG" if verbose else None)


@main.command("describe")
@click.argument("unit_root", type=click.Path(exists=True, file_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
def describe(unit_root: str, as_json: bool) -> None:
    """Build a unit's descriptor and print its class-loader model."""
    desc = _build_or_exit(unit_root)

    if as_json:
        click.echo(json.dumps(_descriptor_to_dict(desc), indent=2))
        return

    model = desc.class_loader_model
    click.echo(f"Unit: {desc.name}")
    click.echo(f"  Minimum runtime version: {desc.min_runtime_version}")
    click.echo("  Configuration resources:")
    for path in desc.absolute_resource_paths:
        click.echo(f"    {path}")
    click.echo(f"  Classpath ({len(model.urls)}):")
    for url in model.urls:
        click.echo(f"    {url}")
    click.echo(f"  Dependencies ({len(model.dependencies)}):")
    for dep in model.dependencies:
        click.echo(f"    {dep.coordinate}  [{dep.scope.value}]")
    if model.exported_packages:
        click.echo(f"  Exported packages: {', '.join(sorted(model.exported_packages))}")
    if model.exported_resources:
        click.echo(f"  Exported resources: {', '.join(sorted(model.exported_resources))}")


@main.command("validate")
@click.argument("unit_root", type=click.Path(exists=True, file_okay=False))
def validate(unit_root: str) -> None:
    """Check that a unit builds; exit 1 with the error otherwise."""
    desc = _build_or_exit(unit_root)
    click.echo(f"OK: {desc.name} ({len(desc.class_loader_model.urls)} classpath entries)")


if __name__ == "__main__":
    main()
