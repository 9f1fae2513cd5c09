"""CLI entry point for the version-bump utility."""

import click

from items_api.release.versioning import bump_manifest, classify_commit, read_commit_message


@click.command()
@click.option(
    "--manifest",
    "manifest_path",
    type=click.Path(exists=True, dir_okay=False, writable=True),
    default="package.json",
    show_default=True,
    help="JSON manifest whose 'version' field is bumped.",
)
@click.option(
    "--repo",
    "repo_dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Repository to read the last commit message from (default: current directory).",
)
@click.argument("message", nargs=-1)
def main(manifest_path, repo_dir, message):
    """Bump the manifest version according to a commit message.

    MESSAGE words are joined into the commit message to classify; without
    them the latest git commit message is used.
    """
    commit_message = read_commit_message(" ".join(message), repo_dir=repo_dir)
    level = classify_commit(commit_message)
    new_version = bump_manifest(manifest_path, level)

    # KEY=VALUE form for CI step outputs, then the bare version
    click.echo(f"NEW_VERSION={new_version}")
    click.echo(new_version)


if __name__ == "__main__":
    main()
