"""
Runner — top-level orchestration: manifest → definitions → one compile per target.

``build_all`` is the sequential, fail-fast build loop; ``run`` adds root
discovery, manifest loading and the optional receipt; ``main`` is the CLI.
"""
import argparse
import logging
import sys
from pathlib import Path
from pprint import pprint
from typing import List, Optional, Sequence

from chroma.config import settings
from chroma.core.arguments import assemble
from chroma.core.definitions import MacroDefinition, derive
from chroma.errors import (
    BuildError,
    ChromaError,
    CompilerNonSuccessExit,
    CompilerSpawnError,
    ReceiptWriteError,
)
from chroma.io.compiler import CompilerRunner, ensure_output_dir
from chroma.io.manifest import find_project_root, load_manifest
from chroma.io.schema import (
    BuildReceipt,
    BuildStatus,
    Configuration,
    DefinitionEntry,
    TargetResult,
    TargetStatus,
)
from chroma.io.writer import write_receipt
from chroma.policy.profile import BuildProfile

logger = logging.getLogger(__name__)


def build_all(
    config: Configuration,
    root: Path,
    profile: BuildProfile | None = None,
    runner: CompilerRunner | None = None,
    definitions: Optional[Sequence[MacroDefinition]] = None,
) -> List[TargetResult]:
    """
    Compile every target in manifest order, stopping at the first failure.

    Parameters
    ----------
    config : Configuration
        Parsed manifest.
    root : Path
        Project root; the compiler runs with this as its working directory.
    profile : BuildProfile, optional
        Defaults to BuildProfile.default().
    runner : CompilerRunner, optional
        Defaults to a runner for ``profile.compiler``.
    definitions : sequence of MacroDefinition, optional
        Defaults to ``derive(config.package)``.

    Returns
    -------
    list[TargetResult], one per target, all SUCCESS.

    Raises
    ------
    CompilerSpawnError, CompilerNonSuccessExit
        Naming the failing target.  Outputs of earlier targets are kept.
    """
    if profile is None:
        profile = BuildProfile.default()
    if runner is None:
        runner = CompilerRunner(profile.compiler)
    if definitions is None:
        definitions = derive(config.package)

    results: List[TargetResult] = []

    for target in config.targets:
        args = assemble(definitions, config.package.edition, target, profile.output_dir)
        command = runner.command(args)
        logger.info("Compiling %s (%s)", target.name, target.path)

        try:
            outcome = runner.run(args, cwd=root)
        except (OSError, ValueError) as e:
            # ValueError: arguments the OS cannot take, e.g. an embedded NUL
            logger.error("Could not start %s for %s: %s", runner.executable, target.name, e)
            results.append(TargetResult(
                name=target.name,
                command=command,
                status=TargetStatus.SPAWN_ERROR,
            ))
            raise CompilerSpawnError(
                target.name,
                f"Error when compiling {target.name}: cannot start {runner.executable}: {e}",
                results,
            ) from e

        status = TargetStatus.SUCCESS if outcome.ok else TargetStatus.FAILED
        results.append(TargetResult(
            name=target.name,
            command=command,
            exit_code=outcome.exit_code,
            duration_ms=outcome.duration_ms,
            status=status,
        ))

        if not outcome.ok:
            logger.error("%s failed with exit code %d", target.name, outcome.exit_code)
            raise CompilerNonSuccessExit(target.name, outcome.exit_code, results)

        logger.info("Built %s/%s in %d ms", profile.output_dir, target.name, outcome.duration_ms)

    return results


def _save_receipt(receipt: BuildReceipt, path: Path) -> None:
    """
    Write the receipt without hiding a build failure.

    After a failed build the write error is only logged so the BuildError
    naming the target still reaches the caller.
    """
    try:
        write_receipt(receipt, path)
    except OSError as e:
        if receipt.status == BuildStatus.FAILED:
            logger.error("Could not write receipt %s: %s", path, e)
            return
        raise ReceiptWriteError(f"could not write receipt {path}: {e}") from e
    logger.info("Receipt saved: %s", path)


def run(
    start: Path | None = None,
    profile: BuildProfile | None = None,
    runner: CompilerRunner | None = None,
    receipt_path: Path | None = None,
    show: bool = False,
) -> BuildReceipt:
    """
    Locate the project, load its manifest and build every target.

    With *show*, the derived definitions and the parsed configuration are
    printed before building.  If *receipt_path* is given the receipt is
    written there whether or not the build succeeds.
    """
    if profile is None:
        profile = BuildProfile.from_settings(settings)
    if runner is None:
        runner = CompilerRunner(profile.compiler)

    root = find_project_root(start or Path.cwd(), profile.manifest_filename)
    config = load_manifest(root, profile.manifest_filename)
    definitions = derive(config.package)

    if show:
        pprint([tuple(d) for d in definitions], sort_dicts=False)
        pprint(config.model_dump(by_alias=True), sort_dicts=False)

    ensure_output_dir(root, profile.output_dir)

    receipt = BuildReceipt(
        project_root=str(root),
        package=config.package,
        definitions=[DefinitionEntry(name=d.name, value=d.value) for d in definitions],
    )

    try:
        receipt.targets = build_all(config, root, profile, runner, definitions)
    except BuildError as e:
        receipt.targets = e.results
        receipt.status = BuildStatus.FAILED
        receipt.failed_target = e.target
        raise
    finally:
        if receipt_path is not None:
            _save_receipt(receipt, receipt_path)

    return receipt


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="chroma — build the [[bin]] targets declared in chroma.toml",
    )
    parser.add_argument(
        "-C", "--directory",
        type=Path,
        default=None,
        help="Start the project-root search here instead of the current directory",
    )
    parser.add_argument(
        "--receipt",
        type=Path,
        default=None,
        help="Write a JSON build receipt to this path",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        run(start=args.directory, receipt_path=args.receipt, show=True)
    except BuildError as e:
        print(f"Error when compiling {e.target}", file=sys.stderr)
        sys.exit(1)
    except ChromaError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
