"""Cyclopts CLI entrypoint for generating web-service reference documentation.

The ``wsdoc`` console script defined here scans a source tree for annotated
``wsdoc { ... wsdoc }`` comment blocks, renders one HTML reference page per
documented endpoint and writes an index page listing them all. Typical usage
is ``wsdoc src`` from the project root, optionally pointing at a
``wsdoc.yaml`` configuration and at the modules that define payload
dataclasses.

Examples
--------
Generate documentation for the current directory:

>>> from wsdoc.cli import main
>>> main()  # doctest: +SKIP

Document a package whose payload types live in ``myapp.schemas``:

>>> from wsdoc.cli import app
>>> app(["src", "--types", "myapp.schemas", "--output-dir", "public"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_generator_config
from .pipeline import DocPipeline
from .scanner import SourceRootError

DEFAULT_CONFIG = Path("config/wsdoc.yaml")
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)

app = App(name="wsdoc", config=cyclopts.config.Env("WSDOC_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.default
def generate(
    root: typ.Annotated[
        Path, Parameter(help="Directory to scan for annotated sources")
    ] = Path(),
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the wsdoc config", env_var="WSDOC_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="WSDOC_OUTPUT_DIR"),
    ] = None,
    types: typ.Annotated[
        list[str] | None,
        Parameter(help="Modules defining payload dataclasses (repeatable)"),
    ] = None,
) -> None:
    """Generate reference pages and the index for every annotated block.

    Parameters
    ----------
    root : Path, optional
        Directory walked recursively for annotated sources; defaults to the
        current directory.
    config : Path, optional
        Path to the configuration file (``config/wsdoc.yaml``); defaults are
        used when the file does not exist.
    output_dir : Path or None, optional
        Override for the output directory from the configuration.
    types : list[str] or None, optional
        Extra dotted module names whose dataclasses may be referenced by
        ``@input`` and ``@response``.

    Returns
    -------
    None
        Writes rendered artifacts and prints the generated paths.

    Raises
    ------
    SystemExit
        With status 1 when ``root`` is not a directory.
    """
    site_config = load_generator_config(config)
    if output_dir is not None:
        site_config.output_dir = output_dir
    if types:
        site_config.type_modules = [*site_config.type_modules, *types]

    pipeline = DocPipeline(site_config)
    try:
        written = pipeline.run(root)
    except SourceRootError as exc:
        logger.error("Error walking file path %s: %s", root, exc)
        raise SystemExit(1) from exc
    for path in written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Configure logging and invoke the Cyclopts application.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
