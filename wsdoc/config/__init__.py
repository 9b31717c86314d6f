"""Load and validate the YAML configuration for wsdoc builds.

This subpackage parses the project's ``wsdoc.yaml`` file into a
:class:`GeneratorConfig` describing where annotated sources live, how
comments and block sentinels look, which glossary sources and type modules to
load, and where rendered pages go. The primary entry point is
:func:`load_generator_config`; a missing file yields the defaults.

Examples
--------
>>> from pathlib import Path
>>> from wsdoc.config import load_generator_config
>>> config = load_generator_config(Path("wsdoc.yaml"))  # doctest: +SKIP
>>> config.index_path  # doctest: +SKIP
PosixPath('doc/docs.html')
"""

from .loader import load_generator_config
from .models import ConfigError, GeneratorConfig

__all__ = ["ConfigError", "GeneratorConfig", "load_generator_config"]
