#!/usr/bin/env python3
"""
Image to ASCII Converter - Conversion Orchestrator
=================================================
Resolves the output size, runs decode -> resize -> score -> map and writes
the text artifact.

Example:
    >>> from img2ascii import convert
    >>> text = convert('photo.png', 'photo.txt', reverse=True)
"""

import logging
import os
import tempfile
import time
from typing import Optional

from img2ascii.decoder import Source, decode, read_source, source_name
from img2ascii.errors import WriteError
from img2ascii.luminance import score
from img2ascii.mapper import render
from img2ascii.models import CanonicalImage, ConversionConfig, ConversionOptions
from img2ascii.resizer import resize
from img2ascii.sizing import resolve_dimensions


logger = logging.getLogger(__name__)


# =============================================================================
# OUTPUT
# =============================================================================

def write_atomic(destination: str, text: str) -> None:
    """
    Write `text` to `destination` through a temporary file in the same
    directory, renamed into place only after the write succeeds.

    Raises:
        WriteError: The directory or file is not writable
    """
    directory = os.path.dirname(os.path.abspath(destination))
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(prefix='.img2ascii-', suffix='.tmp', dir=directory)
        with os.fdopen(fd, 'w', encoding='ascii', newline='') as f:
            f.write(text)
        os.chmod(tmp_path, 0o644)
        os.replace(tmp_path, destination)
    except (OSError, UnicodeEncodeError) as e:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise WriteError(f"Cannot write {destination}: {e}") from e


def _write_debug_log(path: str, text: str) -> None:
    try:
        with open(path, 'w', encoding='ascii', newline='') as f:
            f.write(text)
    except OSError as e:
        logger.warning("Could not write debug log %s: %s", path, e)


# =============================================================================
# ORCHESTRATOR
# =============================================================================

class Converter:
    """Runs the conversion pipeline under one immutable configuration."""

    def __init__(self, config: Optional[ConversionConfig] = None):
        self.config = config or ConversionConfig()

    def convert_image(self, image: CanonicalImage) -> str:
        """Resize, score and map an already decoded image."""
        target = resolve_dimensions(image.resolution, self.config)
        resized = resize(image, target.width, target.height)
        field = score(resized, self.config.workers)
        return render(field, resized.width, self.config.ramp, self.config.reverse)

    def convert_bytes(self, data: bytes, identifier: str = '') -> str:
        return self.convert_image(decode(data, identifier))

    def render_source(self, source: Source) -> str:
        """Convert `source` and return the text without writing a destination."""
        text = self.convert_bytes(read_source(source), source_name(source))
        self._log_artifact(text)
        return text

    def _log_artifact(self, text: str) -> None:
        if self.config.debug_log:
            _write_debug_log(self.config.debug_log, text)

    def run(self, source: Source, destination: str) -> str:
        """
        Convert `source` and write the result to `destination`.

        Args:
            source: Image path, encoded bytes or binary stream
            destination: Output text file path

        Returns:
            The rendered text

        Raises:
            DecodeError, ResizeError, WriteError: The call is aborted and
                `destination` is left untouched
        """
        started = time.perf_counter()
        name = source_name(source)
        text = self.convert_bytes(read_source(source), name)
        write_atomic(os.fspath(destination), text)

        self._log_artifact(text)

        logger.debug("Converted %s -> %s in %.1f ms", name or '<bytes>', destination,
                     (time.perf_counter() - started) * 1000)
        return text


# =============================================================================
# ENTRY POINTS
# =============================================================================

def convert(source: Source, destination: str, reverse: bool = False,
            **config_kwargs) -> str:
    """Full-art conversion fitted inside the 65x54 box with the default ramp."""
    config = ConversionConfig.default(reverse=reverse, **config_kwargs)
    return Converter(config).run(source, destination)


def convert_banner(source: Source, destination: str, width: int, height: int,
                   **config_kwargs) -> str:
    """Banner-ramp conversion fitted inside a width x height box."""
    config = ConversionConfig.banner(width, height, **config_kwargs)
    return Converter(config).run(source, destination)


def convert_with_options(source: Source, destination: str,
                         options: Optional[ConversionOptions] = None,
                         **config_kwargs) -> str:
    """Conversion with an explicit aspect mode, ramp and reverse flag."""
    config = ConversionConfig.for_options(options or ConversionOptions(), **config_kwargs)
    return Converter(config).run(source, destination)
