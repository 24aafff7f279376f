"""Parallel processing orchestration for SVG documents.

This module parses every path element of a document, one worker task per
path, using ProcessPoolExecutor. Paths share no state, so each task owns
its own cursor and input string.

Key components:
- process_path: Top-level picklable function for parallel execution
- DocumentProcessor: Orchestrator that loads, dispatches and collects
"""

import time
import traceback
from collections.abc import Callable
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Any

from vectorpath.config import GeometryConfig, VectorPathSettings
from vectorpath.core.parser import parse_path
from vectorpath.domain import Outline
from vectorpath.io.reader import PathSource, SvgReader
from vectorpath.utils import ParseLogger, ParseStats, configure_logging


def process_path(
    source_dict: dict[str, Any],
    config_dict: dict[str, Any],
) -> dict[str, Any]:
    """Parse a single path element.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    Deserializes the source, runs the path pipeline, and returns the result.

    Args:
        source_dict: Serialized path source (from PathSource.to_dict())
        config_dict: Serialized geometry configuration

    Returns:
        Dictionary containing either:
        - Success: {"outline": outline_dict, "duration_ms": float}
        - Error: {"error": str, "error_type": str, "label": str,
          "traceback": str, "duration_ms": float}
    """
    start_time = time.time()
    source = PathSource.from_dict(source_dict)

    try:
        outline = parse_path(
            source.d,
            styles=source.styles,
            element_id=source.element_id,
            config=GeometryConfig(**config_dict),
        )
        duration_ms = (time.time() - start_time) * 1000
        return {
            "outline": outline.to_dict(),
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "error": str(e),
            "error_type": type(e).__name__,
            "label": source.label,
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class DocumentProcessor:
    """Orchestrates parallel parsing of an SVG document.

    Manages the complete workflow:
    1. Load the document and collect path elements
    2. Skip empty paths (if configured)
    3. Parse paths in parallel worker processes
    4. Collect outlines in document order and update statistics

    A path that fails to parse is recorded as an error; the other paths
    are still parsed.

    Example:
        processor = DocumentProcessor(VectorPathSettings())
        outlines, stats = processor.process(Path("drawing.svg"), max_workers=4)
    """

    def __init__(self, config: VectorPathSettings) -> None:
        """Initialize the processor.

        Args:
            config: Settings containing geometry, processing and logging config
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=True,
        )
        self.parse_logger = ParseLogger(self.logger)

    def process(
        self,
        svg_path: Path,
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> tuple[list[Outline], ParseStats]:
        """Parse every path of an SVG file.

        Args:
            svg_path: Path to the SVG file
            max_workers: Maximum worker processes (None = config default)
            progress_callback: Optional callback(completed, total, label, success)

        Returns:
            Tuple of (outlines in document order, statistics)

        Raises:
            FileNotFoundError: If the file does not exist
            DocumentLoadError: If the file is not well-formed XML
        """
        self.parse_logger = ParseLogger(self.logger)
        stats = self.parse_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.config.processing.max_workers

        self.logger.info(
            "Starting document processing",
            input=str(svg_path),
            max_workers=max_workers,
        )

        with SvgReader(svg_path) as reader:
            all_sources = list(reader.iter_sources())

        sources: list[PathSource] = []
        for source in all_sources:
            if self.config.processing.skip_empty and not source.d.strip():
                self.parse_logger.log_path_skipped(source.label, "empty path data")
                continue
            sources.append(source)

        self.logger.info(
            "Filtered paths",
            total=len(all_sources),
            to_process=len(sources),
            skipped=stats.skipped_count,
        )

        outlines: list[Outline] = []
        if sources:
            outlines = self._process_paths_parallel(
                sources=sources,
                max_workers=max_workers,
                progress_callback=progress_callback,
            )
        else:
            self.logger.info("No paths to process")

        stats.end_time = time.time()

        self.logger.info(
            "Processing complete",
            processed=stats.processed_count,
            skipped=stats.skipped_count,
            errors=stats.error_count,
            primitives=stats.primitive_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return outlines, stats

    def _process_paths_parallel(
        self,
        sources: list[PathSource],
        max_workers: int | None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> list[Outline]:
        """Parse paths in parallel using ProcessPoolExecutor.

        Args:
            sources: Path elements to parse
            max_workers: Maximum worker processes
            progress_callback: Optional callback(completed, total, label, success)

        Returns:
            Successfully parsed outlines in document order
        """
        config_dict = self.config.geometry.model_dump()
        results: dict[int, Outline] = {}

        self.logger.info(
            "Starting parallel processing",
            path_count=len(sources),
            max_workers=max_workers,
        )

        total = len(sources)
        completed = 0

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            pending_futures = {}
            for source in sources:
                self.parse_logger.log_path_start(source.label)
                future = executor.submit(process_path, source.to_dict(), config_dict)
                pending_futures[future] = source

            for future in as_completed(pending_futures):
                source = pending_futures[future]
                result = future.result()
                success = "error" not in result

                if success:
                    outline = Outline.from_dict(result["outline"])
                    results[source.index] = outline
                    self.parse_logger.log_path_complete(
                        source.label,
                        primitive_count=len(outline.primitives),
                        duration_ms=result["duration_ms"],
                    )
                else:
                    self.parse_logger.log_path_error(
                        source.label,
                        error=Exception(f"{result['error_type']}: {result['error']}"),
                        traceback=result.get("traceback"),
                    )

                completed += 1
                if progress_callback:
                    progress_callback(completed, total, source.label, success)

        return [results[index] for index in sorted(results)]
