"""
Batch processing: apply one text operation to many files.

Files are processed one at a time, in the order given. Each input
produces exactly one output in the output directory, named after the
input's base name. The run stops at the first failure and leaves the
outputs already written in place.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Union

from chissor.errors import BatchError
from chissor.operations import TextTransform
from chissor.settings import NEWLINE

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class BatchProcessor:
    """Runs a text transform over input files, writing fresh output files."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def process_file(self, input_path: Path, output_dir: Path, transform: TextTransform) -> Path:
        """
        Transform one file.

        Raises:
            IsADirectoryError: If ``input_path`` is not a regular file.
            FileExistsError: If the output file already exists.
            OSError: On any other read or write failure.
        """
        if not input_path.is_file():
            raise IsADirectoryError(f"not a regular file: {input_path}")
        text = input_path.read_text(encoding=self.encoding).strip()
        output = transform(text)

        output_path = output_dir / input_path.name
        # 'x' refuses to open an existing file
        with open(output_path, "x", encoding=self.encoding) as f:
            f.write(output + NEWLINE)
        return output_path

    def run(self, inputs: Iterable[PathLike], output_dir: PathLike,
            transform: TextTransform) -> List[Path]:
        """
        Transform every input into ``output_dir``.

        Args:
            inputs: Input file paths, processed in order.
            output_dir: Existing directory that receives the outputs.
            transform: Function from trimmed input text to output text.

        Returns:
            Paths of the written outputs, in input order.

        Raises:
            BatchError: On the first failing file. Outputs written before
                the failure are kept and listed in ``BatchError.written``.
        """
        output_dir = Path(output_dir)
        written: List[Path] = []

        for input_path in map(Path, inputs):
            try:
                written.append(self.process_file(input_path, output_dir, transform))
            except (OSError, ValueError) as e:
                logger.info(f"Batch stopped at {input_path} after {len(written)} file(s): {e}")
                raise BatchError(input_path, e, written) from e
            logger.info(f"Wrote {written[-1]}")

        logger.info(f"Batch complete: {len(written)} file(s) written to {output_dir}")
        return written
