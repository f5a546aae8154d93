"""Batch grammar-check pipeline: JSONL or plain-text lines in, CSV out."""

import json
import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Iterator, Optional

import pandas as pd
from tqdm import tqdm

from .checker import LaoGrammarChecker
from .config import Config
from .models import DocumentMetadata, LineResult
from .utils.text_normalizer import sanitize_text

logger = logging.getLogger(__name__)

FULL_FILE_NAME = "All_Words"

COLUMNS = [
    "Word",
    "Start_Index",
    "End_Index",
    "Length",
    "Grammar_Correct",
    "Failed_Rule",
    "Record_ID",
    "Source_Line_Number",
    "Word_Order",
]


def extract_text(record: dict, text_fields: list[str]) -> str:
    """Return the first non-empty text field of a record."""
    for field_name in text_fields:
        value = record.get(field_name)
        if value:
            return str(value)
    return ""


def result_to_rows(
    result: LineResult, include_spaces: bool = True, errors_only: bool = False
) -> list[dict]:
    """Flatten a LineResult into CSV rows."""
    rows = []
    for order, (word, rule) in enumerate(zip(result.words, result.failed_rules), 1):
        if not include_spaces and word.word.isspace():
            continue
        if errors_only and word.grammar_correct:
            continue
        rows.append({
            "Word": word.word,
            "Start_Index": word.start_index,
            "End_Index": word.end_index,
            "Length": word.length,
            "Grammar_Correct": word.grammar_correct,
            "Failed_Rule": rule or "",
            "Record_ID": result.metadata.record_id,
            "Source_Line_Number": result.metadata.line_number,
            "Word_Order": order,
        })
    return rows


def check_line(
    checker: LaoGrammarChecker, text: str, metadata: DocumentMetadata
) -> LineResult:
    """Check one text and keep the failing rule name of every word."""
    pairs = checker.diagnose(text)
    return LineResult(
        words=[result for result, _ in pairs],
        metadata=metadata,
        failed_rules=[verdict.rule for _, verdict in pairs],
    )


def _check_record(
    checker: LaoGrammarChecker, line_num: int, record: dict, settings: dict
) -> Optional[LineResult]:
    text = extract_text(record, settings["text_fields"])
    if not text.strip():
        return None
    metadata = DocumentMetadata(
        record_id=str(record.get(settings["id_field"], f"line_{line_num}")),
        line_number=line_num,
    )
    return check_line(checker, text, metadata)


def _process_record_worker(args: tuple) -> tuple[int, list[dict]] | None:
    """Worker for parallel processing. Must be module-level for pickling.

    Args:
        args: (line_num, record, settings)

    Returns:
        (line_num, list of row dicts) or None to skip
    """
    line_num, record, settings = args
    checker = LaoGrammarChecker(rule_set=settings["rule_set"])
    result = _check_record(checker, line_num, record, settings)
    if result is None:
        return None
    rows = result_to_rows(
        result,
        include_spaces=settings["include_spaces"],
        errors_only=settings["errors_only"],
    )
    return (line_num, rows)


class CheckPipeline:
    """Pipeline for grammar-checking Lao text files."""

    def __init__(self, config: Config):
        """Initialize the pipeline.

        Args:
            config: Pipeline configuration
        """
        self.config = config
        self.checker = LaoGrammarChecker(rule_set=config.grammar.rule_set)

    @property
    def settings(self) -> dict:
        """Plain settings passed to record workers."""
        return {
            "rule_set": self.config.grammar.rule_set,
            "text_fields": list(self.config.input.text_fields),
            "id_field": self.config.input.id_field,
            "include_spaces": self.config.output.include_spaces,
            "errors_only": self.config.output.errors_only,
        }

    def _setup_output_dirs(self) -> tuple[Path, Path]:
        """Create output directories based on configuration.

        Returns:
            Tuple of (full_files_dir, single_lines_dir)
        """
        full_dir = self.config.output.output_dir / "Full_Files"
        single_dir = self.config.output.output_dir / "Single_Lines"

        if self.config.output.save_full_files:
            full_dir.mkdir(parents=True, exist_ok=True)
        if self.config.output.save_single_lines:
            single_dir.mkdir(parents=True, exist_ok=True)

        return full_dir, single_dir

    def iter_records(self, input_path: Path) -> Iterator[tuple[int, dict]]:
        """Yield (line_number, record) pairs from the input file.

        Blank lines are skipped; so are JSONL lines that fail to decode.
        """
        with open(input_path, "r", encoding="utf-8") as infile:
            for line_num, line in enumerate(infile, 1):
                if self.config.input.format == "txt":
                    line = line.rstrip("\r\n")
                    if line.strip():
                        yield line_num, {self.config.input.text_fields[0]: line}
                    continue

                line = line.strip()
                if not line:
                    continue
                try:
                    record = json.loads(line)
                except json.JSONDecodeError:
                    logger.warning(f"Skipping undecodable JSON at line {line_num}")
                    continue
                if not isinstance(record, dict):
                    logger.warning(f"Skipping non-object record at line {line_num}")
                    continue
                yield line_num, record

    def process_line(self, text: str, metadata: DocumentMetadata) -> LineResult:
        """Check a single line of text.

        Args:
            text: Input text content
            metadata: Record metadata

        Returns:
            LineResult with checked words and metadata
        """
        return check_line(self.checker, text, metadata)

    def _process_file_sequential(self, input_path: Path) -> dict[int, list[dict]]:
        """Process records one after another."""
        settings = self.settings
        results_by_line = {}
        desc_text = f"Grammar Check ({self.config.grammar.rule_set} rules)"

        for line_num, record in tqdm(self.iter_records(input_path), desc=desc_text):
            result = _check_record(self.checker, line_num, record, settings)
            if result is None:
                continue
            results_by_line[line_num] = result_to_rows(
                result,
                include_spaces=settings["include_spaces"],
                errors_only=settings["errors_only"],
            )
        return results_by_line

    def _process_file_parallel(self, input_path: Path) -> dict[int, list[dict]]:
        """Process records using multiple worker processes."""
        workers = self.config.workers
        settings = self.settings
        tasks = [
            (line_num, record, settings)
            for line_num, record in self.iter_records(input_path)
        ]
        desc_text = (
            f"Grammar Check ({self.config.grammar.rule_set} rules, {workers} workers)"
        )
        results_by_line = {}

        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = {
                executor.submit(_process_record_worker, task): task[0]
                for task in tasks
            }
            for future in tqdm(as_completed(futures), total=len(tasks), desc=desc_text):
                line_num = futures[future]
                result = future.result()
                if result is not None:
                    _, rows = result
                    results_by_line[line_num] = rows

        return results_by_line

    def _write_frame(self, rows: list[dict], path: Path) -> None:
        df = pd.DataFrame(rows, columns=COLUMNS)
        for col in df.select_dtypes(include=["object"]).columns:
            df[col] = df[col].apply(
                lambda x: sanitize_text(x) if isinstance(x, str) else x
            )
        df.to_csv(path, index=False)

    def _save_outputs(
        self, results_by_line: dict[int, list[dict]], full_dir: Path, single_dir: Path
    ) -> None:
        if self.config.output.save_single_lines:
            for line_num in sorted(results_by_line):
                self._write_frame(
                    results_by_line[line_num], single_dir / f"Line_{line_num}.csv"
                )

        if self.config.output.save_full_files:
            all_rows = [
                row
                for line_num in sorted(results_by_line)
                for row in results_by_line[line_num]
            ]
            save_path = full_dir / f"{FULL_FILE_NAME}.csv"
            logger.info(f"Writing {len(all_rows)} words to: {save_path}")
            self._write_frame(all_rows, save_path)

    def process_file(self, input_path: Path) -> int:
        """Check every record of an input file and write CSV output.

        Args:
            input_path: Path to input JSONL or text file

        Returns:
            Number of records processed
        """
        full_dir, single_dir = self._setup_output_dirs()
        logger.info(f"Reading from: {input_path}")

        if self.config.workers <= 1:
            results_by_line = self._process_file_sequential(input_path)
        else:
            results_by_line = self._process_file_parallel(input_path)

        self._save_outputs(results_by_line, full_dir, single_dir)

        error_count = sum(
            1
            for rows in results_by_line.values()
            for row in rows
            if not row["Grammar_Correct"]
        )
        logger.info(
            f"Checked {len(results_by_line)} records, "
            f"{error_count} words flagged as incorrect"
        )
        return len(results_by_line)

    def run(self) -> int:
        """Run the pipeline.

        Returns:
            Number of records processed
        """
        if not self.config.input_file:
            raise ValueError("Input file not specified in configuration")

        if not self.config.input_file.exists():
            raise FileNotFoundError(f"Input file not found: {self.config.input_file}")

        return self.process_file(self.config.input_file)
