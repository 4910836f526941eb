from __future__ import annotations

import csv
import io
from pathlib import Path
from typing import Iterable

from huggingface_hub import hf_hub_download

from whiterabbit.common.http import HttpClient
from whiterabbit.config import Settings
from whiterabbit.corpus.default import DEFAULT_CORPUS
from whiterabbit.logging_utils import init_logger, warning_once

logger = init_logger(__name__)


def default_corpus() -> list[str]:
    return list(DEFAULT_CORPUS)


def parse_csv_line(line: str) -> list[str]:
    return next(csv.reader([line]), [])


def column_values(text: str, column: str, max_rows: int | None = None) -> list[str]:
    text = text.lstrip("\ufeff")
    header = parse_csv_line(next(iter(text.splitlines()), ""))
    if column not in header:
        raise ValueError(f"column {column!r} not found, available: {header}")
    reader = csv.DictReader(io.StringIO(text), fieldnames=header)
    next(reader, None)
    out: list[str] = []
    for row in reader:
        value = (row.get(column) or "").strip()
        if value:
            out.append(value)
            if max_rows and len(out) >= max_rows:
                break
    return out


def fetch_csv(url: str, client: HttpClient | None = None) -> str:
    return (client or HttpClient()).fetch_text(url)


def download_hub_csv(repo_id: str, filename: str) -> str:
    path = hf_hub_download(repo_id=repo_id, filename=filename, repo_type="dataset")
    return Path(path).read_text(encoding="utf-8-sig")


def _is_url(value: str) -> bool:
    return value.startswith("http://") or value.startswith("https://")


def load_corpus(settings: Settings, client: HttpClient | None = None) -> list[str]:
    dataset = settings.hf_dataset
    if not dataset:
        return default_corpus()
    if not settings.hf_column:
        warning_once(logger, "WR_HF_DATASET is set but WR_HF_COLUMN is not; using the default corpus")
        return default_corpus()

    try:
        if _is_url(dataset):
            logger.info("fetching corpus from %s (column %s)", dataset, settings.hf_column)
            text = fetch_csv(dataset, client)
        elif settings.hf_file:
            logger.info("downloading %s from dataset %s", settings.hf_file, dataset)
            text = download_hub_csv(dataset, settings.hf_file)
        else:
            warning_once(logger, f"dataset {dataset!r} is not a URL and WR_HF_FILE is unset; using the default corpus")
            return default_corpus()
        sentences = column_values(text, settings.hf_column, settings.corpus_max_rows)
    except Exception as exc:
        logger.warning("failed to load dataset %s, using the default corpus: %s", dataset, exc)
        return default_corpus()

    if not sentences:
        logger.warning("dataset %s has no text in column %s, using the default corpus", dataset, settings.hf_column)
        return default_corpus()
    logger.info("loaded %d texts from %s", len(sentences), dataset)
    return sentences


def preview(sentences: Iterable[str], limit: int = 3, width: int = 100) -> list[str]:
    out = []
    for text in list(sentences)[:limit]:
        out.append(text if len(text) <= width else text[:width] + "...")
    return out
