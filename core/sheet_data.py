# -*- coding: utf-8 -*-
"""
I18nForge Sheet Data

Pure row transforms between locale stores and spreadsheet tables.
Row 0 is always the header; column 0 is always the key.
"""

import csv
import json
import os
import re
from typing import Any, Dict, List, Sequence

import i18nforge_config as config
from core.locale_merge import flatten_json
from i18nforge_logger import get_logger

logger = get_logger("core.sheet_data")

SHEET_HEADER = ['Key'] + [config.SUPPORTED_LANGUAGES[lang] for lang in config.SHEET_LANGUAGE_ORDER]

_LOCALE_FILE_RE = re.compile(r'locales\.(\w+)\.json')


def language_column(language: str) -> int:
    """Column of a language in the fixed header; unknown languages use the last one."""
    if language in config.SHEET_LANGUAGE_ORDER:
        return config.SHEET_LANGUAGE_ORDER.index(language) + 1
    return len(SHEET_HEADER) - 1


def _empty_row() -> List[str]:
    return [''] * len(SHEET_HEADER)


def convert_json_to_sheet_data(json_data: Dict[str, Any], language: str) -> List[List[str]]:
    """One store as [Key, Korean, English, Chinese, Japanese] rows."""
    column = language_column(language)
    rows = [list(SHEET_HEADER)]
    for key, value in flatten_json(json_data).items():
        row = _empty_row()
        row[0] = key
        row[column] = value
        rows.append(row)
    return rows


def merge_sheet_data(existing: Sequence[Sequence[Any]], new: Sequence[Sequence[Any]],
                     language: str) -> List[List[Any]]:
    """
    Merge new rows into existing rows for one language column.

    A key already present only has that column updated; new keys are
    appended.
    """
    column = language_column(language)
    merged = [list(row) for row in existing] or [list(SHEET_HEADER)]
    index_by_key = {row[0]: i for i, row in enumerate(merged) if i > 0 and row}

    for row in list(new)[1:]:
        key, value = row[0], row[column]
        if key in index_by_key:
            merged[index_by_key[key]][column] = value
        else:
            new_row = _empty_row()
            new_row[0] = key
            new_row[column] = value
            index_by_key[key] = len(merged)
            merged.append(new_row)
    return merged


def language_from_file_name(file_path: str) -> str:
    match = _LOCALE_FILE_RE.search(os.path.basename(file_path))
    return match.group(1) if match else config.DEFAULT_SOURCE_LANG


def combine_multiple_locales(file_paths: Sequence[str]) -> List[List[str]]:
    """
    Combine several locales.<lang>.json files into one table.

    Language columns follow ko, en, zh, ja restricted to the languages
    present. Unreadable files are logged and skipped but their language
    still gets a column.
    """
    languages = set()
    values: Dict[str, Dict[str, str]] = {}

    for path in file_paths:
        language = language_from_file_name(path)
        languages.add(language)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read locale file ({path}): {e}")
            continue
        for key, value in flatten_json(data).items():
            values.setdefault(key, {})[language] = value

    ordered = [lang for lang in config.SHEET_LANGUAGE_ORDER if lang in languages]
    rows = [['Key'] + [config.SUPPORTED_LANGUAGES[lang] for lang in ordered]]
    for key, by_language in values.items():
        rows.append([key] + [by_language.get(lang) or '' for lang in ordered])
    return rows


def write_sheet_csv(rows: Sequence[Sequence[Any]], output_path: str):
    with open(output_path, 'w', encoding='utf-8', newline='') as f:
        csv.writer(f).writerows(rows)
    logger.info(f"Wrote {max(0, len(rows) - 1)} row(s) to {output_path}")
