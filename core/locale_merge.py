# -*- coding: utf-8 -*-
"""
I18nForge Locale Merge Engine

Keeps the on-disk locale store in sync with the texts found in source:

1. read + flatten the existing store (missing or broken file = empty store)
2. classify every text as "skip" (key already known) or "translate"
3. optionally translate the "translate" subset
4. build values with {N} placeholders matching the in-source call
5. merge and unflatten
6. serialize, normalize backslashes, write

Keys are produced by the same KeyGenerator/VariableExtractor as the
conversion planner, so stored keys and in-source keys never diverge.
"""

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

import i18nforge_config as config
from core.key_generator import KeyGenerator
from core.text_utils import remove_quotes
from core.variable_extractor import count_placeholders, to_placeholder_value
from i18nforge_enums import SyntaxFamily, ResultStatus
from i18nforge_exceptions import StoreReadError, TranslationError, WriteError, FileOperationError
from i18nforge_logger import get_logger
from interfaces.i_translator import ITranslator
from models.session import SessionContext
from models.text_range import LocaleEntry

logger = get_logger("core.locale_merge")

_JSON_STRING_RE = re.compile(r'"((?:[^"\\]|\\.)*)"(\s*:)?')
_KEY_BACKSLASH_RUN_RE = re.compile(r'\\{3,}')

ProgressCallback = Callable[[str, int, int, str], None]


# =============================================================================
# FLAT / NESTED CONVERSION
# =============================================================================

def flatten_json(obj: Any, prefix: str = "") -> Dict[str, Any]:
    """Flatten a nested JSON object into {dot.path: leaf}."""
    flattened: Dict[str, Any] = {}
    if not isinstance(obj, dict):
        return flattened

    for key, value in obj.items():
        new_key = f"{prefix}.{key}" if prefix else key
        if isinstance(value, dict):
            flattened.update(flatten_json(value, new_key))
        else:
            flattened[new_key] = value
    return flattened


def unflatten_json(flattened: Dict[str, Any]) -> Dict[str, Any]:
    """
    Rebuild the nested tree; each dot segment becomes one level.

    A path used both as a leaf and as a parent resolves last-write-wins.
    """
    result: Dict[str, Any] = {}
    for key, value in flattened.items():
        parts = key.split('.')
        current = result
        for part in parts[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]
        current[parts[-1]] = value
    return result


def normalize_json_output(json_text: str) -> str:
    """
    Collapse doubled backslashes inside values and runs of 3+ backslashes
    inside keys to exactly two.

    A value holding a literal backslash (for example `경로\\d`) comes out as
    an invalid JSON escape. The written store then fails to parse and the
    next read starts from an empty store.
    """
    def _fix(match: re.Match) -> str:
        body, colon = match.group(1), match.group(2)
        if colon:
            key = _KEY_BACKSLASH_RUN_RE.sub(lambda m: '\\\\', body)
            return '"' + key + '"' + colon
        value = body.replace('\\\\', '\\')
        return '"' + value + '"'

    return _JSON_STRING_RE.sub(_fix, json_text)


def serialize_locales(nested: Dict[str, Any]) -> str:
    return normalize_json_output(json.dumps(nested, ensure_ascii=False, indent=config.LOCALE_JSON_INDENT))


# =============================================================================
# RESULTS
# =============================================================================

@dataclass
class FilterResult:
    """Classification of input texts against the existing store."""
    texts_to_translate: List[str] = field(default_factory=list)
    translate_indices: List[int] = field(default_factory=list)
    skipped_texts: List[str] = field(default_factory=list)
    skipped_keys: List[str] = field(default_factory=list)


@dataclass
class GenerationReport:
    """Outcome of generating one language's store."""
    language: str
    path: Optional[Path] = None
    status: ResultStatus = ResultStatus.DONE
    new_keys: List[str] = field(default_factory=list)
    skipped_keys: List[str] = field(default_factory=list)
    translated_count: int = 0
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status != ResultStatus.FAILED


@dataclass
class BatchReport:
    """Outcome of a multi-language run."""
    reports: List[GenerationReport] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return sum(1 for r in self.reports if r.succeeded)

    @property
    def all_succeeded(self) -> bool:
        return self.success_count == len(self.reports)

    @property
    def skipped_by_language(self) -> Dict[str, List[str]]:
        return {r.language: r.skipped_keys for r in self.reports if r.skipped_keys}


def get_language_name(language: str) -> str:
    return config.SUPPORTED_LANGUAGES.get(language, language.upper())


# =============================================================================
# ENGINE
# =============================================================================

class LocaleMergeEngine:
    """
    Merges texts into per-language locale stores without duplicate keys or
    duplicate translation work.
    """

    def __init__(self, session: SessionContext, key_generator: KeyGenerator,
                 settings=None, project_root: Optional[str] = None):
        self.session = session
        self.key_generator = key_generator
        self.settings = settings
        self.project_root = Path(project_root) if project_root else Path.cwd()

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------

    def _setting(self, name: str, default):
        return getattr(self.settings, name, default) if self.settings else default

    def resolve_path(self, path: str) -> Path:
        """Resolve ./ and ../ paths against the project root."""
        if path.startswith('./') or path.startswith('../'):
            return (self.project_root / path).resolve()
        return Path(path)

    def build_file_name(self, language: str) -> str:
        pattern = self._setting('filename_pattern', config.DEFAULT_FILENAME_PATTERN)
        file_name = pattern.replace('{language}', language).replace('{namespace}', self.session.namespace or '')

        file_name = re.sub(r'\.{2,}', '.', file_name)
        file_name = re.sub(r'/{2,}', '/', file_name)
        file_name = re.sub(r'^[./]', '', file_name)
        file_name = re.sub(r'[./]$', '', file_name)

        return file_name or f"locales.{language}.json"

    def resolve_output_path(self, language: str, output_path: Optional[str] = None) -> Path:
        """Store path for a language; an explicit output_path wins."""
        if output_path:
            return Path(output_path)

        file_name = self.build_file_name(language)
        custom_dir = self._setting('locales_output_path', config.DEFAULT_LOCALES_OUTPUT_PATH)
        if custom_dir:
            return self.resolve_path(custom_dir) / file_name
        return self.project_root / file_name

    # -------------------------------------------------------------------------
    # Read
    # -------------------------------------------------------------------------

    def _load_store(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            raise StoreReadError("Locale file not found", file_path=str(path))
        except (OSError, ValueError) as e:
            raise StoreReadError(f"Cannot parse locale file: {e}", file_path=str(path))
        if not isinstance(data, dict):
            raise StoreReadError("Locale file is not a JSON object", file_path=str(path))
        return data

    def read_existing_locales(self, path: Path) -> Dict[str, Any]:
        """Flattened store contents; unreadable stores count as empty."""
        try:
            return flatten_json(self._load_store(path))
        except StoreReadError as e:
            logger.debug(f"Treating store as empty: {e}")
            return {}

    # -------------------------------------------------------------------------
    # Classify / build
    # -------------------------------------------------------------------------

    def key_for(self, family: SyntaxFamily, text: str) -> str:
        return self.key_generator.key_for_text(family, text, self.session.namespace)[0]

    def filter_texts_for_translation(self, family: SyntaxFamily, texts: Sequence[str],
                                     existing_keys) -> FilterResult:
        """
        Classify texts in input order. A key already in the store or already
        produced earlier in this batch is skipped.
        """
        result = FilterResult()
        seen = set()
        for index, text in enumerate(texts):
            key = self.key_for(family, text)
            if key in existing_keys or key in seen:
                result.skipped_texts.append(text)
                result.skipped_keys.append(key)
                continue
            seen.add(key)
            result.texts_to_translate.append(text)
            result.translate_indices.append(index)
        return result

    def source_for_translation(self, family: SyntaxFamily, text: str) -> str:
        """Text sent to the translator: quotes stripped, interpolations masked as {N}."""
        return remove_quotes(to_placeholder_value(family, text))

    def build_locale_entries(self, family: SyntaxFamily, texts: Sequence[str],
                             filtered: FilterResult,
                             translations: Optional[Dict[int, str]] = None) -> List[LocaleEntry]:
        """
        Entries for the "translate" subset.

        translations maps original input index -> translated text.
        """
        entries: List[LocaleEntry] = []
        for index in filtered.translate_indices:
            text = texts[index]
            key, info = self.key_generator.key_for_text(family, text, self.session.namespace)
            value_source = translations.get(index, text) if translations else text

            if info.variables:
                value = to_placeholder_value(family, value_source)
                if count_placeholders(value) != len(info.variables):
                    logger.warning(f"Placeholder mismatch for '{key}' in translation, "
                                   f"keeping source template")
                    value = info.template
            else:
                value = value_source

            entries.append(LocaleEntry(key=key, value=remove_quotes(value),
                                       variables=info.variables or None))
        return entries

    # -------------------------------------------------------------------------
    # Write
    # -------------------------------------------------------------------------

    def write_locales(self, path: Path, existing: Dict[str, Any], entries: Sequence[LocaleEntry]):
        merged = dict(existing)
        for entry in entries:
            merged[entry.key] = entry.value

        content = serialize_locales(unflatten_json(merged))
        try:
            json.loads(content)
        except json.JSONDecodeError as e:
            logger.warning(f"Normalized locale output for {path} is not valid JSON ({e}); "
                           f"existing entries will not be read back on the next run")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Failed to write locale file {path}: {e}")
            raise WriteError(f"Failed to write locale file: {e}", file_path=str(path)) from e
        logger.info(f"Wrote {len(entries)} new key(s) to {path}")

    # -------------------------------------------------------------------------
    # Pipeline
    # -------------------------------------------------------------------------

    def _translate(self, family: SyntaxFamily, filtered: FilterResult, language: str,
                   translator: ITranslator, service_name: str, api_key: str) -> List[str]:
        sources = [self.source_for_translation(family, t) for t in filtered.texts_to_translate]
        logger.info(f"Translating {len(sources)} text(s) to {language} via {service_name}")
        translated = translator.translate(sources, language, service_name, api_key)
        if len(translated) != len(sources):
            raise TranslationError(
                f"Translator returned {len(translated)} result(s) for {len(sources)} text(s)",
                service=service_name, target_lang=language)
        return list(translated)

    def generate(self, family: SyntaxFamily, texts: Sequence[str], language: str,
                 translated_texts: Optional[Sequence[str]] = None,
                 translator: Optional[ITranslator] = None,
                 service_name: str = config.DEFAULT_TRANSLATION_SERVICE,
                 api_key: str = "",
                 output_path: Optional[str] = None) -> GenerationReport:
        """
        Run the full read/classify/translate/merge/write pipeline for one language.

        translated_texts, when given, is aligned to the "translate" subset as
        submitted. Otherwise a non-source language is translated with
        translator. Nothing is written when every text is skipped.

        Raises:
            TranslationError: translation failed or no translator available
            WriteError: the store could not be written
        """
        family = SyntaxFamily(family)
        report = GenerationReport(language=language)
        if not texts:
            report.status = ResultStatus.NO_WORK
            return report

        path = self.resolve_output_path(language, output_path)
        report.path = path
        existing = self.read_existing_locales(path)
        filtered = self.filter_texts_for_translation(family, texts, set(existing))
        report.skipped_keys = list(filtered.skipped_keys)

        if not filtered.texts_to_translate:
            logger.info(f"[{language}] all {len(filtered.skipped_texts)} text(s) already present")
            report.status = ResultStatus.ALL_SKIPPED
            return report

        translations: Optional[Dict[int, str]] = None
        source_language = self._setting('source_language', config.DEFAULT_SOURCE_LANG)
        if translated_texts is None and language != source_language:
            if translator is None:
                raise TranslationError("No translator available", service=service_name, target_lang=language)
            translated_texts = self._translate(family, filtered, language, translator, service_name, api_key)

        if translated_texts is not None:
            if len(translated_texts) != len(filtered.translate_indices):
                raise TranslationError(
                    f"Expected {len(filtered.translate_indices)} translation(s), got {len(translated_texts)}",
                    service=service_name, target_lang=language)
            translations = dict(zip(filtered.translate_indices, translated_texts))
            report.translated_count = len(translations)

        entries = self.build_locale_entries(family, texts, filtered, translations)
        self.write_locales(path, existing, entries)
        report.new_keys = [e.key for e in entries]
        return report

    def generate_all_languages(self, family: SyntaxFamily, texts: Sequence[str],
                               languages: Sequence[str],
                               translator: Optional[ITranslator] = None,
                               service_name: str = config.DEFAULT_TRANSLATION_SERVICE,
                               api_key: str = "",
                               progress: Optional[ProgressCallback] = None) -> BatchReport:
        """
        Generate every language strictly one after another.

        A failure aborts only the affected language; earlier writes stay.
        """
        batch = BatchReport()
        total = len(languages)
        for i, language in enumerate(languages):
            name = get_language_name(language)
            if progress:
                progress(language, i + 1, total, f"Processing {name} ({i + 1}/{total})")
            try:
                report = self.generate(family, texts, language, translator=translator,
                                       service_name=service_name, api_key=api_key)
            except (TranslationError, FileOperationError) as e:
                logger.error(f"[{language}] generation failed: {e.message}")
                report = GenerationReport(language=language, status=ResultStatus.FAILED, error=e.message)
            batch.reports.append(report)
        return batch
