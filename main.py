import sys
import os
import argparse
import logging

from i18nforge_logger import get_logger, set_console_level
logger = get_logger("main")

import i18nforge_config as config
from controllers import ConversionController, LocaleController, MonitorController
from core.conversion_planner import ConversionPlanner
from core.hangul_extractor import HangulExtractor
from core.key_generator import KeyGenerator
from core.locale_merge import LocaleMergeEngine
from core.sheet_data import combine_multiple_locales, write_sheet_csv
from core.text_monitor import TextMonitor
from core.translation_service import DeepTranslatorBackend
from i18nforge_enums import ResultStatus
from i18nforge_exceptions import I18nForgeError
from models.session import SessionContext
from models.settings_model import SettingsModel
from views import ConsoleNotifier, ConsolePrompter


class App:
    """Wires services and controllers for one CLI run."""

    def __init__(self, project_root: str, notifier=None, prompter=None, translator=None,
                 settings: SettingsModel = None):
        self.settings = settings or SettingsModel.instance()
        self.notifier = notifier or ConsoleNotifier()
        self.prompter = prompter or ConsolePrompter()
        self.session = SessionContext()

        self.key_generator = KeyGenerator.from_settings(self.settings, self.notifier)
        self.planner = ConversionPlanner(self.session, self.key_generator)
        self.engine = LocaleMergeEngine(self.session, self.key_generator, self.settings, project_root)
        self.monitor = TextMonitor(HangulExtractor(), self.session, self.settings.debounce_ms)
        self.translator = translator or DeepTranslatorBackend(self.settings.source_language)

        self.monitor_controller = MonitorController(self.monitor, self.notifier)
        self.conversion_controller = ConversionController(
            self.session, self.planner, self.monitor, self.prompter, self.notifier)
        self.locale_controller = LocaleController(
            self.session, self.engine, self.monitor, self.prompter, self.notifier,
            self.translator, self.settings)

    def open(self, file_path: str, excluded_texts=None):
        with open(file_path, 'r', encoding='utf-8') as f:
            text = f.read()
        self.monitor_controller.start(text, file_path)
        for text_range in self.monitor.all_ranges:
            if text_range.text in (excluded_texts or ()):
                self.monitor_controller.exclude(text_range)

    def close(self):
        if self.monitor.is_active:
            self.monitor.stop()
        self.key_generator.detach()


# =============================================================================
# COMMANDS
# =============================================================================

def cmd_scan(app: App, args) -> int:
    app.open(args.file, args.exclude)
    print(f"Pending ({len(app.monitor.pending_ranges)}):")
    for r in app.monitor.pending_ranges:
        print(f"  {r.start}-{r.end}  {r.text}")
    if app.monitor.excluded_ranges:
        print(f"Excluded ({len(app.monitor.excluded_ranges)}):")
        for r in app.monitor.excluded_ranges:
            print(f"  {r.start}-{r.end}  {r.text}")
    print(f"Applied ({len(app.monitor.applied_ranges)}):")
    for r in app.monitor.applied_ranges:
        print(f"  {r.start}-{r.end}  {r.text}")
    return 0


def cmd_preview(app: App, args) -> int:
    app.open(args.file, args.exclude)
    for overlay in app.conversion_controller.preview(args.namespace):
        print(f"  {overlay.start}-{overlay.end}  {overlay.hover_message}")
    return 0


def cmd_convert(app: App, args) -> int:
    app.open(args.file, args.exclude)
    result = app.conversion_controller.convert_all(args.namespace)
    if result.status != ResultStatus.DONE:
        return 0

    output = args.output or args.file
    if not args.yes:
        answer = app.prompter.confirm(f"Write {result.applied_count} change(s) to {output}?", ("y", "n"))
        if answer != "y":
            logger.info("Conversion not written")
            return 1

    with open(output, 'w', encoding='utf-8') as f:
        f.write(result.document_text)
    logger.info(f"Converted source written to {output}")
    return 0


def cmd_generate(app: App, args) -> int:
    app.open(args.file, args.exclude)
    languages = None
    if args.all:
        languages = app.settings.enabled_languages
    elif args.lang:
        languages = args.lang

    batch = app.locale_controller.generate(languages, args.namespace)
    if batch is None:
        return 0
    return 0 if batch.all_succeeded else 1


def cmd_sheet(app: App, args) -> int:
    rows = combine_multiple_locales(args.locale_files)
    if args.output:
        write_sheet_csv(rows, args.output)
    else:
        for row in rows:
            print("\t".join(str(cell) for cell in row))
    return 0


# =============================================================================
# ENTRY POINT
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="i18nforge",
        description="Convert Korean text in source files into translation calls and locale files.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {config.VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output.")
    parser.add_argument("--project-root", default=os.getcwd(),
                        help="Directory that relative locale paths resolve against.")

    sub = parser.add_subparsers(dest="command", required=True)

    def add_file_command(name: str, help_text: str):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("file", help="Source file (.vue, .tsx, .jsx, .ts, .js).")
        p.add_argument("--exclude", action="append", default=[], metavar="TEXT",
                       help="Exclude every occurrence of TEXT (repeatable).")
        return p

    add_file_command("scan", "List pending and applied texts.")

    p = add_file_command("preview", "Show planned conversions without editing.")
    p.add_argument("--namespace", default=None, help="Key namespace; skips the prompt.")

    p = add_file_command("convert", "Replace pending texts with translation calls.")
    p.add_argument("--namespace", default=None, help="Key namespace; skips the prompt.")
    p.add_argument("-o", "--output", default=None, help="Write here instead of in place.")
    p.add_argument("-y", "--yes", action="store_true", help="Write without asking.")

    p = add_file_command("generate", "Write pending texts into locale files.")
    p.add_argument("--namespace", default=None, help="Key namespace; skips the prompt.")
    group = p.add_mutually_exclusive_group()
    group.add_argument("--lang", action="append", choices=sorted(config.SUPPORTED_LANGUAGES),
                       help="Target language (repeatable).")
    group.add_argument("--all", action="store_true", help="All enabled languages.")

    p = sub.add_parser("sheet", help="Combine locale files into one spreadsheet table.")
    p.add_argument("locale_files", nargs="+", help="locales.<lang>.json files.")
    p.add_argument("-o", "--output", default=None, help="CSV output path (default: stdout, tab separated).")

    return parser


COMMANDS = {
    "scan": cmd_scan,
    "preview": cmd_preview,
    "convert": cmd_convert,
    "generate": cmd_generate,
    "sheet": cmd_sheet,
}


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        set_console_level(logging.DEBUG)

    app = App(args.project_root)
    try:
        return COMMANDS[args.command](app, args)
    except I18nForgeError as e:
        logger.error(str(e))
        return 2
    except OSError as e:
        logger.error(f"File error: {e}")
        return 2
    finally:
        app.close()


if __name__ == "__main__":
    sys.exit(main())
