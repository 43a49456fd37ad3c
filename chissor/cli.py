"""
Command line interface for chissor.

Usage:
    python -m chissor.cli "分词测试案例"                 # segment
    python -m chissor.cli -m tag "分词测试案例"          # part-of-speech tags
    python -m chissor.cli -d my_dict.txt -s " / " TEXT   # custom dictionary
    python -m chissor.cli batch -o out/ -m search a.txt b.txt
    python -m chissor.cli shell                          # interactive session
"""

import argparse
import logging
import shlex
import sys
from pathlib import Path
from typing import Optional, TextIO

import jieba

from chissor import __version__, settings
from chissor.app import App
from chissor.errors import ChissorError
from chissor.labels import set_locale
from chissor.models import SegmentationResult
from chissor.operations import TextOperation
from chissor.registry import DictionaryRegistry

MODES = [op.value for op in TextOperation]


def configure_logging(verbose: bool = False):
    level = logging.INFO if verbose else getattr(logging, settings.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')
    jieba.setLogLevel(level)


def add_common_arguments(parser: argparse.ArgumentParser):
    """Options shared by the default command and batch."""
    parser.add_argument(
        '-m', '--mode',
        choices=MODES,
        default=TextOperation.SEGMENT.value,
        help='Operation to apply (default: segment)',
    )

    parser.add_argument(
        '-s', '--separator',
        default=settings.DEFAULT_SEPARATOR,
        metavar='SEP',
        help='Separator between output items (default: newline)',
    )

    parser.add_argument(
        '--no-hmm',
        action='store_true',
        help='Disable the Hidden Markov model for unknown words',
    )

    parser.add_argument(
        '-d', '--dict',
        action='append',
        default=[],
        metavar='PATH',
        help='Create a dictionary from PATH and select it (repeatable)',
    )

    parser.add_argument(
        '-u', '--use',
        metavar='NAME',
        help='Select the dictionary labelled NAME',
    )

    parser.add_argument(
        '-l', '--load',
        action='append',
        default=[],
        metavar='PATH',
        help='Merge vocabulary from PATH into the selected dictionary (repeatable)',
    )

    parser.add_argument(
        '-a', '--add',
        action='append',
        default=[],
        metavar='"WORD [FREQ] [TAG]"',
        help="Add a word to the selected dictionary (repeatable). Fields are positional; "
             "use '' to skip the frequency, e.g. \"榴莲 '' nz\"",
    )

    parser.add_argument(
        '--locale',
        choices=settings.AVAILABLE_LOCALES,
        help='Language for dictionary labels',
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log progress information',
    )


def build_app(parsed: argparse.Namespace, registry: Optional[DictionaryRegistry] = None) -> App:
    """Create the App and apply dictionary options in order: dict, use, load, add."""
    if parsed.locale:
        set_locale(parsed.locale)

    app = App(registry)
    app.separator = parsed.separator
    app.use_hmm = not parsed.no_hmm

    for path in parsed.dict:
        if app.new_dictionary(Path(path)):
            app.select_dictionary(len(app.registry) - 1)

    if parsed.use:
        index = app.registry.find(parsed.use)
        if index is None:
            app.notifications.record("select", ChissorError(
                f"no dictionary named {parsed.use!r} (available: {', '.join(app.registry.names())})"
            ))
        else:
            app.select_dictionary(index)

    for path in parsed.load:
        app.load_dictionary(Path(path))

    for spec in parsed.add:
        try:
            fields = shlex.split(spec)
        except ValueError as e:
            app.notifications.record("add", e)
            continue
        app.word, app.freq, app.tag = (fields + ['', '', ''])[:3]
        app.add_word()

    return app


def report_errors(app: App, stream: Optional[TextIO] = None) -> int:
    """Print and dismiss open error records. Returns how many were printed."""
    stream = stream or sys.stderr
    records = app.notifications.open_records()
    for record in records:
        print(f"{record.title}: {record.message}", file=stream)
        record.open = False
    app.notifications.dismiss_closed()
    return len(records)


# ============================================================================
# Subcommands
# ============================================================================

def main_batch(args: list, registry: Optional[DictionaryRegistry] = None) -> int:
    """CLI entry point for the batch subcommand."""
    parser = argparse.ArgumentParser(
        description='Apply one operation to many files, writing one output file per input',
        prog='chissor batch',
    )

    parser.add_argument(
        'files',
        nargs='+',
        help='Input text files',
    )

    parser.add_argument(
        '-o', '--output-dir',
        required=True,
        metavar='DIR',
        help='Directory for the output files (existing files are never overwritten)',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Print a JSON report',
    )

    add_common_arguments(parser)
    parsed = parser.parse_args(args)
    configure_logging(parsed.verbose)

    app = build_app(parsed, registry)
    if report_errors(app):
        return 1

    output_dir = Path(parsed.output_dir)
    if not output_dir.is_dir():
        print(f"Error: output directory not found: {output_dir}", file=sys.stderr)
        return 1

    report = app.batch([Path(f) for f in parsed.files], output_dir, TextOperation(parsed.mode))

    if parsed.json:
        print(report.model_dump_json(indent=2))
    else:
        for path in report.written:
            print(path)

    return 1 if report_errors(app) else 0


SHELL_HELP = """\
Commands:
  dicts                    list dictionaries (* marks the selected one)
  select N|NAME            select a dictionary
  new PATH                 create a dictionary from a file
  load PATH                merge a file into the selected dictionary
  add WORD [FREQ] [TAG]    add a word to the selected dictionary
  remove                   remove the selected dictionary
  input TEXT               set the input text
  import PATH              read the input text from a file
  export PATH              write the last output to a file
  segment|segment-granular|search|tag [TEXT]
                           run an operation on TEXT or the input text
  sep [SEP]                set the separator (empty for newline)
  hmm on|off               toggle the Hidden Markov model
  batch OUTDIR MODE FILE...
                           process files into OUTDIR
  locale LOCALE            switch dictionary labels language
  help                     show this help
  quit                     leave the shell"""


def run_shell_command(app: App, line: str, stdout: TextIO) -> bool:
    """Execute one shell line. Returns False when the session should end."""
    try:
        words = shlex.split(line)
    except ValueError as e:
        app.notifications.record("shell", e)
        return True
    if not words:
        return True

    command, rest = words[0], words[1:]

    if command in ('quit', 'exit'):
        return False
    elif command == 'help':
        print(SHELL_HELP, file=stdout)
    elif command == 'dicts':
        for index, name in enumerate(app.registry.names()):
            marker = '*' if index == app.registry.selected_index else ' '
            print(f"{marker} {index}: {name}", file=stdout)
    elif command == 'select' and rest:
        target = ' '.join(rest)
        index = int(target) if target.isdigit() else app.registry.find(target)
        if index is None or not 0 <= index < len(app.registry):
            app.notifications.record("select", ChissorError(f"no dictionary {target!r}"))
        else:
            app.select_dictionary(index)
    elif command == 'new' and rest:
        app.new_dictionary(Path(rest[0]))
    elif command == 'load' and rest:
        app.load_dictionary(Path(rest[0]))
    elif command == 'add' and rest:
        app.word, app.freq, app.tag = (rest + ['', ''])[:3]
        app.add_word()
    elif command == 'remove':
        app.remove_dictionary()
    elif command == 'input':
        app.input = ' '.join(rest)
    elif command == 'import' and rest:
        app.import_text(Path(rest[0]))
    elif command == 'export' and rest:
        app.export_text(Path(rest[0]))
    elif command in MODES:
        if rest:
            app.input = ' '.join(rest)
        print(app.run(TextOperation(command)), file=stdout)
    elif command == 'sep':
        app.separator = ' '.join(rest)
    elif command == 'hmm' and rest and rest[0] in ('on', 'off'):
        app.use_hmm = rest[0] == 'on'
    elif command == 'batch' and len(rest) >= 3 and rest[1] in MODES:
        report = app.batch([Path(p) for p in rest[2:]], Path(rest[0]), TextOperation(rest[1]))
        for path in report.written:
            print(path, file=stdout)
    elif command == 'locale' and rest:
        try:
            set_locale(rest[0])
        except ValueError as e:
            app.notifications.record("locale", e)
    else:
        app.notifications.record("shell", ChissorError(f"unknown command: {line.strip()}"))
    return True


def run_shell(app: App, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
              stderr: Optional[TextIO] = None):
    """Read commands until EOF or quit, reporting errors after each one."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    prompt = 'chissor> ' if stdin.isatty() else ''
    while True:
        if prompt:
            print(prompt, end='', file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            break
        keep_going = run_shell_command(app, line, stdout)
        report_errors(app, stderr)
        if not keep_going:
            break


def main_shell(args: list, registry: Optional[DictionaryRegistry] = None) -> int:
    """CLI entry point for the shell subcommand."""
    parser = argparse.ArgumentParser(
        description='Interactive segmentation session',
        prog='chissor shell',
    )
    parser.add_argument('--verbose', action='store_true', help='Log progress information')
    parsed = parser.parse_args(args)
    configure_logging(parsed.verbose)

    app = App(registry)
    report_errors(app)
    run_shell(app)
    return 0


def main(args: Optional[list] = None, registry: Optional[DictionaryRegistry] = None) -> int:
    """Main CLI entry point."""
    args_list = args if args is not None else sys.argv[1:]

    if args_list and args_list[0] == 'batch':
        return main_batch(args_list[1:], registry)
    if args_list and args_list[0] == 'shell':
        return main_shell(args_list[1:], registry)

    parser = argparse.ArgumentParser(
        description='Command line interface for Chissor (Chinese word segmentation)',
        prog='chissor',
        epilog='Subcommands:\n  chissor batch      Process files into an output directory\n  chissor shell      Interactive session',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        'text',
        nargs='*',
        help='Chinese text to process',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Print the result as JSON',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    add_common_arguments(parser)
    parsed = parser.parse_args(args_list)

    if parsed.version:
        print(f'chissor {__version__}')
        return 0

    text = ' '.join(parsed.text).strip() if parsed.text else ''
    if not text:
        parser.print_help()
        return 1

    configure_logging(parsed.verbose)

    app = build_app(parsed, registry)
    if report_errors(app):
        return 1

    app.input = text
    mode = TextOperation(parsed.mode)

    if parsed.json:
        result = SegmentationResult.from_engine(
            app.registry.selected.engine, mode, text,
            use_hmm=app.use_hmm, dictionary=app.registry.selected.label,
        )
        print(result.model_dump_json(indent=2))
    else:
        print(app.run(mode))

    return 0


if __name__ == '__main__':
    sys.exit(main())
