'''
wordle_guesses.py

Purpose:
    Given a 5-character Wordle template with a single wildcard position,
    print every candidate guess formed by substituting a letter into that
    position. Useful when you know four of the five squares (or some of them,
    with '_' for the unknowns) and want to scan the possibilities at a glance.

Features:
    - Templates use lowercase letters, '_' for unknown squares, and exactly one
      '.' marking the position to test.
    - Restrict the tested letters with --include, or drop some with --exclude.
    - Guesses are printed in tab-separated rows of a configurable width.
    - Defaults for the letter options and row width can come from a YAML file.

Usage:
    python wordle_guesses.py s.ick
    python wordle_guesses.py .ance --include dbrt
    python wordle_guesses.py cra.e --exclude az -n 3
'''

import sys
import argparse
import yaml
import logging
import re
import string
from types import SimpleNamespace
from typing import Any, Callable, Iterable, Iterator, Mapping, Sequence, TextIO


__version__ = "0.1.0"

# ANSI Color Codes
BLUE = "\033[1;34m"
GREEN = "\033[1;32m"
RESET = "\033[0m"
BOLD = "\033[1m"

# Disable colors if not running in a terminal
if not sys.stdout.isatty():
    BLUE = GREEN = RESET = BOLD = ""


TEMPLATE_LENGTH = 5
BLANK = '_'
MATCH = '.'
ALPHABET = string.ascii_lowercase
DEFAULT_NUM_GUESSES = 5

TEMPLATE_RE = re.compile(
    rf"^[a-z{BLANK}]{{0,4}}{re.escape(MATCH)}[a-z{BLANK}]{{0,4}}$"
)

CONFIG_KEYS = ('include', 'exclude', 'num_guesses')


class MinimalFormatter(logging.Formatter):
    """A logging formatter that removes prefixes for INFO level messages."""

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.INFO:
            return record.getMessage()
        return f"{record.levelname}: {record.getMessage()}"


class ValidationError(ValueError):
    """Raised when a template, letter set, or option value is malformed."""


class TemplateLengthError(ValidationError):
    def __init__(self) -> None:
        super().__init__("template must be 5 characters long")


class TemplateFormatError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            "template must contain only letters, underscores, and a single period"
        )


class InvalidLetterError(ValidationError):
    def __init__(self, letter: str) -> None:
        super().__init__(f"invalid letter: '{letter}'")
        self.letter = letter


class InvalidLineWidthError(ValidationError):
    def __init__(self) -> None:
        super().__init__("num_guesses must be a positive integer")


class ConflictingOptionsError(ValidationError):
    def __init__(self) -> None:
        super().__init__("include and exclude cannot be used together")


class ConfigValueError(ValidationError):
    """A value read from the configuration file failed validation."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"config key '{key}': {reason}")
        self.key = key


class ConfigError(Exception):
    """Raised when a configuration file is invalid."""


def parse_template(raw: str) -> str:
    """
    Validate a template and return it lowercased.

    The template must be exactly 5 characters: letters or '_' with a single
    '.' marking the position to test. Case is ignored on input.

    Raises:
        TemplateLengthError: if the template is not 5 characters long.
        TemplateFormatError: if it has no '.', more than one, or any
            character other than a letter, '_' or '.'.
    """
    if len(raw) != TEMPLATE_LENGTH:
        raise TemplateLengthError()

    template = raw.lower()
    if not TEMPLATE_RE.fullmatch(template):
        raise TemplateFormatError()

    return template


def split_template(template: str) -> tuple[str, str]:
    """Split a validated template into the text before and after the '.'."""
    prefix, _, suffix = template.partition(MATCH)
    return prefix, suffix


def parse_letters(raw: str) -> frozenset[str]:
    """
    Parse a string of letters (e.g. 'dbrt') into a set.

    Each character is one letter; there is no separator. Input is lowercased
    and checked in sorted order, so the error names the first offending
    character in that order.
    """
    letters = sorted(raw.lower())
    for letter in letters:
        if letter not in ALPHABET:
            raise InvalidLetterError(letter)
    return frozenset(letters)


def parse_line_width(raw: Any) -> int:
    """
    Parse the number of guesses per output line; must be a positive integer.

    Any decimal number with an integral value is accepted, so '5', '5.0'
    and '1e1' are all fine. Digit-group underscores ('1_0') are not.
    """
    # bool is an int subclass, but 'true' in a config file is not a width
    if isinstance(raw, bool):
        raise InvalidLineWidthError()
    if isinstance(raw, (int, float)):
        value = raw
    else:
        text = str(raw).strip()
        if '_' in text:
            raise InvalidLineWidthError()
        try:
            value = float(text)
        except ValueError:
            raise InvalidLineWidthError() from None
    if isinstance(value, float) and not value.is_integer():
        raise InvalidLineWidthError()
    if value <= 0:
        raise InvalidLineWidthError()
    return int(value)


def tested_alphabet(
    include: Iterable[str] | None = None,
    exclude: Iterable[str] | None = None,
) -> list[str]:
    """
    Return the letters to substitute into the wildcard position, sorted.

    An include set, when non-empty, is used as-is. Otherwise the full
    alphabet is used minus any excluded letters.
    """
    include = set(include or ())
    exclude = set(exclude or ())

    if include:
        return sorted(include)
    if exclude:
        return [letter for letter in ALPHABET if letter not in exclude]
    return list(ALPHABET)


def capitalize_first(text: str) -> str:
    """Uppercase the first character only; the rest is left untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def generate_guesses(prefix: str, suffix: str, letters: Iterable[str]) -> list[str]:
    """Build one display-ready guess per letter, in the order given."""
    return [capitalize_first(f"{prefix}{letter}{suffix}") for letter in letters]


def format_rows(guesses: Sequence[str], per_line: int) -> Iterator[str]:
    """Yield tab-separated rows of at most `per_line` guesses (no newline)."""
    for start in range(0, len(guesses), per_line):
        yield '\t'.join(guesses[start:start + per_line])


def write_guesses(
    guesses: Iterable[str], per_line: int, out: TextIO | None = None
) -> int:
    """
    Write guesses to `out` one row at a time, as laid out by `format_rows`.

    Every row, including a trailing partial one, ends with a newline.
    Nothing at all is written when there are no guesses.

    Returns:
        int: The number of guesses written.
    """
    if out is None:
        out = sys.stdout

    guesses = list(guesses)
    for row in format_rows(guesses, per_line):
        out.write(f"{row}\n")
    return len(guesses)


def parse_yaml_config(config_path: str) -> dict[str, Any]:
    """
    Parse the YAML configuration file.

    Args:
        config_path (str): Path to the YAML configuration file.

    Returns:
        dict: Parsed configuration (empty if the file is empty).
    """
    try:
        with open(config_path, 'r', encoding='utf-8') as file:
            config = yaml.safe_load(file)
            logging.debug(f"Parsed YAML configuration from '{config_path}'.")
    except FileNotFoundError:
        logging.error(f"Configuration file '{config_path}' not found.")
        sys.exit(1)
    except yaml.YAMLError as e:
        logging.error(f"Error parsing YAML file '{config_path}': {e}")
        sys.exit(1)
    except OSError as e:
        logging.error(f"Error reading '{config_path}': {e}")
        sys.exit(1)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Configuration file '{config_path}' must contain a mapping.")

    for key in config:
        if key not in CONFIG_KEYS:
            logging.warning(f"Ignoring unknown configuration key '{key}'.")
    return {key: config[key] for key in CONFIG_KEYS if key in config}


def _config_letters(config: Mapping[str, Any], key: str) -> frozenset[str] | None:
    value = config.get(key)
    if value is None:
        return None
    # YAML reads bare yes/no/on/off as booleans and digits as numbers
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        value = ''.join(value)
    if not isinstance(value, str):
        raise ConfigValueError(
            key, f"expected a string of letters, got {type(value).__name__} {value!r}"
        )
    try:
        return parse_letters(value)
    except ValidationError as e:
        raise ConfigValueError(key, str(e)) from e


def _config_line_width(config: Mapping[str, Any]) -> int | None:
    value = config.get('num_guesses')
    if value is None:
        return None
    try:
        return parse_line_width(value)
    except ValidationError as e:
        raise ConfigValueError('num_guesses', str(e)) from e


def build_settings(
    template: str,
    include: frozenset[str] | None = None,
    exclude: frozenset[str] | None = None,
    num_guesses: int | None = None,
    config: Mapping[str, Any] | None = None,
) -> SimpleNamespace:
    """
    Merge command-line values over config values into the run settings.

    `template` must already be validated. Config values go through the same
    parsers as command-line values.

    Raises:
        ValidationError: if a config value is malformed, or if include and
            exclude are both set after merging.
    """
    config = config or {}

    # A letter option on the command line replaces both configured letter sets
    if include is None and exclude is None:
        include = _config_letters(config, 'include')
        exclude = _config_letters(config, 'exclude')

    if include and exclude:
        raise ConflictingOptionsError()

    if num_guesses is None:
        num_guesses = _config_line_width(config) or DEFAULT_NUM_GUESSES

    prefix, suffix = split_template(template)
    return SimpleNamespace(
        template=template,
        prefix=prefix,
        suffix=suffix,
        include=include or frozenset(),
        exclude=exclude or frozenset(),
        num_guesses=num_guesses,
    )


def run(settings: SimpleNamespace, out: TextIO | None = None) -> int:
    """Generate and print the guesses described by `settings`."""
    letters = tested_alphabet(settings.include, settings.exclude)
    logging.debug(f"Testing {len(letters)} letters: {''.join(letters)}")

    guesses = generate_guesses(settings.prefix, settings.suffix, letters)
    count = write_guesses(guesses, settings.num_guesses, out)
    logging.info(f"Printed {count} guesses for template '{settings.template}'.")
    return count


def _arg_type(parse: Callable[[str], Any]) -> Callable[[str], Any]:
    """Adapt a validating parser for argparse's `type=`."""

    def wrapper(value: str) -> Any:
        try:
            return parse(value)
        except ValidationError as e:
            raise argparse.ArgumentTypeError(str(e)) from e

    wrapper.__name__ = parse.__name__
    return wrapper


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordle_guesses.py",
        description=f"{BOLD}Given a template, print out a list of potential Wordle guesses.{RESET}",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=f"""{BLUE}Examples:{RESET}
  {GREEN}python wordle_guesses.py s.ick{RESET}
  {GREEN}python wordle_guesses.py .ance --include dbrt{RESET}
  {GREEN}python wordle_guesses.py cra.e --exclude az -n 3{RESET}
""",
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f"%(prog)s {__version__}",
    )

    template_group = parser.add_argument_group(f"{BLUE}TEMPLATE{RESET}")
    template_group.add_argument(
        'template',
        type=_arg_type(parse_template),
        help=(
            "The template to use for generating guesses: 5 characters of letters,\n"
            "'_' for unknown squares, and a single '.' for the position to test."
        ),
    )

    letter_group = parser.add_argument_group(f"{BLUE}LETTER OPTIONS{RESET}")
    letters = letter_group.add_mutually_exclusive_group()
    letters.add_argument(
        '-e', '--exclude',
        type=_arg_type(parse_letters),
        metavar='LETTERS',
        help="Specify letter(s) to exclude from the tested position.",
    )
    letters.add_argument(
        '-i', '--include',
        type=_arg_type(parse_letters),
        metavar='LETTERS',
        help="Specify the only letter(s) to test in the position.",
    )

    output_group = parser.add_argument_group(f"{BLUE}OUTPUT OPTIONS{RESET}")
    output_group.add_argument(
        '-n', '--num_guesses',
        type=_arg_type(parse_line_width),
        metavar='NUMBER',
        help=f"Number of guesses to print per line (default: {DEFAULT_NUM_GUESSES}).",
    )
    output_group.add_argument(
        '-c', '--config',
        type=str,
        help="A YAML file with defaults for include, exclude, and num_guesses.",
    )
    verbosity = output_group.add_mutually_exclusive_group()
    verbosity.add_argument(
        '-v', '--verbose',
        action='store_true',
        help="Show more detailed log messages.",
    )
    verbosity.add_argument(
        '-q', '--quiet',
        action='store_true',
        help="Show only warnings and errors.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """
    Parse the command line, resolve settings, and print the guesses.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    # Log to stderr so stdout carries only guesses
    handler = logging.StreamHandler()
    handler.setFormatter(MinimalFormatter())
    logging.basicConfig(level=log_level, handlers=[handler])

    config: dict[str, Any] = {}
    if args.config:
        try:
            config = parse_yaml_config(args.config)
        except ConfigError as e:
            logging.error(str(e))
            sys.exit(1)
        logging.debug(f"Loaded configuration: {config}")

    try:
        settings = build_settings(
            args.template,
            include=args.include,
            exclude=args.exclude,
            num_guesses=args.num_guesses,
            config=config,
        )
    except ValidationError as e:
        parser.error(str(e))

    logging.debug(f"Resolved settings: {vars(settings)}")
    run(settings)


if __name__ == "__main__":
    main()
